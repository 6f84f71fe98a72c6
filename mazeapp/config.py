"""Default Flask settings. Override with MAZEAPP_-prefixed environment variables."""
from .generator import DEFAULT_BRAID_PROBABILITY, DEFAULT_COLS, DEFAULT_ROWS


class Config:
    MAZE_ROWS = DEFAULT_ROWS
    MAZE_COLS = DEFAULT_COLS
    MAZE_BRAID_PROBABILITY = DEFAULT_BRAID_PROBABILITY
    # None seeds from the clock
    MAZE_SEED = None
