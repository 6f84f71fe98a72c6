"""
Maze generation: recursive backtracker carving plus a braiding pass.

Carving works on the odd-coordinate lattice, two cells at a time, so every
passage stays bordered by walls. Braiding then knocks out a fraction of the
walls that separate two open cells, turning dead ends into loops so BFS and
A* explore visibly different regions.
"""
import logging
import random
import time

from .errors import ConfigurationError
from .grid import DIRECTIONS, OPEN, WALL, Cell, Grid, MazeState

log = logging.getLogger(__name__)

DEFAULT_ROWS = 25
DEFAULT_COLS = 38
DEFAULT_BRAID_PROBABILITY = 0.18


class MazeGenerator:
    """
    Builds MazeState instances of a fixed size.

    One random.Random is kept per generator and seeded once, from the clock
    unless a seed or rng is supplied; shuffles and braid draws share it.
    """

    def __init__(self, rows=DEFAULT_ROWS, cols=DEFAULT_COLS,
                 braid_probability=DEFAULT_BRAID_PROBABILITY, seed=None, rng=None):
        if rows < 3 or cols < 3:
            raise ConfigurationError(
                f"maze must be at least 3x3 to have an interior, got {rows}x{cols}"
            )
        if not 0.0 <= braid_probability <= 1.0:
            raise ConfigurationError(
                f"braid probability must be within [0, 1], got {braid_probability}"
            )
        self.rows = rows
        self.cols = cols
        self.braid_probability = braid_probability
        if rng is None:
            rng = random.Random(time.time_ns() if seed is None else seed)
        self.rng = rng

    @property
    def start(self):
        return Cell(1, 1)

    @property
    def goal(self):
        return Cell(self.rows - 2, self.cols - 2)

    def generate(self):
        # Initialize full wall grid
        maze = [[WALL] * self.cols for _ in range(self.rows)]
        start, goal = self.start, self.goal

        self._carve(maze, start)

        maze[start.row][start.col] = OPEN
        maze[goal.row][goal.col] = OPEN
        self._link_goal(maze, goal)

        opened = self._braid(maze)
        grid = Grid(tuple(tuple(row) for row in maze))
        log.debug("generated %dx%d maze: %d open cells, %d walls braided",
                  self.rows, self.cols, grid.open_cells(), opened)
        return MazeState(grid=grid, start=start, goal=goal)

    def _interior(self, row, col):
        return 0 < row < self.rows - 1 and 0 < col < self.cols - 1

    def _shuffled_directions(self):
        dirs = list(DIRECTIONS)
        self.rng.shuffle(dirs)
        return iter(dirs)

    def _carve(self, maze, origin):
        # Each frame keeps its own shuffled directions, which reproduces the
        # visiting order of the recursive backtracker exactly.
        maze[origin.row][origin.col] = OPEN
        stack = [(origin, self._shuffled_directions())]
        while stack:
            cell, dirs = stack[-1]
            direction = next(dirs, None)
            if direction is None:
                stack.pop()
                continue
            drow, dcol = direction
            nrow, ncol = cell.row + 2 * drow, cell.col + 2 * dcol
            if self._interior(nrow, ncol) and maze[nrow][ncol] == WALL:
                # carve wall between
                maze[cell.row + drow][cell.col + dcol] = OPEN
                maze[nrow][ncol] = OPEN
                stack.append((Cell(nrow, ncol), self._shuffled_directions()))

    def _link_goal(self, maze, goal):
        # With both dimensions even the goal sits off the lattice and can be
        # sealed in; its left neighbour always borders a carved lattice cell.
        if goal == self.start:
            return
        for drow, dcol in DIRECTIONS:
            if maze[goal.row + drow][goal.col + dcol] == OPEN:
                return
        maze[goal.row][goal.col - 1] = OPEN

    def _braid(self, maze):
        opened = 0
        for i in range(1, self.rows - 1):
            for j in range(1, self.cols - 1):
                if maze[i][j] != WALL:
                    continue
                horiz_sep = maze[i][j - 1] == OPEN and maze[i][j + 1] == OPEN
                vert_sep = maze[i - 1][j] == OPEN and maze[i + 1][j] == OPEN
                if (horiz_sep or vert_sep) and self.rng.random() < self.braid_probability:
                    maze[i][j] = OPEN
                    opened += 1
        return opened
