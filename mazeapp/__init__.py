"""Escape The Grid: maze generation with BFS and A* solvers behind a Flask API."""
from .errors import ConfigurationError, MazeError, SerializationError, UnknownAlgorithmError
from .generator import MazeGenerator
from .grid import OPEN, WALL, Cell, Grid, MazeState
from .race import RaceSummary, race, summarize
from .serializer import deserialize_result, deserialize_state, serialize_race, serialize_state
from .solvers import SOLVERS, AStarSolver, BFSSolver, Solver, SolveResult, get_solver
from .store import MazeStore
from .web import create_app

__all__ = [
    "OPEN",
    "WALL",
    "Cell",
    "Grid",
    "MazeState",
    "MazeGenerator",
    "MazeStore",
    "Solver",
    "SolveResult",
    "BFSSolver",
    "AStarSolver",
    "SOLVERS",
    "get_solver",
    "serialize_state",
    "serialize_race",
    "RaceSummary",
    "race",
    "summarize",
    "deserialize_state",
    "deserialize_result",
    "create_app",
    "MazeError",
    "ConfigurationError",
    "UnknownAlgorithmError",
    "SerializationError",
]
