"""
Grid model: cell codes, coordinates and the immutable maze snapshot.

Grids are stored row-major as tuples of tuples so a MazeState can be shared
between threads without copying.
"""
from dataclasses import dataclass
from typing import NamedTuple

from .errors import ConfigurationError

# Cell codes
OPEN = 0
WALL = 1

# Expansion order used by both solvers: +row, -row, +col, -col
DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Cell(NamedTuple):
    row: int
    col: int

    def manhattan(self, other):
        return abs(self.row - other.row) + abs(self.col - other.col)


class Grid:
    """Fixed-size rectangle of OPEN/WALL cells."""

    __slots__ = ("rows", "cols", "_cells")

    def __init__(self, cells):
        self._cells = cells
        self.rows = len(cells)
        self.cols = len(cells[0]) if cells else 0

    @classmethod
    def from_rows(cls, rows):
        """
        Build a grid from any rectangular 0/1 matrix.
        Raises ConfigurationError for ragged rows or unknown cell codes.
        """
        frozen = tuple(tuple(int(v) for v in row) for row in rows)
        if not frozen or not frozen[0]:
            raise ConfigurationError("grid must have at least one row and one column")
        width = len(frozen[0])
        for r, row in enumerate(frozen):
            if len(row) != width:
                raise ConfigurationError(f"row {r} has {len(row)} cells, expected {width}")
            for v in row:
                if v not in (OPEN, WALL):
                    raise ConfigurationError(f"row {r} holds invalid cell code {v}")
        return cls(frozen)

    def in_bounds(self, cell):
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_passable(self, cell):
        if not self.in_bounds(cell):
            return False
        row, col = cell
        return self._cells[row][col] == OPEN

    def neighbors(self, cell):
        row, col = cell
        for drow, dcol in DIRECTIONS:
            nxt = Cell(row + drow, col + dcol)
            if self.is_passable(nxt):
                yield nxt

    def open_cells(self):
        return sum(row.count(OPEN) for row in self._cells)

    def to_rows(self):
        return [list(row) for row in self._cells]

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"Grid(rows={self.rows}, cols={self.cols})"


@dataclass(frozen=True)
class MazeState:
    grid: Grid
    start: Cell
    goal: Cell

    @property
    def rows(self):
        return self.grid.rows

    @property
    def cols(self):
        return self.grid.cols
