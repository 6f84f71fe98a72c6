"""
Shortest-path solvers over a MazeState.

Both solvers share one interface, ``solve(state) -> SolveResult``, and record
the order in which they finalize cells so the frontend can replay the search.
BFS records a cell when it is discovered; A* records it when it is popped
from the open set. The two traces are not comparable step for step.
"""
import heapq
import logging
import time
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import List

from .errors import UnknownAlgorithmError
from .grid import Cell

log = logging.getLogger(__name__)


@dataclass
class SolveResult:
    algorithm: str
    path: List[Cell] = field(default_factory=list)
    visited_order: List[Cell] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def visited_count(self):
        return len(self.visited_order)

    @property
    def path_length(self):
        return len(self.path)

    @property
    def found(self):
        return bool(self.path)


def reconstruct_path(parent, goal):
    """Walk parent links back from goal; the start cell maps to None."""
    if goal not in parent:
        return []
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    return path


class Solver(ABC):
    name = None

    def solve(self, state):
        """Run the search against one snapshot and time it."""
        t1 = time.perf_counter()
        path, visited_order = self._search(state.grid, state.start, state.goal)
        elapsed_ms = (time.perf_counter() - t1) * 1000.0
        result = SolveResult(self.name, path, visited_order, elapsed_ms)
        log.debug("%s: visited=%d path=%d time=%.3fms",
                  self.name, result.visited_count, result.path_length, elapsed_ms)
        return result

    @abstractmethod
    def _search(self, grid, start, goal):
        """Return (path, visited_order)."""

    def __repr__(self):
        return f"{type(self).__name__}()"


class BFSSolver(Solver):
    """Breadth-first search; shortest path by step count."""

    name = "BFS"

    def _search(self, grid, start, goal):
        q = deque([start])
        parent = {start: None}
        visited_order = [start]
        while q:
            cur = q.popleft()
            if cur == goal:
                return reconstruct_path(parent, goal), visited_order
            for nxt in grid.neighbors(cur):
                if nxt not in parent:
                    parent[nxt] = cur
                    q.append(nxt)
                    visited_order.append(nxt)
        return [], visited_order


class AStarSolver(Solver):
    """
    A* with the Manhattan distance heuristic.

    Open-set entries are (f, g, row, col) tuples, so equal f prefers the
    smaller g and then the smaller coordinates. Relaxing a cell pushes a
    duplicate entry; stale entries are skipped when popped.
    """

    name = "AStar"

    def _search(self, grid, start, goal):
        def h(cell):
            return cell.manhattan(goal)

        open_pq = [(h(start), 0, start.row, start.col)]
        g_score = {start: 0}
        parent = {start: None}
        closed = set()
        visited_order = []

        while open_pq:
            _, g, row, col = heapq.heappop(open_pq)
            cur = Cell(row, col)
            if cur in closed:
                continue
            closed.add(cur)
            visited_order.append(cur)
            if cur == goal:
                return reconstruct_path(parent, goal), visited_order

            ng = g + 1
            for nxt in grid.neighbors(cur):
                if ng < g_score.get(nxt, ng + 1):
                    g_score[nxt] = ng
                    parent[nxt] = cur
                    heapq.heappush(open_pq, (ng + h(nxt), ng, nxt.row, nxt.col))
        return [], visited_order


SOLVERS = {
    BFSSolver.name: BFSSolver(),
    AStarSolver.name: AStarSolver(),
}

_ALIASES = {
    "bfs": "BFS",
    "astar": "AStar",
    "a*": "AStar",
    "a-star": "AStar",
}


def get_solver(name):
    key = _ALIASES.get(str(name).strip().lower())
    if key is None:
        raise UnknownAlgorithmError(name)
    return SOLVERS[key]
