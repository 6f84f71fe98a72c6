"""
BFS vs A* on one maze snapshot.

The winner is the solver that visited fewer cells; a tie goes to the faster
run, and an exact tie to the first solver. "Fastest" looks at time alone.
"""
from dataclasses import dataclass
from typing import List

from .solvers import SolveResult


@dataclass
class RaceSummary:
    results: List[SolveResult]
    winner: str
    fastest: str

    @property
    def same_length(self):
        return len({r.path_length for r in self.results}) == 1

    def describe(self):
        visited = " vs ".join(f"{r.algorithm} {r.visited_count}" for r in self.results)
        times = " vs ".join(f"{r.algorithm} {r.elapsed_ms:.2f}ms" for r in self.results)
        if self.same_length:
            lengths = f"Both shortest path length = {self.results[0].path_length}"
        else:
            lengths = ", ".join(f"{r.algorithm}={r.path_length}" for r in self.results)
        return f"Winner: {self.winner} (visited: {visited}; time: {times}). {lengths}."


def summarize(results):
    if not results:
        raise ValueError("nothing to compare")
    # min() keeps the first of equal keys
    winner = min(results, key=lambda r: (r.visited_count, r.elapsed_ms))
    fastest = min(results, key=lambda r: r.elapsed_ms)
    return RaceSummary(results=list(results), winner=winner.algorithm, fastest=fastest.algorithm)


def race(state, solvers):
    return summarize([solver.solve(state) for solver in solvers])
