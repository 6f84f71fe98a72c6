"""
Maze record encoding.

serialize_state() produces the JSON-ready dict the frontend draws from:

    rows, cols, maze[rows][cols] (0 open / 1 wall),
    start {x, y}, goal {x, y},
    and when a solve result is attached:
    algorithm, path [{x, y}], visitedNodes, timeMs, pathLength, visitedOrder [{x, y}]

x is the row and y the column.
"""
from .errors import ConfigurationError, SerializationError
from .grid import Cell, Grid, MazeState
from .solvers import SolveResult

RESULT_FIELDS = ("path", "visitedNodes", "timeMs", "pathLength", "visitedOrder")


def cell_to_dict(cell):
    return {"x": cell.row, "y": cell.col}


def cell_from_dict(data):
    try:
        return Cell(int(data["x"]), int(data["y"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise SerializationError(f"bad coordinate {data!r}") from exc


def serialize_state(state, result=None):
    record = {
        "rows": state.rows,
        "cols": state.cols,
        "maze": state.grid.to_rows(),
        "start": cell_to_dict(state.start),
        "goal": cell_to_dict(state.goal),
    }
    if result is not None:
        record.update(result_to_dict(result))
    return record


def result_to_dict(result):
    return {
        "algorithm": result.algorithm,
        "path": [cell_to_dict(c) for c in result.path],
        "visitedNodes": result.visited_count,
        "timeMs": result.elapsed_ms,
        "pathLength": result.path_length,
        "visitedOrder": [cell_to_dict(c) for c in result.visited_order],
    }


def serialize_race(state, summary):
    """The maze plus one solve record per solver and the comparison verdict."""
    record = serialize_state(state)
    record.update({
        "results": {r.algorithm: result_to_dict(r) for r in summary.results},
        "winner": summary.winner,
        "fastest": summary.fastest,
        "sameLength": summary.same_length,
        "summary": summary.describe(),
    })
    return record


def deserialize_state(record):
    """Rebuild the MazeState a record was produced from."""
    try:
        rows, cols, maze = int(record["rows"]), int(record["cols"]), record["maze"]
        start, goal = record["start"], record["goal"]
    except (KeyError, TypeError, ValueError) as exc:
        raise SerializationError(f"incomplete maze record: {exc}") from exc
    try:
        grid = Grid.from_rows(maze)
    except (ConfigurationError, TypeError, ValueError) as exc:
        raise SerializationError(f"bad maze matrix: {exc}") from exc
    if (grid.rows, grid.cols) != (rows, cols):
        raise SerializationError(
            f"maze is {grid.rows}x{grid.cols} but record says {rows}x{cols}"
        )
    return MazeState(grid=grid, start=cell_from_dict(start), goal=cell_from_dict(goal))


def deserialize_result(record):
    """Rebuild the SolveResult carried by a record, or None if it has none."""
    if not any(key in record for key in RESULT_FIELDS):
        return None
    try:
        path = [cell_from_dict(c) for c in record["path"]]
        visited_order = [cell_from_dict(c) for c in record["visitedOrder"]]
        elapsed_ms = float(record["timeMs"])
    except (KeyError, TypeError, ValueError) as exc:
        raise SerializationError(f"incomplete solve record: {exc}") from exc
    if record.get("visitedNodes", len(visited_order)) != len(visited_order):
        raise SerializationError("visitedNodes does not match visitedOrder")
    if record.get("pathLength", len(path)) != len(path):
        raise SerializationError("pathLength does not match path")
    return SolveResult(
        algorithm=record.get("algorithm", ""),
        path=path,
        visited_order=visited_order,
        elapsed_ms=elapsed_ms,
    )
