import pytest

from mazeapp import Cell, Grid, MazeGenerator, MazeState, create_app

OPEN_5X5 = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 1, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]

# goal at (5, 5) is cut off by walls at (4, 5) and (5, 4)
SEALED_GOAL_7X7 = [
    [1, 1, 1, 1, 1, 1, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 0, 0, 0, 0, 1, 1],
    [1, 0, 0, 0, 1, 0, 1],
    [1, 1, 1, 1, 1, 1, 1],
]


def make_state(rows, start=(1, 1), goal=None):
    grid = Grid.from_rows(rows)
    if goal is None:
        goal = (grid.rows - 2, grid.cols - 2)
    return MazeState(grid=grid, start=Cell(*start), goal=Cell(*goal))


def assert_valid_path(state, path):
    assert path[0] == state.start
    assert path[-1] == state.goal
    assert len(set(path)) == len(path)
    for cell in path:
        assert state.grid.is_passable(cell)
    for a, b in zip(path, path[1:]):
        assert abs(a.row - b.row) + abs(a.col - b.col) == 1


@pytest.fixture
def open_state():
    return make_state(OPEN_5X5)


@pytest.fixture
def sealed_state():
    return make_state(SEALED_GOAL_7X7)


@pytest.fixture
def generated_state():
    return MazeGenerator(seed=1234).generate()


@pytest.fixture
def app():
    return create_app({"TESTING": True, "MAZE_SEED": 7})


@pytest.fixture
def client(app):
    return app.test_client()
