import pytest

from grid_maze.components import Position
from grid_maze.grid import Grid
from grid_maze.types import Cell


def test_new_grid_is_empty() -> None:
    grid = Grid(4, 2)
    assert grid.dimensions() == (4, 2)
    assert grid.snapshot().shape == (2, 4)
    assert all(
        grid.at(Position(x, y)) == Cell.EMPTY for x in range(4) for y in range(2)
    )


def test_set_then_at_uses_column_row_order() -> None:
    grid = Grid(3, 2)
    grid.set(Position(2, 1), Cell.GOAL)
    assert grid.at(Position(2, 1)) is Cell.GOAL
    assert grid.snapshot()[1, 2] == Cell.GOAL
    assert grid.at(Position(1, 1)) is Cell.EMPTY


@pytest.mark.parametrize(
    "pos",
    [Position(-1, 0), Position(0, -1), Position(3, 0), Position(0, 2), Position(5, 5)],
)
def test_out_of_bounds_fails_fast(pos: Position) -> None:
    grid = Grid(3, 2)
    assert not grid.contains(pos)
    with pytest.raises(IndexError):
        grid.at(pos)
    with pytest.raises(IndexError):
        grid.set(pos, Cell.WALL)


def test_snapshot_is_independent_copy() -> None:
    grid = Grid(2, 2)
    snap = grid.snapshot()
    grid.set(Position(0, 0), Cell.WALL)
    assert snap[0, 0] == Cell.EMPTY
    snap[1, 1] = Cell.PLAYER
    assert grid.at(Position(1, 1)) is Cell.EMPTY


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2)])
def test_invalid_dimensions(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        Grid(width, height)


def test_dimensions_are_only_exposed_as_a_pair() -> None:
    grid = Grid(5, 3)
    assert grid.dimensions() == (5, 3)
    assert not hasattr(grid, "width")
    assert not hasattr(grid, "height")
