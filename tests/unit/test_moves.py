# tests/unit/test_moves.py

import pytest
from typing import Tuple

from grid_maze.actions import Action, KEY_BINDINGS, MOVE_ACTIONS
from grid_maze.components import Position
from grid_maze.moves import default_move_fn
from tests.test_utils import make_state


@pytest.mark.parametrize(
    "action, expected",
    [
        (Action.UP, (1, 0)),
        (Action.DOWN, (1, 2)),
        (Action.LEFT, (0, 1)),
        (Action.RIGHT, (2, 1)),
    ],
)
def test_default_move_fn_steps_one_tile(
    action: Action, expected: Tuple[int, int]
) -> None:
    state = make_state()
    assert default_move_fn(state, action) == Position(*expected)


def test_default_move_fn_does_not_clip_to_grid() -> None:
    state = make_state("4000\n0003")
    assert default_move_fn(state, Action.UP) == Position(0, -1)
    assert default_move_fn(state, Action.LEFT) == Position(-1, 0)


def test_default_move_fn_does_not_mutate_state() -> None:
    state = make_state()
    before = state.grid.snapshot()
    default_move_fn(state, Action.RIGHT)
    assert state.entities.player == Position(1, 1)
    assert (state.grid.snapshot() == before).all()


def test_default_move_fn_rejects_quit() -> None:
    with pytest.raises(ValueError):
        default_move_fn(make_state(), Action.QUIT)


def test_key_bindings() -> None:
    assert KEY_BINDINGS == {
        "w": Action.UP,
        "a": Action.LEFT,
        "s": Action.DOWN,
        "d": Action.RIGHT,
        "q": Action.QUIT,
    }
    assert Action.QUIT not in MOVE_ACTIONS
