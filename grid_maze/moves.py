"""Built-in movement candidate function.

A *move function* maps (state, action) -> the ``Position`` the player would
occupy after a single directional action. It does not check bounds or walls
and never mutates state; :func:`grid_maze.systems.movement.movement_system`
decides whether the candidate is legal.
"""

from typing import Dict, Tuple

from grid_maze.actions import Action
from grid_maze.components import Position
from grid_maze.state import GameState

DIRECTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}


def default_move_fn(state: GameState, action: Action) -> Position:
    """Single-tile cardinal step.

    Returns the adjacent tile in the direction of ``action`` without bounds
    wrapping, so the result may lie outside the grid.

    Raises:
        ValueError: If ``action`` is not a movement action.
    """
    try:
        dx, dy = DIRECTION_DELTAS[action]
    except KeyError:
        raise ValueError(f"Not a movement action: {action!r}") from None
    pos = state.entities.player
    return Position(pos.x + dx, pos.y + dy)
