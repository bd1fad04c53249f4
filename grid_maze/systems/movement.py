"""Player movement system.

Moves the player one tile in the requested direction:

1. The candidate position comes from ``state.move_fn``.
2. Candidates outside the grid are rejected (edges behave like walls).
3. Candidates on a ``WALL`` cell are rejected.
4. Otherwise the vacated cell is restored to ``START_MARKER`` if it is the
    start tile, or ``EMPTY`` otherwise, the player position is updated and the
    new cell becomes ``PLAYER``.

A rejected move leaves the state untouched and is not an error.
"""

import logging

from grid_maze.actions import Action, MOVE_ACTIONS
from grid_maze.state import GameState
from grid_maze.types import Cell

logger = logging.getLogger(__name__)


def movement_system(state: GameState, action: Action) -> bool:
    """Apply a directional move if allowed.

    The caller must hold ``state.cond`` so the three-step cell update is never
    observed half done.

    Args:
        state (GameState): Shared game state, mutated in place.
        action (Action): One of ``MOVE_ACTIONS``.

    Returns:
        bool: True if the player actually moved.

    Raises:
        ValueError: If ``action`` is not a movement action.
    """
    if action not in MOVE_ACTIONS:
        raise ValueError(f"Not a movement action: {action!r}")

    grid = state.grid
    entities = state.entities
    next_pos = state.move_fn(state, action)

    if not grid.contains(next_pos):
        logger.debug("Move %s rejected: %s is off the grid", action, next_pos)
        return False

    if grid.at(next_pos) == Cell.WALL:
        logger.debug("Move %s rejected: wall at %s", action, next_pos)
        return False

    current = entities.player
    grid.set(current, Cell.START_MARKER if current == entities.start else Cell.EMPTY)
    entities.move_player(next_pos)
    grid.set(next_pos, Cell.PLAYER)
    state.turn += 1
    return True
