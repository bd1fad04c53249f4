"""Locked step orchestration.

:func:`step` is the only gameplay mutation entry point used by the input loop.
It runs the systems in order while holding ``state.cond`` and signals the
render loop before the lock is released, which gives every redraw a
happens-before edge with the move that triggered it.

Order:

1. ``movement_system`` applies the move (no-op if blocked).
2. ``win_system`` runs only if the player moved.
3. A win ends the game (``quit_system``); any other successful move raises
    the redraw flag.
4. Waiters are notified.
"""

import logging

from grid_maze.actions import Action
from grid_maze.state import GameState
from grid_maze.systems.movement import movement_system
from grid_maze.systems.terminal import quit_system, win_system
from grid_maze.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)


def step(state: GameState, action: Action) -> bool:
    """Apply one movement action under the game lock.

    Args:
        state (GameState): Shared game state.
        action (Action): Directional action.

    Returns:
        bool: True if the game is over after this step. A blocked move
            returns False and signals nothing.

    Raises:
        ValueError: If ``action`` is not a movement action.
    """
    with state.cond:
        if is_terminal_state(state):
            return True

        if not movement_system(state, action):
            return False

        if win_system(state):
            quit_system(state)
        else:
            state.redraw_requested = True
        state.cond.notify_all()
        return state.quit


def request_quit(state: GameState) -> None:
    """End the game without winning and wake the render loop."""
    with state.cond:
        quit_system(state)
        state.cond.notify_all()
    logger.info("Quit requested after %d moves", state.turn)
