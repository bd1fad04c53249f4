"""Terminal condition systems.

``win_system`` sets ``state.won`` exactly once when the objective is met and
never clears it. ``quit_system`` marks the game as over. Both assume the
caller holds ``state.cond``.
"""

import logging

from grid_maze.state import GameState

logger = logging.getLogger(__name__)


def win_system(state: GameState) -> bool:
    """Set ``won`` if the objective function holds (idempotent, monotone).

    Returns:
        bool: The value of ``state.won`` after evaluation.
    """
    if state.won:
        return True

    if state.objective_fn(state):
        state.won = True
        logger.info("Goal reached at %s after %d moves", state.entities.goal, state.turn)
    return state.won


def quit_system(state: GameState) -> None:
    """Mark the game as finished. Does not touch ``won``."""
    state.quit = True
