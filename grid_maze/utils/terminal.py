"""Terminal condition helper predicates."""

from grid_maze.state import GameState


def is_terminal_state(state: GameState) -> bool:
    """Return True if the game is over (quit requested or goal reached)."""
    return state.quit or state.won


def is_redraw_pending(state: GameState) -> bool:
    """Wake-up predicate for the event-driven render loop."""
    return state.redraw_requested or state.quit
