"""Objective predicate functions.

An objective answers *"Has the player satisfied the win condition?"*. It is a
pure predicate over a :class:`GameState`; :func:`grid_maze.systems.terminal.win_system`
evaluates ``state.objective_fn`` after each successful move.
"""

from grid_maze.state import GameState


def goal_objective_fn(state: GameState) -> bool:
    """Player stands on the goal tile."""
    return state.entities.player == state.entities.goal
