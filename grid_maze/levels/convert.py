"""Level -> GameState conversion.

Populates a :class:`grid_maze.grid.Grid` from a :class:`Level` and locates the
player spawn and goal.

Spawn/goal resolution is last-write-wins in row-major order: if a map holds
several ``4`` (or ``3``) digits, the last one scanned becomes the position and
the earlier digits stay in the grid as plain cells. A missing digit leaves the
position at ``(0, 0)``. Such maps are logged as suspicious; pass
``strict=True`` to reject them instead.
"""

from __future__ import annotations

import logging
from typing import Optional

from grid_maze.components import Position
from grid_maze.entity import EntityTracker
from grid_maze.errors import MapFormatError
from grid_maze.grid import Grid
from grid_maze.levels.text import Level
from grid_maze.moves import default_move_fn
from grid_maze.objectives import goal_objective_fn
from grid_maze.state import GameState
from grid_maze.types import Cell, MoveFn, ObjectiveFn

logger = logging.getLogger(__name__)


def to_state(
    level: Level,
    *,
    strict: bool = False,
    move_fn: Optional[MoveFn] = None,
    objective_fn: Optional[ObjectiveFn] = None,
) -> GameState:
    """Build a fresh ``GameState`` from ``level``.

    Args:
        level (Level): Parsed map.
        strict (bool): Reject maps without exactly one spawn and one goal.
        move_fn (MoveFn | None): Override for the candidate move function.
        objective_fn (ObjectiveFn | None): Override for the win predicate.

    Returns:
        GameState: State with the player on its spawn tile and all flags clear.

    Raises:
        MapFormatError: In strict mode, if spawn or goal count is not one.
    """
    grid = Grid(level.width, level.height)
    start = Position(0, 0)
    goal = Position(0, 0)
    spawn_count = 0
    goal_count = 0

    for x, y, cell in level.cells():
        pos = Position(x, y)
        if cell == Cell.PLAYER:
            start = pos
            spawn_count += 1
        elif cell == Cell.GOAL:
            goal = pos
            goal_count += 1
        grid.set(pos, cell)

    for name, count in (("player spawn", spawn_count), ("goal", goal_count)):
        if count == 1:
            continue
        message = f"Map has {count} {name} tiles, expected exactly 1"
        if strict:
            raise MapFormatError(message)
        logger.warning(
            "%s; %s", message, "defaulting to (0, 0)" if count == 0 else "using the last one"
        )

    return GameState(
        grid=grid,
        entities=EntityTracker(start=start, goal=goal),
        move_fn=move_fn or default_move_fn,
        objective_fn=objective_fn or goal_objective_fn,
    )
