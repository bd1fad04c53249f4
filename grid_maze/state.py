"""Shared ``GameState`` dataclass.

This module defines the single mutable object shared between the input and
render loops. Unlike a per-turn snapshot, a ``GameState`` lives for the whole
game and is mutated in place; all consistency comes from one lock.

Design notes:

* ``cond`` is a :class:`threading.Condition`; its underlying lock guards
    *every* field (grid cells, entity positions and the flags). The render loop
    also waits on it for redraw requests.
* Systems in :mod:`grid_maze.systems` assume the caller already holds
    ``cond``. :func:`grid_maze.step.step` is the locked entry point used by the
    input loop.
* ``won`` is monotone: once set it is never cleared. ``quit`` means the game
    is over for any reason (win, ``q`` or end of input).
* ``redraw_requested`` is the redraw signal consumed by the event-driven
    render loop.
"""

import threading
from dataclasses import dataclass, field
from typing import Any

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_maze.entity import EntityTracker
from grid_maze.grid import CellArray, Grid
from grid_maze.types import MoveFn, ObjectiveFn


@dataclass(eq=False)
class GameState:
    """Mutable game state shared by reference with both loops.

    Attributes:
        grid (Grid): Cell buffer.
        entities (EntityTracker): Player / start / goal positions.
        move_fn (MoveFn): Candidate position function used to resolve moves.
        objective_fn (ObjectiveFn): Predicate evaluated after each move to set ``won``.
        quit (bool): Game over; both loops stop once they observe it.
        won (bool): Player reached the goal.
        redraw_requested (bool): A move happened since the last paint.
        turn (int): Number of successful moves.
        cond (threading.Condition): Lock + condition variable guarding all fields.
    """

    grid: Grid
    entities: EntityTracker
    move_fn: MoveFn
    objective_fn: ObjectiveFn

    quit: bool = False
    won: bool = False
    redraw_requested: bool = False
    turn: int = 0

    cond: threading.Condition = field(default_factory=threading.Condition, repr=False)

    def snapshot(self) -> CellArray:
        """Copy of the grid cells. Caller must hold ``cond``."""
        return self.grid.snapshot()

    @property
    def description(self) -> PMap[str, Any]:
        """Compact summary for logging (positions, flags and turn)."""
        return pmap(
            {
                "size": self.grid.dimensions(),
                "positions": self.entities.positions,
                "turn": self.turn,
                "quit": self.quit,
                "won": self.won,
            }
        )
