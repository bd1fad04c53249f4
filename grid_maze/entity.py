"""Entity tracker.

The maze has exactly three named entities, each identified by an
:class:`EntityRole` and located by a :class:`Position` in the grid's coordinate
space:

* ``player``: moves for the lifetime of the game.
* ``start``: where the player spawned; fixed after load.
* ``goal``: the tile that wins the game; fixed after load.

Positions are kept in a persistent map so readers can hold on to a
consistent view (``tracker.positions``) while the player keeps moving.

Examples
--------
>>> from grid_maze.components import Position
>>> tracker = EntityTracker(start=Position(1, 1), goal=Position(2, 2))
>>> tracker.player == tracker.start
True
"""

from enum import StrEnum, auto

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_maze.components import Position


class EntityRole(StrEnum):
    PLAYER = auto()
    START = auto()
    GOAL = auto()


class EntityTracker:
    """Player / start / goal positions.

    The player starts on the start tile. Only the player entry can be replaced
    after construction.

    Args:
        start (Position): Spawn tile (also the player's initial position).
        goal (Position): Winning tile.
    """

    def __init__(self, start: Position, goal: Position) -> None:
        self._positions: PMap[EntityRole, Position] = pmap(
            {
                EntityRole.PLAYER: start,
                EntityRole.START: start,
                EntityRole.GOAL: goal,
            }
        )

    @property
    def positions(self) -> PMap[EntityRole, Position]:
        return self._positions

    @property
    def player(self) -> Position:
        return self._positions[EntityRole.PLAYER]

    @property
    def start(self) -> Position:
        return self._positions[EntityRole.START]

    @property
    def goal(self) -> Position:
        return self._positions[EntityRole.GOAL]

    def move_player(self, pos: Position) -> None:
        self._positions = self._positions.set(EntityRole.PLAYER, pos)

    def __repr__(self) -> str:
        return (
            f"EntityTracker(player={self.player}, start={self.start}, goal={self.goal})"
        )
