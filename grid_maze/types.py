"""Common type aliases and enumerations.

``MoveFn`` and ``ObjectiveFn`` are the extension points stored on the
``GameState`` so movement / win condition behavior can be swapped per game.
"""

from enum import IntEnum, StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declaration for MoveFn typing to avoid circular imports:
if TYPE_CHECKING:
    from grid_maze.state import GameState
    from grid_maze.actions import Action
    from grid_maze.components import Position


class Cell(IntEnum):
    """State of a single grid position.

    Values match the digits used in map files, so ``Cell(int(ch))`` decodes
    a map character.
    """

    EMPTY = 0
    WALL = 1
    START_MARKER = 2
    GOAL = 3
    PLAYER = 4


MoveFn = Callable[["GameState", "Action"], "Position"]
ObjectiveFn = Callable[["GameState"], bool]


class RenderMode(StrEnum):
    """Redraw strategy of the render loop.

    EVENT: wait on the game condition variable for a redraw request.
    POLL: repaint on a fixed interval whether or not anything changed.
    """

    EVENT = auto()
    POLL = auto()
