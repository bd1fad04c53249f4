"""Action enumerations.

:class:`Action` covers the four movement directions plus quitting.
``MOVE_ACTIONS`` is the canonical ordered list of movement actions; checks like
``if action in MOVE_ACTIONS`` are preferred over enum name comparisons.
``KEY_BINDINGS`` maps raw keyboard characters to actions.
"""

from enum import StrEnum, auto
from typing import Dict


class Action(StrEnum):
    """String enum of player actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Movement directions.
        QUIT: Leave the game without winning.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    QUIT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]


KEY_BINDINGS: Dict[str, Action] = {
    "w": Action.UP,
    "a": Action.LEFT,
    "s": Action.DOWN,
    "d": Action.RIGHT,
    "q": Action.QUIT,
}
"""Keyboard character to action mapping. Unbound keys are ignored."""
