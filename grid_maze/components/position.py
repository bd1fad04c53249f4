"""Position component.

Immutable integer grid coordinates. The entity tracker stores one per named
role (player, start, goal).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
