"""grid_maze.components
=======================

Aggregate import surface for the value objects shared across the engine::

    from grid_maze.components import Position

"""

from .position import Position

__all__ = ["Position"]
