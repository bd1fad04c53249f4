"""Grid store.

Owns the 2-D cell buffer of the maze. Cells live in a ``numpy.uint8`` array of
shape ``(height, width)`` indexed ``[y, x]``; dimensions are fixed at
construction and never change.

Every accessor bounds-checks explicitly. An out-of-range position is a
programming error (callers only pass positions derived from validated moves),
so it raises ``IndexError`` instead of letting numpy wrap negative indices.
"""

from typing import Tuple

import numpy as np
import numpy.typing as npt

from grid_maze.components import Position
from grid_maze.types import Cell

CellArray = npt.NDArray[np.uint8]


class Grid:
    """Rectangular, row-major buffer of :class:`Cell` values.

    Args:
        width (int): Number of columns.
        height (int): Number of rows.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells: CellArray = np.full((height, width), Cell.EMPTY, dtype=np.uint8)

    def dimensions(self) -> Tuple[int, int]:
        """Return ``(width, height)``."""
        return self._width, self._height

    def contains(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the grid rectangle."""
        return 0 <= pos.x < self._width and 0 <= pos.y < self._height

    def at(self, pos: Position) -> Cell:
        self._check_bounds(pos)
        return Cell(int(self._cells[pos.y, pos.x]))

    def set(self, pos: Position, cell: Cell) -> None:
        self._check_bounds(pos)
        self._cells[pos.y, pos.x] = cell

    def snapshot(self) -> CellArray:
        """Return an independent copy of the cell buffer.

        Renderers take a snapshot while holding the game lock and paint from
        the copy after releasing it.
        """
        return self._cells.copy()

    def _check_bounds(self, pos: Position) -> None:
        if not self.contains(pos):
            raise IndexError(
                f"Out of bounds: {(pos.x, pos.y)} for grid {self._width}x{self._height}"
            )

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"
