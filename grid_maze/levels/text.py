"""Text map reader.

A map file is plain text: one line per grid row, one digit per cell, where the
digit is the :class:`grid_maze.types.Cell` value (``0`` empty, ``1`` wall,
``2`` start marker, ``3`` goal, ``4`` player spawn). The first line fixes the
grid width and the number of lines fixes its height.

This module only validates and tokenizes; :func:`grid_maze.levels.convert.to_state`
turns a :class:`Level` into a playable ``GameState``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from grid_maze.errors import MapFileError, MapFormatError
from grid_maze.types import Cell

logger = logging.getLogger(__name__)

VALID_DIGITS = frozenset(str(int(cell)) for cell in Cell)


@dataclass(frozen=True)
class Level:
    """Authoring-time maze description.

    Attributes:
        width (int): Length of the first map line.
        height (int): Number of map lines.
        rows (Tuple[Tuple[Cell, ...], ...]): Decoded cells, ``rows[y][x]``.
            Every row has exactly ``width`` cells.
    """

    width: int
    height: int
    rows: Tuple[Tuple[Cell, ...], ...]

    def cells(self) -> List[Tuple[int, int, Cell]]:
        """Return ``(x, y, cell)`` triples in row-major order."""
        return [(x, y, cell) for y, row in enumerate(self.rows) for x, cell in enumerate(row)]


def parse_level(text: str) -> Level:
    """Decode map text into a :class:`Level`.

    Rows shorter than the first are padded with ``EMPTY``.

    Raises:
        MapFormatError: If the map is empty, a row is longer than the first,
            or a character is not a cell digit.
    """
    lines = text.splitlines()
    if not lines or not lines[0]:
        raise MapFormatError("Map is empty")

    width = len(lines[0])
    rows: List[Tuple[Cell, ...]] = []
    for y, line in enumerate(lines):
        if len(line) > width:
            raise MapFormatError(
                f"Row {y} has {len(line)} cells but the first row has {width}"
            )
        row: List[Cell] = []
        for x, ch in enumerate(line):
            if ch not in VALID_DIGITS:
                raise MapFormatError(f"Invalid cell {ch!r} at row {y}, column {x}")
            row.append(Cell(int(ch)))
        if len(row) < width:
            logger.debug("Padding row %d from %d to %d cells", y, len(row), width)
            row.extend([Cell.EMPTY] * (width - len(row)))
        rows.append(tuple(row))

    return Level(width=width, height=len(rows), rows=tuple(rows))


def read_level(path: str | Path) -> Level:
    """Read and parse a map file.

    Raises:
        MapFileError: If the file cannot be opened or decoded.
        MapFormatError: If the contents are not a valid map.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MapFileError(f"Couldn't read map file {str(path)!r}: {exc}") from exc
    level = parse_level(text)
    logger.info("Loaded map %s (%dx%d)", path, level.width, level.height)
    return level
