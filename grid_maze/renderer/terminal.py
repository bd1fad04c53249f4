"""Terminal surface.

Everything that touches the real terminal lives here: querying its size,
switching standard input into raw mode (no line buffering, no echo), clearing
the visible area and painting frames.

Frames are drawn from the cursor home position between a save-cursor and a
restore-cursor escape, one glyph per cell with a single separating space, so
a maze of width ``w`` needs ``2 * w`` columns (see :func:`check_fits`).
"""

from __future__ import annotations

import logging
import os
import sys
import termios
from contextlib import contextmanager
from typing import Dict, Iterator, List, NamedTuple, Optional, TextIO

import numpy as np

from grid_maze.errors import TerminalModeError, TerminalSizeError, TerminalTooSmallError
from grid_maze.grid import CellArray
from grid_maze.types import Cell
from grid_maze.utils.ansi import CURSOR_HOME, RESTORE_CURSOR, SAVE_CURSOR

logger = logging.getLogger(__name__)

GLYPHS: Dict[Cell, str] = {
    Cell.EMPTY: " ",
    Cell.WALL: "H",
    Cell.START_MARKER: "*",
    Cell.GOAL: "X",
    Cell.PLAYER: "O",
}

# Indexed by cell value; lets a whole snapshot be translated in one lookup.
_GLYPH_TABLE = np.array([GLYPHS[cell] for cell in sorted(GLYPHS)])

WIN_MESSAGE = "Congratulations! You have won the game."
QUIT_MESSAGE = "Keyboard interrupt! Quitting now..."


class TerminalSize(NamedTuple):
    columns: int
    rows: int


def check_fits(width: int, height: int, size: TerminalSize) -> None:
    """Ensure a ``width`` x ``height`` maze can be painted in ``size``.

    Raises:
        TerminalTooSmallError: If ``size.columns < 2 * width`` or
            ``size.rows < height``.
    """
    required = TerminalSize(2 * width, height)
    if size.columns < required.columns or size.rows < required.rows:
        raise TerminalTooSmallError(required, size)


def frame_lines(cells: CellArray) -> List[str]:
    """Translate a cell snapshot into one text line per grid row."""
    glyphs = _GLYPH_TABLE[cells]
    return [" ".join(row) for row in glyphs]


class TerminalSurface:
    """Output side of the game plus the raw-mode lifecycle of its input.

    Args:
        out (TextIO): Stream frames are written to.
        input_fd (int | None): Descriptor switched to raw mode. Defaults to
            standard input.
    """

    def __init__(self, out: Optional[TextIO] = None, input_fd: Optional[int] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._input_fd = input_fd
        self._size: Optional[TerminalSize] = None

    @property
    def input_fd(self) -> int:
        if self._input_fd is None:
            return sys.stdin.fileno()
        return self._input_fd

    # -------- Size --------

    def size(self) -> TerminalSize:
        """Query and remember the terminal dimensions.

        Raises:
            TerminalSizeError: If the output is not attached to a terminal.
        """
        try:
            columns, rows = os.get_terminal_size(self._out.fileno())
        except (OSError, ValueError) as exc:
            raise TerminalSizeError(f"Failed to get terminal size: {exc}") from exc
        self._size = TerminalSize(columns, rows)
        logger.debug("Terminal size %dx%d", columns, rows)
        return self._size

    def check_fits(self, width: int, height: int) -> None:
        check_fits(width, height, self._size or self.size())

    # -------- Input mode --------

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Disable line buffering and echo; restore the prior mode on exit.

        The saved attributes are restored on every exit path. A failure while
        restoring is logged rather than raised so it cannot mask the error
        that ended the game.

        Raises:
            TerminalModeError: If the input is not a terminal.
        """
        fd = self.input_fd
        try:
            saved = termios.tcgetattr(fd)
            raw = termios.tcgetattr(fd)
            raw[3] &= ~(termios.ECHO | termios.ICANON)
            termios.tcsetattr(fd, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise TerminalModeError(f"Failed to enter raw mode on fd {fd}: {exc}") from exc
        logger.debug("Raw mode enabled on fd %d", fd)
        try:
            yield
        finally:
            try:
                termios.tcsetattr(fd, termios.TCSAFLUSH, saved)
                logger.debug("Terminal mode restored on fd %d", fd)
            except termios.error:
                logger.exception("Failed to restore terminal mode")

    # -------- Output --------

    def home(self) -> None:
        self._out.write(CURSOR_HOME)
        self._out.flush()

    def clear(self) -> None:
        """Overwrite every visible terminal cell with a space."""
        columns, rows = self._size or self.size()
        self._out.write(CURSOR_HOME + SAVE_CURSOR)
        self._out.write(" " * (columns * rows))
        self._out.write(RESTORE_CURSOR)
        self._out.flush()

    def render(self, cells: CellArray) -> None:
        """Paint one frame from a grid snapshot."""
        self._out.write(CURSOR_HOME + SAVE_CURSOR)
        self._out.write("\n".join(frame_lines(cells)))
        self._out.write(RESTORE_CURSOR)
        self._out.flush()

    def show_message(self, message: str) -> None:
        """Clear the screen and print ``message`` at the top left."""
        self.clear()
        self.home()
        self._out.write(message + "\n")
        self._out.flush()
