"""Rendering subpackage.

Turns grid snapshots into terminal output. The renderer focuses on:

* Painting whole frames in place with saved / restored cursor positions so
  the terminal never scrolls.
* Owning the terminal lifecycle (size query, raw input mode, clearing).

See :mod:`grid_maze.renderer.terminal` for the glyph table and the
:class:`~grid_maze.renderer.terminal.TerminalSurface`.
"""

from .terminal import (
    GLYPHS,
    QUIT_MESSAGE,
    WIN_MESSAGE,
    TerminalSize,
    TerminalSurface,
    check_fits,
    frame_lines,
)

__all__ = [
    "GLYPHS",
    "QUIT_MESSAGE",
    "WIN_MESSAGE",
    "TerminalSize",
    "TerminalSurface",
    "check_fits",
    "frame_lines",
]
