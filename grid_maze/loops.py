"""Input and render loops.

The game runs two threads that share one :class:`GameState`:

* :func:`input_loop` blocks on single-character reads, feeds movement keys to
  :func:`grid_maze.step.step` and is the only writer of grid / player state.
* :func:`render_loop` paints frames. In ``RenderMode.EVENT`` it sleeps on
  ``state.cond`` until ``redraw_requested or quit`` holds; in
  ``RenderMode.POLL`` it repaints every ``interval`` seconds until ``quit``.

Neither loop is ever stopped from outside. The game ends only through the
``quit`` flag plus a notification on ``state.cond``.
"""

import logging
import os
import time
from typing import Callable

from grid_maze.actions import Action, KEY_BINDINGS
from grid_maze.renderer import QUIT_MESSAGE, WIN_MESSAGE, TerminalSurface
from grid_maze.state import GameState
from grid_maze.step import request_quit, step
from grid_maze.types import RenderMode
from grid_maze.utils.terminal import is_redraw_pending, is_terminal_state

logger = logging.getLogger(__name__)

ReadChar = Callable[[], str]
"""Blocking single-character reader; returns ``""`` at end of input."""

DEFAULT_POLL_INTERVAL = 1 / 24


def stdin_reader(fd: int) -> ReadChar:
    """Return a :data:`ReadChar` that reads one byte at a time from ``fd``."""

    def read_char() -> str:
        # latin-1 maps every byte to one character, so only EOF yields "".
        return os.read(fd, 1).decode("latin-1")

    return read_char


def input_loop(state: GameState, read_char: ReadChar) -> None:
    """Translate key presses into actions until the game ends.

    ``w``/``a``/``s``/``d`` move, ``q`` quits and any other key is ignored.
    End of input is treated like ``q``. If the game was ended elsewhere (an
    interrupt or a failed render loop), the loop returns after its next read.
    """
    while True:
        ch = read_char()
        with state.cond:
            if is_terminal_state(state):
                return
        if not ch:
            logger.warning("End of input; quitting")
            request_quit(state)
            return

        action = KEY_BINDINGS.get(ch)
        if action is None:
            continue

        if action == Action.QUIT:
            request_quit(state)
            return

        if step(state, action):
            return


def render_loop(
    state: GameState,
    surface: TerminalSurface,
    mode: RenderMode = RenderMode.EVENT,
    interval: float = DEFAULT_POLL_INTERVAL,
) -> bool:
    """Paint frames until the game ends, then print the end-of-game banner.

    Frames are copied from the grid while holding ``state.cond`` and painted
    after releasing it, so a half-applied move is never drawn.

    Args:
        state (GameState): Shared game state.
        surface (TerminalSurface): Output target.
        mode (RenderMode): Redraw strategy.
        interval (float): Seconds between repaints in ``RenderMode.POLL``.

    Returns:
        bool: ``state.won`` when the loop exited.
    """
    with state.cond:
        frame = state.snapshot()
    surface.clear()
    surface.render(frame)

    if mode == RenderMode.EVENT:
        _wait_for_redraws(state, surface)
    elif mode == RenderMode.POLL:
        _poll_redraws(state, surface, interval)
    else:
        raise ValueError(f"Unknown render mode: {mode!r}")

    with state.cond:
        won = state.won
    surface.show_message(WIN_MESSAGE if won else QUIT_MESSAGE)
    return won


def _wait_for_redraws(state: GameState, surface: TerminalSurface) -> None:
    while True:
        with state.cond:
            state.cond.wait_for(lambda: is_redraw_pending(state))
            if state.quit:
                return
            frame = state.snapshot()
            state.redraw_requested = False
        surface.render(frame)


def _poll_redraws(state: GameState, surface: TerminalSurface, interval: float) -> None:
    while True:
        with state.cond:
            if state.quit:
                return
            frame = state.snapshot()
        surface.render(frame)
        time.sleep(interval)
