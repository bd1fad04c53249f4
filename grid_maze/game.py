"""Game controller.

:class:`GameController` owns the lifetime of one game and of both loop
threads. It moves through :class:`Phase` in order:

``INIT -> SIZE_CHECKED -> MAP_LOADED -> RUNNING -> FINISHED``

1. Query the terminal size (fatal if unavailable).
2. Read the map, reject it if the terminal is too small, build the state.
    Nothing has been drawn and the terminal is still in its original mode.
3. Enter raw mode and run the input and render loops on two threads.
4. Join both threads and restore the terminal mode. A keyboard interrupt
    while waiting is treated like `q`: the game is marked as quit, the render
    loop prints its banner and the input thread, which may still be blocked on
    a read, is a daemon and does not hold up interpreter exit.

Errors propagate to the caller as :class:`grid_maze.errors.GridMazeError`
subclasses; the controller never exits the process.
"""

from __future__ import annotations

import logging
import threading
from enum import StrEnum, auto
from typing import Any, Callable, List, Optional

from grid_maze.config import GameConfig
from grid_maze.errors import GameRuntimeError
from grid_maze.levels.convert import to_state
from grid_maze.levels.text import read_level
from grid_maze.loops import ReadChar, input_loop, render_loop, stdin_reader
from grid_maze.renderer import TerminalSurface
from grid_maze.state import GameState
from grid_maze.step import request_quit

logger = logging.getLogger(__name__)


class Phase(StrEnum):
    INIT = auto()
    SIZE_CHECKED = auto()
    MAP_LOADED = auto()
    RUNNING = auto()
    FINISHED = auto()


class GameController:
    """Wires the map, the terminal surface and the two loops together.

    Args:
        config (GameConfig): Startup options.
        surface (TerminalSurface | None): Terminal to play on; defaults to
            standard input / output.
        read_char (ReadChar | None): Key reader for the input loop; defaults
            to single-byte reads from the surface's input descriptor.
    """

    def __init__(
        self,
        config: GameConfig,
        surface: Optional[TerminalSurface] = None,
        read_char: Optional[ReadChar] = None,
    ) -> None:
        self.config = config
        self.surface = surface if surface is not None else TerminalSurface()
        self.phase = Phase.INIT
        self.state: Optional[GameState] = None
        self._read_char = read_char
        self.threads: List[threading.Thread] = []
        self._failures: List[BaseException] = []

    def prepare(self) -> GameState:
        """Run the startup phases and return the loaded state.

        Raises:
            StartupError: Terminal size unavailable or too small, map
                unreadable or malformed.
        """
        size = self.surface.size()
        self.phase = Phase.SIZE_CHECKED
        logger.info("Terminal is %dx%d", size.columns, size.rows)

        level = read_level(self.config.map_path)
        self.surface.check_fits(level.width, level.height)
        self.state = to_state(level, strict=self.config.strict_map)
        self.phase = Phase.MAP_LOADED
        logger.debug("Initial state %s", self.state.description)
        return self.state

    def run(self) -> int:
        """Play one game to completion.

        Returns:
            int: Process exit status, 0 after a win or a quit.

        Raises:
            StartupError: See :meth:`prepare`.
            GameRuntimeError: A loop failed; the terminal was restored first.
        """
        state = self.prepare()

        with self.surface.raw_mode():
            self.phase = Phase.RUNNING
            read_char = self._read_char or stdin_reader(self.surface.input_fd)
            render = self._spawn(
                "render",
                state,
                render_loop,
                state,
                self.surface,
                self.config.render_mode,
                self.config.poll_interval,
            )
            # The input thread may sit in a blocking read forever after an
            # interrupt, so it must not keep the interpreter alive.
            keys = self._spawn("input", state, input_loop, state, read_char, daemon=True)
            self.threads = [render, keys]
            try:
                for thread in self.threads:
                    thread.start()
                for thread in self.threads:
                    thread.join()
            except BaseException as exc:
                # Ctrl+C ends the game like `q`; anything else still propagates
                # once the render loop has printed its banner.
                request_quit(state)
                if render.is_alive():
                    render.join()
                if not isinstance(exc, KeyboardInterrupt):
                    raise
                logger.info("Interrupted; quitting")

        self.phase = Phase.FINISHED
        logger.info("Game finished: %s", "won" if state.won else "quit")

        if self._failures:
            cause = self._failures[0]
            raise GameRuntimeError(f"Game loop failed: {cause}") from cause
        return 0

    def _spawn(
        self,
        name: str,
        state: GameState,
        target: Callable[..., Any],
        *args: Any,
        daemon: bool = False,
    ) -> threading.Thread:
        def guarded() -> None:
            try:
                target(*args)
            except Exception as exc:
                logger.exception("%s loop failed", name)
                self._failures.append(exc)
                request_quit(state)

        return threading.Thread(target=guarded, name=name, daemon=daemon)
