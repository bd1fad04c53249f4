"""Command line entry point.

Usage::

    grid-maze path/to/map.txt [--render-mode {event,poll}] [--fps N]
              [--strict] [--log-file PATH] [--log-level LEVEL]

Controls: ``w`` up, ``a`` left, ``s`` down, ``d`` right, ``q`` quit.

:func:`main` is the single place where errors become an exit status: 0 after
a win or a quit, 1 on any startup or runtime failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from grid_maze.config import GameConfig
from grid_maze.errors import GameRuntimeError, StartupError, UsageError
from grid_maze.game import GameController
from grid_maze.logger import setup_logging
from grid_maze.renderer import QUIT_MESSAGE
from grid_maze.types import RenderMode

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises :class:`UsageError` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{self.format_usage().rstrip()}\n{self.prog}: error: {message}")


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be positive")
    return number


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="grid-maze",
        description="Walk a maze loaded from a text map (w/a/s/d to move, q to quit).",
    )
    p.add_argument("map_file", type=Path, help="map file: one row per line, digits 0-4")
    p.add_argument(
        "--render-mode",
        choices=[mode.value for mode in RenderMode],
        default=RenderMode.EVENT.value,
        help="redraw on each move (event) or on a fixed tick (poll)",
    )
    p.add_argument(
        "--fps",
        type=_positive_float,
        default=24.0,
        help="frames per second in poll mode (default: 24)",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="reject maps without exactly one player spawn (4) and one goal (3)",
    )
    p.add_argument("--log-file", type=Path, default=None, help="write a debug log here")
    p.add_argument("--log-level", choices=LOG_LEVELS, default="INFO")
    return p


def parse_config(argv: Optional[Sequence[str]] = None) -> GameConfig:
    """Parse ``argv`` into a :class:`GameConfig`.

    Raises:
        UsageError: Missing, extra or malformed arguments.
    """
    args = build_parser().parse_args(argv)
    return GameConfig(
        map_path=args.map_file,
        render_mode=RenderMode(args.render_mode),
        poll_interval=1.0 / args.fps,
        strict_map=args.strict,
        log_file=args.log_file,
        log_level=args.log_level,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        config = parse_config(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1

    setup_logging(config.log_file, config.log_level)
    logger.info("Starting maze %s", config.map_path)

    try:
        return GameController(config).run()
    except StartupError as exc:
        logger.error("Startup failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except GameRuntimeError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        # Interrupts during play are handled by the controller; this covers startup.
        logger.info("Interrupted before the game started")
        print(QUIT_MESSAGE)
        return 0
