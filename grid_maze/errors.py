"""Exception hierarchy.

Components raise these and never terminate the process themselves; the CLI
entry point is the single place that turns them into an exit status.

* :class:`StartupError` covers everything that stops a game before play
  begins (bad arguments, unreadable or malformed map, terminal problems).
  None of them are retried.
* :class:`GameRuntimeError` wraps an unexpected failure raised inside one of
  the game loops after the terminal has been restored.

Illegal moves (walls, grid edges) are not errors; they are silent no-ops.
"""


class GridMazeError(Exception):
    """Base class for all errors raised by the package."""


class StartupError(GridMazeError):
    """Fatal condition detected before the game loops start."""


class UsageError(StartupError):
    """Command line arguments were missing or malformed."""


class MapFileError(StartupError):
    """The map file could not be read."""


class MapFormatError(StartupError):
    """The map file was read but its contents are not a valid maze."""


class TerminalSizeError(StartupError):
    """The terminal dimensions could not be queried."""


class TerminalModeError(StartupError):
    """Standard input could not be switched to raw mode (not a terminal)."""


class TerminalTooSmallError(StartupError):
    """The terminal cannot display the whole maze."""

    def __init__(self, required: tuple[int, int], actual: tuple[int, int]) -> None:
        self.required = required
        self.actual = actual
        super().__init__(
            f"Terminal too small: need at least {required[0]}x{required[1]} "
            f"(cols x rows), got {actual[0]}x{actual[1]}."
        )


class GameRuntimeError(GridMazeError):
    """A game loop failed while the game was running."""
