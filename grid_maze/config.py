"""Game configuration.

:class:`GameConfig` is an immutable bundle of everything the controller needs
to start a game. The CLI builds it from command line options; tests build it
directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from grid_maze.loops import DEFAULT_POLL_INTERVAL
from grid_maze.types import RenderMode


@dataclass(frozen=True)
class GameConfig:
    """Startup options for one game.

    Attributes:
        map_path (Path): Text map to load.
        render_mode (RenderMode): Event-driven or fixed-interval redraws.
        poll_interval (float): Seconds between frames in polling mode.
        strict_map (bool): Reject maps without exactly one spawn and one goal.
        log_file (Path | None): Debug log destination; ``None`` disables logging.
        log_level (str): Logging level name.
    """

    map_path: Path
    render_mode: RenderMode = RenderMode.EVENT
    poll_interval: float = DEFAULT_POLL_INTERVAL
    strict_map: bool = False
    log_file: Optional[Path] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")
