import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    log_file: Optional[Union[str, os.PathLike[str]]] = None, level: str = "INFO"
) -> logging.Handler:
    """
    Configures the root logger to write to a file.

    The terminal belongs to the game while it runs, so log records never go to
    the screen. Without a log file a NullHandler is installed, which also keeps
    the logging module's last-resort stderr handler quiet.

    Args:
        log_file (str | PathLike | None): The path to the log file.
        level (str): Logging level name, e.g. "DEBUG".

    Returns:
        logging.Handler: The handler attached to the root logger.
    """
    root = logging.getLogger()

    if log_file is None:
        handler: logging.Handler = logging.NullHandler()
        root.addHandler(handler)
        return handler

    # Create the log directory if it doesn't exist
    log_dir = os.path.dirname(log_file)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)

    handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper())

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized successfully.")
    return handler
