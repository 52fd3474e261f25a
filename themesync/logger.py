"""Logging configuration using loguru.

Logs are stored under ~/.local/share/themesync/logs and kept for 1 week.
Output goes to file only by default (to avoid interfering with the TUI).
"""

import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

# Remove default handler
logger.remove()

# Define log directory (default ~/.local/share/themesync/logs, overridable via THEMESYNC_LOG_DIR)
_default_log_dir = Path.home() / ".local" / "share" / "themesync" / "logs"
LOG_DIR = Path(os.environ.get("THEMESYNC_LOG_DIR", str(_default_log_dir))).expanduser().resolve()

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


class _LoggingState:
    """Internal state tracker for logging configuration."""

    def __init__(self) -> None:
        """Initialize logging state without any console handler."""
        self.file_handler_id: int | None = None
        self.stderr_handler_id: int | None = None


_state = _LoggingState()

try:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    # Configure file handler with rotation and retention
    _state.file_handler_id = logger.add(
        LOG_DIR / "themesync_{time:YYYY-MM-DD}.log",
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="00:00",  # New file at midnight
        retention="1 week",
        compression="gz",
        backtrace=True,
        diagnose=False,
    )
except OSError:
    # Read-only home; logging stays disabled rather than breaking theme sync
    _state.file_handler_id = None


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def add_stderr_sink(level: str = "WARNING") -> int:
    """Send log output to stderr, for the command-line interface.

    Calling this again replaces the previous stderr sink.

    Args:
        level: Minimum log level to print.

    Returns:
        The sink ID.
    """
    if _state.stderr_handler_id is not None:
        logger.remove(_state.stderr_handler_id)
    _state.stderr_handler_id = logger.add(sys.stderr, level=level, format="{level}: {message}")
    return _state.stderr_handler_id


def add_tui_sink(sink_func: Callable[[object], None], level: str = "WARNING") -> int:
    """Add a TUI sink for displaying logs in the application.

    This also removes the stderr handler to prevent logs from interfering
    with the TUI display.

    Args:
        sink_func: A callable that accepts loguru message objects.
        level: Minimum log level for the TUI sink.

    Returns:
        The sink ID that can be used to remove the sink later.
    """
    if _state.stderr_handler_id is not None:
        logger.remove(_state.stderr_handler_id)
        _state.stderr_handler_id = None

    return logger.add(sink_func, level=level, format="{message}")


def remove_tui_sink(sink_id: int) -> None:
    """Remove the TUI sink.

    Args:
        sink_id: The sink ID returned by add_tui_sink.
    """
    logger.remove(sink_id)
