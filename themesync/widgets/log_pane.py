"""Log pane showing theme sync activity inside the TUI."""

from datetime import datetime
from typing import ClassVar

from rich.text import Text
from textual.widgets import RichLog


class LogPane(RichLog):
    """Scrolling view of recent sync activity fed by a loguru sink."""

    DEFAULT_CSS: ClassVar[str] = """
    LogPane {
        height: 1fr;
        width: 100%;
        scrollbar-size: 1 1;
    }
    """

    LEVEL_STYLES: ClassVar[dict[str, str]] = {
        "DEBUG": "dim",
        "INFO": "green",
        "SUCCESS": "bold green",
        "WARNING": "yellow",
        "ERROR": "bold red",
        "CRITICAL": "bold white on red",
    }

    def __init__(self, max_lines: int | None = 500, *, id: str | None = None) -> None:
        """Initialize the pane.

        Args:
            max_lines: Maximum number of lines to retain (None for unlimited).
            id: The ID of the widget in the DOM.
        """
        super().__init__(highlight=False, markup=False, wrap=True, max_lines=max_lines, auto_scroll=True, id=id)

    def add_entry(self, level: str, message: str, timestamp: datetime | None = None) -> None:
        """Append one entry.

        Args:
            level: Log level name.
            message: The log message.
            timestamp: When the entry was logged (defaults to now).
        """
        timestamp = timestamp or datetime.now()
        level = level.upper()
        line = Text()
        line.append(f"{timestamp:%H:%M:%S} ", style="dim")
        line.append(f"{level:<8} ", style=self.LEVEL_STYLES.get(level, ""))
        line.append(message)
        self.write(line)

    def sink(self, message: object) -> None:
        """Loguru sink receiving formatted messages.

        Args:
            message: Loguru message object.
        """
        record = getattr(message, "record", None)
        if record is None:
            return
        level = record["level"].name
        text = str(record["message"])
        timestamp = record["time"].replace(tzinfo=None)
        # Records can arrive from worker threads running file and command I/O
        try:
            self.app.call_from_thread(self.add_entry, level, text, timestamp)
        except RuntimeError:
            self.add_entry(level, text, timestamp)
