"""TUI widgets for themesync."""

from themesync.widgets.log_pane import LogPane
from themesync.widgets.picker import ThemePickerScreen

__all__ = [
    "LogPane",
    "ThemePickerScreen",
]
