"""Tests for the LogPane widget."""

from datetime import datetime
from unittest.mock import MagicMock

from themesync.widgets.log_pane import LogPane


class TestLogPane:
    """Tests for the LogPane widget."""

    def test_init_with_defaults(self) -> None:
        pane = LogPane()
        assert pane.auto_scroll is True
        assert pane.markup is False
        assert pane.wrap is True
        assert pane.max_lines == 500

    def test_init_with_id(self) -> None:
        pane = LogPane(id="test_log")
        assert pane.id == "test_log"

    def test_level_styles_defined(self) -> None:
        for level in ["DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]:
            assert LogPane.LEVEL_STYLES[level]


class TestLogPaneAddEntry:
    """Tests for LogPane.add_entry; writes are no-ops when not mounted."""

    def test_add_entry_with_timestamp(self) -> None:
        pane = LogPane()
        pane.add_entry("INFO", "Ghostty theme set", datetime(2024, 1, 15, 10, 30, 45))

    def test_add_entry_unknown_level(self) -> None:
        pane = LogPane()
        pane.add_entry("custom", "Something happened")


class TestLogPaneSink:
    """Tests for LogPane.sink."""

    def test_ignores_plain_strings(self) -> None:
        pane = LogPane()
        pane.add_entry = MagicMock()
        pane.sink("not a loguru message")
        pane.add_entry.assert_not_called()

    def test_falls_back_without_running_app(self) -> None:
        pane = LogPane()
        pane.add_entry = MagicMock()
        level = MagicMock()
        level.name = "WARNING"
        message = MagicMock()
        message.record = {
            "level": level,
            "message": "tmux reload skipped",
            "time": datetime(2024, 1, 15, 10, 30, 45),
        }
        pane.sink(message)
        pane.add_entry.assert_called_once_with("WARNING", "tmux reload skipped", datetime(2024, 1, 15, 10, 30, 45))
