"""Main Textual TUI application for themesync."""

from pathlib import Path
from typing import ClassVar

from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Footer, Header, Static

from themesync.logger import add_tui_sink, get_logger, remove_tui_sink
from themesync.session import ThemeSession, create_session
from themesync.settings import Settings, load_settings
from themesync.sync.selection import describe, picker_value
from themesync.themes import REGISTERED_THEMES
from themesync.widgets.log_pane import LogPane
from themesync.widgets.picker import ThemePickerScreen

logger = get_logger(__name__)

# Path to styles directory
STYLES_DIR = Path(__file__).parent / "styles"


class ThemeSyncApp(App[None]):
    """Textual app that keeps its own theme, Ghostty and tmux in sync."""

    TITLE = "themesync"
    ENABLE_COMMAND_PALETTE = False
    CSS_PATH: ClassVar[list[Path]] = [STYLES_DIR / "app.tcss"]
    BINDINGS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("t", "pick_theme", "Theme"),
        ("q", "quit", "Quit"),
    )

    def __init__(
        self,
        settings: Settings | None = None,
        session: ThemeSession | None = None,
        open_picker: bool = False,
    ) -> None:
        """Initialize the app.

        Args:
            settings: Settings to use. Loaded from disk when omitted.
            session: Session to host. Built from settings when omitted.
            open_picker: Whether to open the picker as soon as the app starts.
        """
        super().__init__()
        self._settings = settings or load_settings()
        for theme in REGISTERED_THEMES:
            self.register_theme(theme)
        self.session = session or create_session(self._settings, self._set_app_theme)
        self.session.on_app_theme = self._set_app_theme
        self._open_picker_on_start = open_picker
        self._log_sink_id: int | None = None
        self._status: Static | None = None
        logger.info("Initializing ThemeSyncApp")

    def compose(self) -> ComposeResult:
        """Create the UI layout.

        Yields:
            The widgets that make up the application UI.
        """
        yield Header()
        with Container(id="status-panel"):
            self._status = Static("", id="status")
            yield self._status
        with Container(id="log-panel"):
            yield Static("[bold]Activity[/bold]", id="log-title")
            yield LogPane(id="log_pane")
        yield Footer()

    async def on_mount(self) -> None:
        """Attach the log pane and start the session."""
        log_pane = self.query_one("#log_pane", LogPane)
        self._log_sink_id = add_tui_sink(log_pane.sink, level=self._settings.log_level)

        await self.session.start()
        self._update_status()
        if self._open_picker_on_start:
            self.action_pick_theme()

    def _set_app_theme(self, name: str) -> None:
        """Switch the Textual theme, ignoring themes that were not registered."""
        if name not in self.available_themes:
            logger.warning(f"App theme {name} is not registered")
            return
        self.theme = name
        self._update_status()

    def _update_status(self) -> None:
        if self._status is None:
            return
        self._status.update(f"[bold]{describe(self.session.selection)}[/bold]  showing {self.theme}")

    def action_pick_theme(self) -> None:
        """Open the interactive picker."""
        self.session.open_picker()
        picker = ThemePickerScreen(
            current=picker_value(self.session.selection),
            on_preview=self.session.preview,
        )
        self.push_screen(picker, self._handle_pick)

    async def _handle_pick(self, value: str | None) -> None:
        """Commit or revert the picker result.

        Args:
            value: Chosen row value, or None if the picker was cancelled.
        """
        if value is None:
            await self.session.cancel_picker()
            self._update_status()
            return

        selection = await self.session.confirm_picker(value)
        if selection is None:
            await self.session.cancel_picker()
        else:
            self.notify(f"Theme: {describe(selection)}", severity="information")
        self._update_status()

    async def select(self, name: str) -> None:
        """Switch directly to a pair or a theme by name.

        Args:
            name: Pair or theme name.
        """
        _, error = await self.session.select(name)
        if error:
            self.notify(error, severity="error")
            return
        self.notify(f"Theme: {describe(self.session.selection)}", severity="information")
        self._update_status()

    async def action_quit(self) -> None:
        """Quit the application."""
        logger.info("Quitting application")
        self._stop_session()
        self.exit()

    def on_unmount(self) -> None:
        """Make sure the poll never outlives the app."""
        self._stop_session()

    def _stop_session(self) -> None:
        self.session.stop()
        if self._log_sink_id is not None:
            remove_tui_sink(self._log_sink_id)
            self._log_sink_id = None


def main(settings: Settings | None = None, open_picker: bool = False) -> None:
    """Run the themesync TUI app.

    Args:
        settings: Settings to use. Loaded from disk when omitted.
        open_picker: Whether to open the picker immediately.
    """
    logger.info("Starting themesync")
    app = ThemeSyncApp(settings=settings, open_picker=open_picker)
    app.run()
    logger.info("themesync exited")
