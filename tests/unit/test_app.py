"""Tests for the main ThemeSyncApp."""

import pytest
from themesync.app import ThemeSyncApp
from themesync.session import ThemeSession
from themesync.settings import Settings
from themesync.sync.catalog import THEMES
from themesync.sync.selection import AutoSelection, PinnedSelection
from themesync.widgets.picker import ThemePickerScreen

from tests.fakes import FakeAppearance


@pytest.fixture
def app(session: ThemeSession) -> ThemeSyncApp:
    """App hosting the temporary session."""
    return ThemeSyncApp(settings=Settings(), session=session)


class TestThemeSyncAppInit:
    """Tests for ThemeSyncApp initialization."""

    def test_registers_catalog_themes(self, app: ThemeSyncApp) -> None:
        for name in THEMES:
            assert name in app.available_themes

    def test_takes_over_app_theme_callback(self, app: ThemeSyncApp) -> None:
        assert app.session.on_app_theme == app._set_app_theme

    def test_session_not_started(self, app: ThemeSyncApp) -> None:
        assert not app.session.is_running

    def test_builds_session_when_missing(self) -> None:
        app = ThemeSyncApp(settings=Settings(poll_interval=3.0))
        assert app.session.poll_interval == 3.0


class TestThemeSyncAppRunning:
    """Tests for the running app."""

    async def test_startup_applies_resolved_theme(self, app: ThemeSyncApp) -> None:
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            assert app.theme == "catppuccin-latte"
            assert app.session.is_running
        assert not app.session.is_running

    async def test_appearance_change_updates_theme(self, app: ThemeSyncApp, appearance: FakeAppearance) -> None:
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            appearance.dark = True
            await app.session.tick()
            await pilot.pause()
            assert app.theme == "catppuccin-mocha"

    async def test_select_theme(self, app: ThemeSyncApp) -> None:
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            await app.select("high-contrast-dark")
            await pilot.pause()
            assert app.theme == "high-contrast-dark"
            assert app.session.selection == PinnedSelection("high-contrast-dark")

    async def test_select_unknown_keeps_theme(self, app: ThemeSyncApp) -> None:
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            await app.select("solarized")
            await pilot.pause()
            assert app.theme == "catppuccin-latte"
            assert app.session.selection == AutoSelection("catppuccin")

    async def test_unregistered_theme_is_ignored(self, app: ThemeSyncApp) -> None:
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            app._set_app_theme("not-a-theme")
            assert app.theme == "catppuccin-latte"

    async def test_quit_stops_session(self, app: ThemeSyncApp) -> None:
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            await pilot.press("q")
            await pilot.pause()
        assert not app.session.is_running


class TestPickerFlow:
    """Tests for the interactive picker inside the app."""

    async def test_t_opens_picker(self, app: ThemeSyncApp) -> None:
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            await pilot.press("t")
            await pilot.pause()
            assert isinstance(app.screen, ThemePickerScreen)
            assert app.session.state.picker_open

    async def test_open_picker_on_start(self, session: ThemeSession) -> None:
        app = ThemeSyncApp(settings=Settings(), session=session, open_picker=True)
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            assert isinstance(app.screen, ThemePickerScreen)

    async def test_preview_then_cancel_restores(self, app: ThemeSyncApp) -> None:
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            config_before = app.session.targets.paths.terminal_config.read_text()
            await pilot.press("t")
            await pilot.pause()
            await pilot.press("down")
            await pilot.pause()
            # Pair rows preview their dark member
            assert app.theme == "catppuccin-macchiato"
            assert app.session.targets.paths.terminal_config.read_text() == config_before

            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, ThemePickerScreen)
            assert app.theme == "catppuccin-latte"
            assert app.session.selection == AutoSelection("catppuccin")
            assert not app.session.state.picker_open

    async def test_confirm_commits_selection(self, app: ThemeSyncApp) -> None:
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            await pilot.press("t")
            await pilot.pause()
            await pilot.press("down")
            await pilot.press("enter")
            await pilot.pause()
            await pilot.pause()
            assert app.session.selection == AutoSelection("catppuccin-macchiato")
            assert app.theme == "catppuccin-latte"
            config = app.session.targets.paths.terminal_config.read_text()
            assert "theme = light:Catppuccin Latte Sync,dark:Catppuccin Macchiato Sync\n" in config
