"""Shared test fixtures for themesync."""

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Keep log files out of the real home before themesync.logger is imported
os.environ.setdefault("THEMESYNC_LOG_DIR", tempfile.mkdtemp(prefix="themesync-logs-"))

from themesync.persistence import PairStateStore  # noqa: E402
from themesync.session import ThemeSession  # noqa: E402
from themesync.sync.targets import SyncPaths, SyncTargets  # noqa: E402

from tests.fakes import FakeAppearance  # noqa: E402

SAMPLE_GHOSTTY_CONFIG = """font-size = 14
theme = Catppuccin Mocha
window-theme = auto
"""


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point every config and home lookup at a temporary directory."""
    monkeypatch.setenv("THEMESYNC_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("THEMESYNC_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Home directory with a Ghostty config containing a theme line."""
    home_dir = tmp_path / "home"
    ghostty_dir = home_dir / ".config" / "ghostty"
    ghostty_dir.mkdir(parents=True)
    (ghostty_dir / "config").write_text(SAMPLE_GHOSTTY_CONFIG)
    return home_dir


@pytest.fixture
def sync_paths(home: Path) -> SyncPaths:
    """Standard Ghostty and tmux layout under the temporary home."""
    return SyncPaths.from_home(home)


@pytest.fixture
def reloads() -> Iterator[dict[str, MagicMock]]:
    """Replace the Ghostty and tmux reload triggers with mocks."""
    with (
        patch("themesync.sync.commands.reload_terminal", return_value=True) as terminal,
        patch("themesync.sync.commands.reload_multiplexer", return_value=True) as multiplexer,
    ):
        yield {"terminal": terminal, "multiplexer": multiplexer}


@pytest.fixture
def targets(sync_paths: SyncPaths, reloads: dict[str, MagicMock]) -> SyncTargets:
    """Sync targets with the bundled tmux themes already installed."""
    sync_targets = SyncTargets(sync_paths, command_timeout=1.0)
    sync_targets.install_multiplexer_themes()
    return sync_targets


@pytest.fixture
def appearance() -> FakeAppearance:
    """Appearance that starts in light mode."""
    return FakeAppearance(dark=False)


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    """Location of the pair-state file."""
    return tmp_path / "config" / "theme-pair-state.json"


@pytest.fixture
def applied() -> list[str]:
    """App themes applied by a session, in order."""
    return []


@pytest.fixture
def session(
    state_path: Path,
    targets: SyncTargets,
    applied: list[str],
    appearance: FakeAppearance,
) -> ThemeSession:
    """Session backed by temporary files and a fake appearance."""
    return ThemeSession(
        store=PairStateStore(state_path),
        targets=targets,
        on_app_theme=applied.append,
        is_dark_mode=appearance,
        poll_interval=0.01,
    )
