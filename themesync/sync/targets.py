"""File-level synchronisation of Ghostty and tmux.

Writes only happen when content actually changes, and reload triggers only
fire after a write. Missing or unwritable files skip that step silently.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from themesync.logger import get_logger
from themesync.sync import commands
from themesync.sync.catalog import ALL_THEMES, THEMES
from themesync.sync.errors import AssetMissing, ConfigUnavailable
from themesync.sync.rewriter import current_theme_value, rewrite_theme_line

logger = get_logger(__name__)

ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"
BUNDLED_TERMINAL_THEMES = ASSETS_DIR / "ghostty"
BUNDLED_MULTIPLEXER_THEMES = ASSETS_DIR / "tmux"


@dataclass(frozen=True)
class SyncPaths:
    """Locations of every file themesync reads or writes outside its own config."""

    terminal_config: Path
    terminal_themes_dir: Path
    multiplexer_themes_dir: Path
    multiplexer_theme_file: Path

    @classmethod
    def from_home(cls, home: Path) -> SyncPaths:
        """Build the standard layout under a home directory.

        Args:
            home: The user's home directory.

        Returns:
            Paths for Ghostty and tmux under ``home/.config``.
        """
        config = home / ".config"
        return cls(
            terminal_config=config / "ghostty" / "config",
            terminal_themes_dir=config / "ghostty" / "themes",
            multiplexer_themes_dir=config / "tmux" / "themes",
            multiplexer_theme_file=config / "tmux" / "theme.conf",
        )


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF line endings intact
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise ConfigUnavailable(f"Cannot read {path}: {exc}") from exc


def _write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8", newline="")
    except OSError as exc:
        raise ConfigUnavailable(f"Cannot write {path}: {exc}") from exc


class SyncTargets:
    """Apply resolved themes to Ghostty and tmux on disk."""

    def __init__(
        self,
        paths: SyncPaths,
        command_timeout: float = commands.DEFAULT_COMMAND_TIMEOUT,
        terminal_assets: Path = BUNDLED_TERMINAL_THEMES,
        multiplexer_assets: Path = BUNDLED_MULTIPLEXER_THEMES,
    ) -> None:
        """Initialize the targets.

        Args:
            paths: Where the Ghostty and tmux files live.
            command_timeout: Timeout for each reload command.
            terminal_assets: Directory of bundled Ghostty theme files.
            multiplexer_assets: Directory of bundled tmux theme files.
        """
        self.paths = paths
        self.command_timeout = command_timeout
        self.terminal_assets = terminal_assets
        self.multiplexer_assets = multiplexer_assets

    def update_terminal_config(self, directive: str) -> bool:
        """Rewrite the Ghostty theme line and reload Ghostty if it changed.

        Args:
            directive: Value to place after ``theme = ``.

        Returns:
            True if the config file was rewritten.
        """
        path = self.paths.terminal_config
        try:
            text = _read_text(path)
            result = rewrite_theme_line(text, directive)
            if not result.changed:
                return False
            _write_text(path, result.text)
        except ConfigUnavailable as exc:
            logger.debug(f"Skipping Ghostty sync: {exc}")
            return False

        logger.info(f"Ghostty theme set to {directive!r} (was {current_theme_value(text)!r})")
        commands.reload_terminal(self.command_timeout)
        return True

    def sync_multiplexer(self, theme_name: str) -> bool:
        """Replace the tmux theme file with the named theme and source it.

        Args:
            theme_name: Catalog theme name; ``<theme_name>.conf`` is copied.

        Returns:
            True if the tmux theme file was rewritten.
        """
        source = self.paths.multiplexer_themes_dir / f"{theme_name}.conf"
        destination = self.paths.multiplexer_theme_file
        try:
            content = _read_text(source)
            if destination.exists() and _read_text(destination) == content:
                return False
            _write_text(destination, content)
        except ConfigUnavailable as exc:
            logger.debug(f"Skipping tmux sync: {exc}")
            return False

        logger.info(f"tmux theme set to {theme_name}")
        commands.reload_multiplexer(str(destination), self.command_timeout)
        return True

    def install_terminal_themes(self) -> list[str]:
        """Install bundled Ghostty themes that are not present yet.

        Nothing is installed unless Ghostty's config directory already exists,
        and existing theme files are never overwritten.

        Returns:
            Names of the themes that were written.
        """
        if not self.paths.terminal_config.parent.is_dir():
            logger.debug("Ghostty config directory not found, skipping theme install")
            return []

        installed: list[str] = []
        try:
            self.paths.terminal_themes_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.debug(f"Cannot create {self.paths.terminal_themes_dir}: {exc}")
            return installed

        for theme in THEMES.values():
            destination = self.paths.terminal_themes_dir / theme.external_name
            if destination.exists():
                continue
            try:
                _install_asset(self.terminal_assets / theme.external_name, destination)
            except (AssetMissing, ConfigUnavailable) as exc:
                logger.debug(f"Skipping Ghostty theme {theme.external_name!r}: {exc}")
                continue
            installed.append(theme.external_name)

        if installed:
            logger.info(f"Installed Ghostty themes: {', '.join(installed)}")
        return installed

    def install_multiplexer_themes(self) -> list[str]:
        """Copy bundled tmux themes that are not present yet.

        Returns:
            Names of the themes that were copied.
        """
        installed: list[str] = []
        try:
            self.paths.multiplexer_themes_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.debug(f"Cannot create {self.paths.multiplexer_themes_dir}: {exc}")
            return installed

        for name in ALL_THEMES:
            filename = f"{name}.conf"
            destination = self.paths.multiplexer_themes_dir / filename
            if destination.exists():
                continue
            try:
                _install_asset(self.multiplexer_assets / filename, destination)
            except (AssetMissing, ConfigUnavailable) as exc:
                logger.debug(f"Skipping tmux theme {name}: {exc}")
                continue
            installed.append(name)
        return installed


def _install_asset(source: Path, destination: Path) -> None:
    """Copy one bundled asset.

    Args:
        source: Bundled file.
        destination: Where to write it.

    Raises:
        AssetMissing: If the bundled file does not exist.
        ConfigUnavailable: If the destination cannot be written.
    """
    try:
        content = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise AssetMissing(f"Bundled asset {source} is missing") from exc
    _write_text(destination, content)
