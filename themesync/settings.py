"""Persistent settings for themesync."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from themesync.logger import get_logger
from themesync.sync.catalog import is_valid_theme
from themesync.sync.pairs import DEFAULT_PAIR_NAME, THEME_PAIRS

logger = get_logger(__name__)

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Where the selection is stored: the private pair-state file or settings.json
PERSISTENCE_MODES: tuple[str, ...] = ("state", "settings")
DEFAULT_PERSISTENCE = "state"

DEFAULT_THEME = THEME_PAIRS[DEFAULT_PAIR_NAME].dark.name

# Appearance poll interval (in seconds)
MIN_POLL_INTERVAL = 1.0
MAX_POLL_INTERVAL = 60.0
DEFAULT_POLL_INTERVAL = 2.0

# Timeout for each external command (in seconds)
MIN_COMMAND_TIMEOUT = 0.5
MAX_COMMAND_TIMEOUT = 30.0
DEFAULT_COMMAND_TIMEOUT = 5.0

SETTINGS_FILENAME = "settings.json"
PAIR_STATE_FILENAME = "theme-pair-state.json"


@dataclass(frozen=True)
class Settings:
    """User-configurable settings stored on disk."""

    theme: str = DEFAULT_THEME
    persistence: str = DEFAULT_PERSISTENCE
    poll_interval: float = DEFAULT_POLL_INTERVAL
    command_timeout: float = DEFAULT_COMMAND_TIMEOUT
    log_level: str = "WARNING"

    @property
    def settings_driven(self) -> bool:
        """Whether the selected theme lives in this settings file."""
        return self.persistence == "settings"

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Settings:
        """Create settings from a mapping, applying defaults for invalid values.

        Args:
            data: Mapping containing raw settings values.

        Returns:
            A Settings instance with validated values.
        """
        theme_value = _coerce_str(data.get("theme"))
        theme = theme_value if theme_value is not None and is_valid_theme(theme_value) else DEFAULT_THEME

        persistence_value = _coerce_str(data.get("persistence"))
        persistence = (
            persistence_value
            if persistence_value is not None and persistence_value in PERSISTENCE_MODES
            else DEFAULT_PERSISTENCE
        )

        poll_interval = _coerce_float(data.get("poll_interval"))
        if poll_interval is None or poll_interval < MIN_POLL_INTERVAL or poll_interval > MAX_POLL_INTERVAL:
            poll_interval = DEFAULT_POLL_INTERVAL

        command_timeout = _coerce_float(data.get("command_timeout"))
        if (
            command_timeout is None
            or command_timeout < MIN_COMMAND_TIMEOUT
            or command_timeout > MAX_COMMAND_TIMEOUT
        ):
            command_timeout = DEFAULT_COMMAND_TIMEOUT

        log_level_value = _coerce_str(data.get("log_level"))
        log_level = log_level_value if log_level_value is not None and log_level_value in LOG_LEVELS else "WARNING"

        return cls(
            theme=theme,
            persistence=persistence,
            poll_interval=poll_interval,
            command_timeout=command_timeout,
            log_level=log_level,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize settings to a dictionary.

        Returns:
            Dictionary representation of settings.
        """
        return {
            "theme": self.theme,
            "persistence": self.persistence,
            "poll_interval": self.poll_interval,
            "command_timeout": self.command_timeout,
            "log_level": self.log_level,
        }


def get_config_dir() -> Path:
    """Get the directory used for persistent configuration.

    Returns:
        Path to the configuration directory.
    """
    override_dir = os.environ.get("THEMESYNC_CONFIG_DIR")
    if override_dir:
        return Path(override_dir).expanduser()

    base_dir = os.environ.get("XDG_CONFIG_HOME")
    if base_dir:
        return Path(base_dir).expanduser() / "themesync"

    return Path.home() / ".config" / "themesync"


def get_home_dir() -> Path:
    """Get the home directory whose Ghostty and tmux configs are synced.

    Returns:
        ``THEMESYNC_HOME`` if set, otherwise the user's home directory.
    """
    override_home = os.environ.get("THEMESYNC_HOME")
    if override_home:
        return Path(override_home).expanduser()
    return Path.home()


def get_settings_path() -> Path:
    """Get the full path to the settings file.

    Returns:
        Path to the settings JSON file.
    """
    return get_config_dir() / SETTINGS_FILENAME


def get_pair_state_path() -> Path:
    """Get the full path to the pair-state file.

    Returns:
        Path to the pair-state JSON file.
    """
    return get_config_dir() / PAIR_STATE_FILENAME


def read_json_object(path: Path) -> dict[str, object] | None:
    """Read a JSON object from disk.

    Args:
        path: File to read.

    Returns:
        The decoded object, or None if the file is missing, unreadable,
        malformed, or not a JSON object.
    """
    if not path.exists():
        return None

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        logger.warning(f"Failed to parse {path}: {exc}")
        return None
    except OSError as exc:
        logger.warning(f"Failed to read {path}: {exc}")
        return None

    if not isinstance(raw, dict):
        logger.warning(f"{path} contains invalid data")
        return None
    return raw


def write_json_object(path: Path, data: Mapping[str, object]) -> bool:
    """Write a JSON object to disk, creating parent directories.

    Args:
        path: File to write.
        data: Object to serialize.

    Returns:
        True if the file was written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(dict(data), indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning(f"Failed to save {path}: {exc}")
        return False
    return True


def load_settings() -> Settings:
    """Load settings from disk.

    Returns:
        Loaded settings, or defaults if none exist.
    """
    raw = read_json_object(get_settings_path())
    if raw is None:
        return Settings()
    return Settings.from_mapping(raw)



def _coerce_str(value: object) -> str | None:
    """Coerce a value into a string if possible.

    Args:
        value: Raw value to coerce.

    Returns:
        String value or None.
    """
    if isinstance(value, str):
        return value
    return None


def _coerce_float(value: object) -> float | None:
    """Coerce a value into a float if possible.

    Args:
        value: Raw value to coerce.

    Returns:
        Float value or None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None
