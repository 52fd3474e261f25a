"""Stores for the user's theme selection.

Two backends exist. The pair-state file holds ``{"pair", "pinned"}`` and
supports both auto and pinned selections. The settings store keeps a single
``theme`` inside settings.json, for setups where that file is the source of
truth.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from themesync.logger import get_logger
from themesync.settings import (
    Settings,
    get_pair_state_path,
    get_settings_path,
    read_json_object,
    write_json_object,
)
from themesync.sync.catalog import is_valid_theme
from themesync.sync.pairs import DEFAULT_PAIR_NAME, is_valid_pair
from themesync.sync.selection import (
    DEFAULT_SELECTION,
    AutoSelection,
    PinnedSelection,
    Selection,
    SelectionState,
    SettingsSelection,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class PairState:
    """Contents of the pair-state file."""

    pair: str = DEFAULT_PAIR_NAME
    pinned: str | None = None

    @classmethod
    def from_mapping(cls, data: dict[str, object]) -> PairState | None:
        """Parse raw file contents.

        Args:
            data: Decoded JSON object.

        Returns:
            The parsed state, or None if no valid pair is recorded. An
            invalid ``pinned`` value is dropped rather than rejected.
        """
        pair = data.get("pair")
        if not isinstance(pair, str) or not is_valid_pair(pair):
            return None
        pinned = data.get("pinned")
        if not isinstance(pinned, str) or not is_valid_theme(pinned):
            pinned = None
        return cls(pair=pair, pinned=pinned)

    @property
    def selection(self) -> Selection:
        """Selection described by this state."""
        if self.pinned is not None:
            return PinnedSelection(self.pinned)
        return AutoSelection(self.pair)

    def to_dict(self) -> dict[str, object]:
        """Serialize to the on-disk record."""
        return {"pair": self.pair, "pinned": self.pinned}


class SelectionStore(Protocol):
    """Backend that loads and saves the selection."""

    settings_driven: bool

    def load(self) -> SelectionState:
        """Load the stored selection, falling back to the default pair."""
        ...

    def save(self, state: SelectionState) -> None:
        """Persist the current selection."""
        ...


class PairStateStore:
    """Selection stored in the private pair-state file."""

    settings_driven = False

    def __init__(self, path: Path | None = None) -> None:
        """Initialize the store.

        Args:
            path: State file location. Defaults to the config directory.
        """
        self.path = path or get_pair_state_path()

    def load(self) -> SelectionState:
        """Load the stored selection, falling back to the default pair.

        Returns:
            A fresh selection state.
        """
        raw = read_json_object(self.path)
        state = PairState.from_mapping(raw) if raw is not None else None
        if state is None:
            logger.debug(f"No usable pair state in {self.path}, using {DEFAULT_SELECTION}")
            return SelectionState(DEFAULT_SELECTION)
        return SelectionState(state.selection, last_pair=state.pair)

    def save(self, state: SelectionState) -> None:
        """Persist the current selection.

        Args:
            state: Selection state to store.
        """
        record = state.persisted_record()
        pinned = record.get("pinned")
        pair_state = PairState(pair=str(record.get("pair") or state.last_pair), pinned=pinned)
        if write_json_object(self.path, pair_state.to_dict()):
            logger.debug(f"Saved pair state {pair_state.to_dict()} to {self.path}")


class SettingsStore:
    """Selection stored as the ``theme`` key of settings.json."""

    settings_driven = True

    def __init__(self, path: Path | None = None) -> None:
        """Initialize the store.

        Args:
            path: Settings file location. Defaults to the config directory.
        """
        self.path = path or get_settings_path()

    def load(self) -> SelectionState:
        """Load the stored theme.

        Returns:
            A fresh settings-driven selection state.
        """
        settings = Settings.from_mapping(read_json_object(self.path) or {})
        return SelectionState(SettingsSelection(settings.theme), settings_driven=True)

    def save(self, state: SelectionState) -> None:
        """Write the current theme back into settings.json.

        Other keys in the file are preserved.

        Args:
            state: Selection state to store.
        """
        theme = state.persisted_record().get("theme")
        if theme is None:
            return
        existing = read_json_object(self.path) or {}
        if write_json_object(self.path, {**existing, "theme": theme}):
            logger.debug(f"Saved theme {theme} to {self.path}")


def make_store(settings: Settings) -> SelectionStore:
    """Pick the store matching the configured persistence mode."""
    if settings.settings_driven:
        return SettingsStore()
    return PairStateStore()
