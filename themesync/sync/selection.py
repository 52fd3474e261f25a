"""Selection model and the pure state machine driving it.

A selection records what the user asked for. It is changed only by explicit
commands; the appearance poll re-resolves it but never mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from themesync.sync.catalog import ALL_THEMES, is_valid_theme
from themesync.sync.errors import UnknownPairError, UnknownThemeError
from themesync.sync.pairs import DEFAULT_PAIR_NAME, PAIR_NAMES, THEME_PAIRS


class SelectionMode(Enum):
    """Which kind of selection is active."""

    AUTO = "auto"
    PINNED = "pinned"
    SETTINGS = "settings"


@dataclass(frozen=True)
class AutoSelection:
    """Follow the system appearance using a pair."""

    pair: str

    @property
    def mode(self) -> SelectionMode:
        """Selection mode."""
        return SelectionMode.AUTO


@dataclass(frozen=True)
class PinnedSelection:
    """Use a single theme regardless of appearance."""

    theme: str

    @property
    def mode(self) -> SelectionMode:
        """Selection mode."""
        return SelectionMode.PINNED


@dataclass(frozen=True)
class SettingsSelection:
    """A single theme read from and written back to the settings file."""

    theme: str

    @property
    def mode(self) -> SelectionMode:
        """Selection mode."""
        return SelectionMode.SETTINGS


Selection = AutoSelection | PinnedSelection | SettingsSelection

DEFAULT_SELECTION = AutoSelection(DEFAULT_PAIR_NAME)


def describe(selection: Selection) -> str:
    """Return a short user-facing description, e.g. ``everforest (auto)``."""
    if isinstance(selection, AutoSelection):
        return f"{selection.pair} (auto)"
    if isinstance(selection, SettingsSelection):
        return f"{selection.theme} (settings)"
    return f"{selection.theme} (pinned)"


def picker_value(selection: Selection) -> str:
    """Return the picker row value matching a selection."""
    if isinstance(selection, AutoSelection):
        return f"auto:{selection.pair}"
    return f"pin:{selection.theme}"


class SelectionState:
    """Current selection plus the bookkeeping needed to avoid redundant work.

    The state is pure: it never touches files or the system. Callers are
    expected to persist and apply after each successful transition.
    """

    def __init__(
        self,
        selection: Selection = DEFAULT_SELECTION,
        settings_driven: bool = False,
        last_pair: str | None = None,
    ) -> None:
        """Initialize the state.

        Args:
            selection: Initial selection, usually loaded from disk.
            settings_driven: Whether selections are stored in the settings
                file instead of the pair-state file.
            last_pair: Pair remembered alongside a pinned theme.
        """
        self.selection: Selection = selection
        if isinstance(selection, AutoSelection):
            last_pair = selection.pair
        self.last_pair: str = last_pair if last_pair in THEME_PAIRS else DEFAULT_PAIR_NAME
        self.settings_driven = settings_driven
        self.last_applied: str | None = None
        self._picker_snapshot: Selection | None = None

    @property
    def mode(self) -> SelectionMode:
        """Mode of the active selection."""
        return self.selection.mode

    def set_pair(self, name: str, resolved_theme: str | None = None) -> Selection:
        """Switch to a pair in auto mode.

        Args:
            name: Pair name.
            resolved_theme: Theme the pair currently resolves to. Required in
                settings-driven mode, where only a single theme is stored.

        Returns:
            The new selection.

        Raises:
            UnknownPairError: If the pair is not registered.
        """
        pair = THEME_PAIRS.get(name)
        if pair is None:
            raise UnknownPairError(name, PAIR_NAMES)
        self.last_pair = name
        if self.settings_driven:
            self.selection = SettingsSelection(resolved_theme or pair.dark.name)
        else:
            self.selection = AutoSelection(name)
        self.invalidate()
        return self.selection

    def set_individual(self, name: str) -> Selection:
        """Pin a single theme.

        Args:
            name: Theme name.

        Returns:
            The new selection.

        Raises:
            UnknownThemeError: If the theme is not in the catalog.
        """
        if not is_valid_theme(name):
            raise UnknownThemeError(name, ALL_THEMES)
        self.selection = SettingsSelection(name) if self.settings_driven else PinnedSelection(name)
        self.invalidate()
        return self.selection

    def needs_app_update(self, theme_name: str) -> bool:
        """Whether the app theme differs from the one last applied."""
        return theme_name != self.last_applied

    def mark_applied(self, theme_name: str) -> None:
        """Record the app theme that is now on screen."""
        self.last_applied = theme_name

    def invalidate(self) -> None:
        """Forget the last applied theme so the next apply is not skipped."""
        self.last_applied = None

    @property
    def picker_open(self) -> bool:
        """Whether an interactive selection is in progress."""
        return self._picker_snapshot is not None

    def open_picker(self) -> None:
        """Remember the selection in effect before the picker opened."""
        self._picker_snapshot = self.selection

    def close_picker(self) -> None:
        """Drop the picker snapshot after a confirmed selection."""
        self._picker_snapshot = None

    def cancel_picker(self) -> Selection:
        """Restore the selection in effect before the picker opened.

        Returns:
            The restored selection.
        """
        if self._picker_snapshot is not None:
            self.selection = self._picker_snapshot
            self._picker_snapshot = None
        self.invalidate()
        return self.selection

    def persisted_record(self) -> dict[str, str | None]:
        """Return the record to store for the current selection."""
        if isinstance(self.selection, SettingsSelection):
            return {"theme": self.selection.theme}
        if isinstance(self.selection, PinnedSelection):
            return {"pair": self.last_pair, "pinned": self.selection.theme}
        return {"pair": self.selection.pair, "pinned": None}
