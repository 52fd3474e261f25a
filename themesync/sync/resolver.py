"""Turn a selection into the concrete theme each downstream system needs.

Everything here is pure so it can be checked against literal
(pair, appearance) -> theme tables without touching the system.
"""

from __future__ import annotations

from dataclasses import dataclass

from themesync.sync.catalog import ALL_THEMES, THEMES, Theme
from themesync.sync.errors import UnknownPairError, UnknownThemeError
from themesync.sync.pairs import PAIR_NAMES, THEME_PAIRS, ThemePair
from themesync.sync.rewriter import pair_directive
from themesync.sync.selection import AutoSelection, Selection


@dataclass(frozen=True)
class ResolvedTarget:
    """Concrete targets for the app, Ghostty and tmux.

    Attributes:
        app_theme: Theme to show in the application.
        terminal_directive: Value written after ``theme = `` in the Ghostty
            config. Either a single Ghostty theme name or a light/dark
            composite.
        multiplexer_theme_name: Name of the tmux theme file (without
            ``.conf``). tmux themes share the app theme names.
    """

    app_theme: Theme
    terminal_directive: str
    multiplexer_theme_name: str


def _require_pair(pair_name: str) -> ThemePair:
    pair = THEME_PAIRS.get(pair_name)
    if pair is None:
        raise UnknownPairError(pair_name, PAIR_NAMES)
    return pair


def resolve_auto(pair_name: str, is_dark_mode: bool) -> ResolvedTarget:
    """Resolve a pair against the current appearance.

    Ghostty gets the composite light/dark directive so it can follow the
    system on its own.

    Args:
        pair_name: Registered pair name.
        is_dark_mode: Whether the system is currently in dark mode.

    Returns:
        The resolved targets.

    Raises:
        UnknownPairError: If the pair is not registered.
    """
    pair = _require_pair(pair_name)
    app_theme = pair.member(is_dark_mode)
    return ResolvedTarget(
        app_theme=app_theme,
        terminal_directive=pair_directive(pair),
        multiplexer_theme_name=app_theme.name,
    )


def resolve_auto_pinned_terminal(pair_name: str, is_dark_mode: bool) -> ResolvedTarget:
    """Resolve a pair, but give Ghostty the single resolved theme name."""
    pair = _require_pair(pair_name)
    return resolve_pinned(pair.member(is_dark_mode).name)


def resolve_pinned(theme_name: str) -> ResolvedTarget:
    """Resolve a single theme, ignoring appearance.

    Args:
        theme_name: Catalog theme name.

    Returns:
        The resolved targets.

    Raises:
        UnknownThemeError: If the theme is not in the catalog.
    """
    theme = THEMES.get(theme_name)
    if theme is None:
        raise UnknownThemeError(theme_name, ALL_THEMES)
    return ResolvedTarget(
        app_theme=theme,
        terminal_directive=theme.external_name,
        multiplexer_theme_name=theme.name,
    )


def resolve_selection(selection: Selection, is_dark_mode: bool) -> ResolvedTarget:
    """Resolve any selection shape.

    Args:
        selection: Active selection.
        is_dark_mode: Current appearance; ignored for single-theme selections.

    Returns:
        The resolved targets.
    """
    if isinstance(selection, AutoSelection):
        return resolve_auto(selection.pair, is_dark_mode)
    return resolve_pinned(selection.theme)
