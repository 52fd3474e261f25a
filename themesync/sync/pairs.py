"""Registry of dark/light theme pairs."""

from __future__ import annotations

from dataclasses import dataclass

from themesync.sync.catalog import DARK_THEMES, LIGHT_THEMES, THEMES, Theme, Variant, is_valid_theme
from themesync.sync.errors import UnknownNameError, UnknownPairError


@dataclass(frozen=True)
class ThemePair:
    """A dark theme and a light theme switched by system appearance."""

    name: str
    dark: Theme
    light: Theme

    def __post_init__(self) -> None:
        """Check that each member has the expected variant."""
        if self.dark.variant is not Variant.DARK:
            raise ValueError(f"Pair {self.name!r}: {self.dark.name!r} is not a dark theme")
        if self.light.variant is not Variant.LIGHT:
            raise ValueError(f"Pair {self.name!r}: {self.light.name!r} is not a light theme")

    def member(self, is_dark_mode: bool) -> Theme:
        """Return the member matching the given appearance."""
        return self.dark if is_dark_mode else self.light


DEFAULT_PAIR_NAME = "catppuccin"

THEME_PAIRS: dict[str, ThemePair] = {
    name: ThemePair(name, THEMES[dark], THEMES[light])
    for name, dark, light in (
        ("catppuccin", "catppuccin-mocha", "catppuccin-latte"),
        ("catppuccin-macchiato", "catppuccin-macchiato", "catppuccin-latte"),
        ("catppuccin-frappe", "catppuccin-frappe", "catppuccin-latte"),
        ("everforest", "everforest-dark", "everforest-light"),
        ("high-contrast", "high-contrast-dark", "high-contrast-light"),
    )
}

PAIR_NAMES: tuple[str, ...] = tuple(THEME_PAIRS)


def list_pair_names() -> list[str]:
    """Return pair names in registry order."""
    return list(PAIR_NAMES)


def get_pair(name: str) -> ThemePair | None:
    """Look up a pair by name, returning None if it does not exist."""
    return THEME_PAIRS.get(name)


def is_valid_pair(name: str) -> bool:
    """Check whether a pair name is registered."""
    return name in THEME_PAIRS


def validate_pair(name: str) -> tuple[ThemePair | None, str | None]:
    """Validate a pair name.

    Args:
        name: Pair name supplied by the user.

    Returns:
        Tuple of (pair, optional error message). The error message names
        the rejected value and lists every valid pair.
    """
    pair = THEME_PAIRS.get(name)
    if pair is None:
        return None, str(UnknownPairError(name, PAIR_NAMES))
    return pair, None


def all_selectable_names() -> list[str]:
    """Return every name accepted by the theme command.

    Pairs come first, then dark themes, then light themes.
    """
    return [*PAIR_NAMES, *DARK_THEMES, *LIGHT_THEMES]


def validate_name(name: str) -> str | None:
    """Validate a name that may be either a pair or an individual theme.

    Args:
        name: Name supplied by the user.

    Returns:
        None if the name is valid, otherwise an error message listing
        every accepted name.
    """
    if is_valid_pair(name) or is_valid_theme(name):
        return None
    return str(UnknownNameError(name, all_selectable_names()))
