"""Catalog of every individual theme known to themesync."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Variant(Enum):
    """Light/dark classification of a theme."""

    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class Theme:
    """A single theme and its Ghostty counterpart.

    Attributes:
        name: Internal theme name, shared by the app and tmux.
        variant: Whether the theme is dark or light.
        external_name: Name of the matching Ghostty theme.
    """

    name: str
    variant: Variant
    external_name: str

    @property
    def is_dark(self) -> bool:
        """Whether this is a dark theme."""
        return self.variant is Variant.DARK


# Single source of truth: (name, variant, Ghostty theme name)
_CATALOG: tuple[tuple[str, Variant, str], ...] = (
    ("catppuccin-mocha", Variant.DARK, "Catppuccin Mocha Sync"),
    ("catppuccin-macchiato", Variant.DARK, "Catppuccin Macchiato Sync"),
    ("catppuccin-frappe", Variant.DARK, "Catppuccin Frappe Sync"),
    ("catppuccin-latte", Variant.LIGHT, "Catppuccin Latte Sync"),
    ("everforest-dark", Variant.DARK, "Everforest Dark"),
    ("everforest-light", Variant.LIGHT, "Everforest Light"),
    ("high-contrast-dark", Variant.DARK, "High Contrast Dark"),
    ("high-contrast-light", Variant.LIGHT, "High Contrast Light"),
)

THEMES: dict[str, Theme] = {name: Theme(name, variant, external) for name, variant, external in _CATALOG}

ALL_THEMES: tuple[str, ...] = tuple(THEMES)
DARK_THEMES: tuple[str, ...] = tuple(name for name, theme in THEMES.items() if theme.variant is Variant.DARK)
LIGHT_THEMES: tuple[str, ...] = tuple(name for name, theme in THEMES.items() if theme.variant is Variant.LIGHT)


def list_all() -> list[Theme]:
    """Return every theme in catalog order."""
    return list(THEMES.values())


def get_theme(name: str) -> Theme | None:
    """Look up a theme by name.

    Args:
        name: Theme name to look up.

    Returns:
        The theme, or None if it is not in the catalog.
    """
    return THEMES.get(name)


def is_valid_theme(name: str) -> bool:
    """Check whether a name is in the catalog."""
    return name in THEMES


def variant_of(name: str) -> Variant | None:
    """Return the variant of a theme, or None for unknown names."""
    theme = THEMES.get(name)
    return theme.variant if theme is not None else None


def external_name_of(name: str) -> str | None:
    """Return the Ghostty theme name for a theme, or None for unknown names."""
    theme = THEMES.get(name)
    return theme.external_name if theme is not None else None
