"""Textual themes for the themesync app.

Each catalog theme is rendered from the same palette that is installed into
Ghostty, so the app and the terminal share exact colors.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from textual.theme import Theme

from themesync.logger import get_logger
from themesync.sync.catalog import THEMES
from themesync.sync.catalog import Theme as CatalogTheme
from themesync.sync.errors import AssetMissing
from themesync.sync.targets import BUNDLED_TERMINAL_THEMES

logger = get_logger(__name__)


@dataclass(frozen=True)
class TerminalPalette:
    """Colors parsed from a Ghostty theme file."""

    background: str
    foreground: str
    selection_background: str
    cursor_color: str
    ansi: tuple[str, ...]

    def color(self, index: int) -> str:
        """Return ANSI color ``index``, falling back to the foreground."""
        return self.ansi[index] if index < len(self.ansi) else self.foreground


def parse_terminal_palette(text: str) -> TerminalPalette:
    """Parse a Ghostty theme definition.

    Args:
        text: File content made of ``key = value`` lines.

    Returns:
        The parsed palette.

    Raises:
        ValueError: If background or foreground is missing.
    """
    values: dict[str, str] = {}
    ansi: dict[int, str] = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key, value = key.strip(), value.strip()
        if key == "palette":
            index, _, color = value.partition("=")
            if index.strip().isdigit():
                ansi[int(index)] = color.strip()
        else:
            values[key] = value

    if "background" not in values or "foreground" not in values:
        raise ValueError("Palette must define background and foreground")

    return TerminalPalette(
        background=values["background"],
        foreground=values["foreground"],
        selection_background=values.get("selection-background", values["background"]),
        cursor_color=values.get("cursor-color", values["foreground"]),
        ansi=tuple(ansi[i] for i in sorted(ansi)),
    )


def load_palette(theme: CatalogTheme, assets_dir: Path = BUNDLED_TERMINAL_THEMES) -> TerminalPalette:
    """Load the bundled palette for a catalog theme.

    Raises:
        AssetMissing: If the bundled file is absent or unusable.
    """
    path = assets_dir / theme.external_name
    try:
        return parse_terminal_palette(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise AssetMissing(f"Palette for {theme.name} unavailable: {exc}") from exc


def _theme_from_palette(theme: CatalogTheme, palette: TerminalPalette) -> Theme:
    """Build a Textual Theme from a terminal palette.

    Args:
        theme: Catalog entry supplying the name and variant.
        palette: Terminal colors.

    Returns:
        A Textual Theme instance.
    """
    return Theme(
        name=theme.name,
        primary=palette.color(4),
        secondary=palette.color(5),
        accent=palette.color(6),
        warning=palette.color(3),
        error=palette.color(1),
        success=palette.color(2),
        foreground=palette.foreground,
        background=palette.background,
        surface=palette.background,
        panel=palette.selection_background,
        dark=theme.is_dark,
        variables={
            "border": palette.color(8),
            "text-muted": palette.color(8),
            "block-cursor-background": palette.cursor_color,
        },
    )


def build_app_themes(assets_dir: Path = BUNDLED_TERMINAL_THEMES) -> tuple[Theme, ...]:
    """Build a Textual theme for every catalog theme with a bundled palette.

    Themes whose palette is missing are skipped.
    """
    built: list[Theme] = []
    for theme in THEMES.values():
        try:
            palette = load_palette(theme, assets_dir)
        except AssetMissing as exc:
            logger.warning(f"Skipping app theme: {exc}")
            continue
        built.append(_theme_from_palette(theme, palette))
    return tuple(built)


REGISTERED_THEMES = build_app_themes()
