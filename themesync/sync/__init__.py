"""Theme resolution and config rewriting."""

from themesync.sync.catalog import (
    ALL_THEMES,
    DARK_THEMES,
    LIGHT_THEMES,
    Theme,
    Variant,
    external_name_of,
    get_theme,
    is_valid_theme,
    list_all,
    variant_of,
)
from themesync.sync.errors import (
    AssetMissing,
    ConfigUnavailable,
    ExternalToolUnavailable,
    ThemeSyncError,
    UnknownPairError,
    UnknownThemeError,
)
from themesync.sync.pairs import (
    DEFAULT_PAIR_NAME,
    PAIR_NAMES,
    ThemePair,
    get_pair,
    list_pair_names,
    validate_name,
    validate_pair,
)
from themesync.sync.resolver import ResolvedTarget, resolve_auto, resolve_pinned, resolve_selection
from themesync.sync.rewriter import RewriteResult, pair_directive, rewrite_for_pair, rewrite_pinned
from themesync.sync.selection import (
    AutoSelection,
    PinnedSelection,
    Selection,
    SelectionMode,
    SelectionState,
    SettingsSelection,
)

__all__ = [
    "ALL_THEMES",
    "DARK_THEMES",
    "DEFAULT_PAIR_NAME",
    "LIGHT_THEMES",
    "PAIR_NAMES",
    "AssetMissing",
    "AutoSelection",
    "ConfigUnavailable",
    "ExternalToolUnavailable",
    "PinnedSelection",
    "ResolvedTarget",
    "RewriteResult",
    "Selection",
    "SelectionMode",
    "SelectionState",
    "SettingsSelection",
    "Theme",
    "ThemePair",
    "ThemeSyncError",
    "UnknownPairError",
    "UnknownThemeError",
    "Variant",
    "external_name_of",
    "get_pair",
    "get_theme",
    "is_valid_theme",
    "list_all",
    "list_pair_names",
    "pair_directive",
    "resolve_auto",
    "resolve_pinned",
    "resolve_selection",
    "rewrite_for_pair",
    "rewrite_pinned",
    "validate_name",
    "validate_pair",
]
