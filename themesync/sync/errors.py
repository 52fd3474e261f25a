"""Error taxonomy for theme synchronisation.

Only the unknown-name errors are ever shown to the user. The remaining
classes are raised inside the I/O layer and caught where they occur so a
missing tool or file never blocks the application theme itself.
"""

from collections.abc import Iterable


class ThemeSyncError(Exception):
    """Base class for all theme synchronisation errors."""


class UnknownNameError(ThemeSyncError):
    """Raised when a name is not present in a registry."""

    kind = "theme"

    def __init__(self, name: str, valid_names: Iterable[str]) -> None:
        """Initialize the error.

        Args:
            name: The name that was not found.
            valid_names: Every name that would have been accepted.
        """
        self.name = name
        self.valid_names = tuple(valid_names)
        super().__init__(f"Unknown {self.kind} {name!r}. Available: {', '.join(self.valid_names)}")


class UnknownPairError(UnknownNameError):
    """Raised when a theme pair name is not registered."""

    kind = "theme pair"


class UnknownThemeError(UnknownNameError):
    """Raised when an individual theme name is not in the catalog."""

    kind = "theme"


class ConfigUnavailable(ThemeSyncError):
    """A terminal or multiplexer config file is missing, unreadable or unwritable."""


class ExternalToolUnavailable(ThemeSyncError):
    """An external command failed, timed out, or its target is not running."""


class AssetMissing(ThemeSyncError):
    """A bundled theme definition file is absent."""
