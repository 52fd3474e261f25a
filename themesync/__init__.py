"""themesync: keep the app, Ghostty and tmux themes in sync."""

__version__ = "0.1.0"
