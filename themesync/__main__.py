"""Entry point for themesync."""

import argparse
import asyncio
import sys
import traceback
from dataclasses import replace
from importlib.metadata import version

from themesync.app import main
from themesync.logger import add_stderr_sink, get_logger
from themesync.session import create_session, run_once
from themesync.settings import PERSISTENCE_MODES, Settings, load_settings
from themesync.sync.catalog import DARK_THEMES, LIGHT_THEMES
from themesync.sync.pairs import PAIR_NAMES, THEME_PAIRS, all_selectable_names
from themesync.sync.selection import describe

logger = get_logger(__name__)


def get_version() -> str:
    """Return the installed package version, or "unknown"."""
    try:
        return version("themesync")
    except Exception:
        return "unknown"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns:
        The parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="themesync",
        description=(
            "Keep the app, Ghostty and tmux themes in sync, following the system "
            "appearance. Without a name, opens the TUI."
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        help="Pair name (follows system appearance) or theme name (pinned)",
    )
    parser.add_argument("--pick", action="store_true", help="Open the interactive picker on start")
    parser.add_argument("--list", action="store_true", help="List pairs and themes, then exit")
    parser.add_argument(
        "--complete",
        metavar="PREFIX",
        help="Print every pair and theme name starting with PREFIX, one per line (for shell completion)",
    )
    parser.add_argument(
        "--persistence",
        choices=PERSISTENCE_MODES,
        help="Where the selection is stored (overrides settings.json)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser.parse_args(argv)


def complete(prefix: str) -> list[str]:
    """Return every selectable name starting with ``prefix``."""
    return [name for name in all_selectable_names() if name.startswith(prefix)]


def format_listing() -> str:
    """Render pairs and themes by section."""
    lines = ["Auto (follows system):"]
    for name in PAIR_NAMES:
        pair = THEME_PAIRS[name]
        lines.append(f"  {name:<22}{pair.dark.name} (dark) / {pair.light.name} (light)")
    lines.append("Dark:")
    lines.extend(f"  {name}" for name in DARK_THEMES)
    lines.append("Light:")
    lines.extend(f"  {name}" for name in LIGHT_THEMES)
    return "\n".join(lines)


def switch(name: str, settings: Settings) -> int:
    """Switch directly to a pair or theme without the TUI.

    Args:
        name: Pair or theme name.
        settings: Loaded settings.

    Returns:
        Process exit code.
    """
    session = create_session(settings, lambda theme: logger.debug(f"App theme would be {theme}"))
    selection, error = asyncio.run(run_once(session, name))
    if error or selection is None:
        print(error, file=sys.stderr)
        return 1
    print(f"Theme: {describe(selection)}")
    return 0


def run(argv: list[str] | None = None) -> None:
    """Run themesync with standard Python tracebacks."""
    args = parse_args(argv)
    try:
        settings = load_settings()
        if args.persistence:
            settings = replace(settings, persistence=args.persistence)

        if args.list:
            print(format_listing())
            return
        if args.complete is not None:
            for name in complete(args.complete):
                print(name)
            return
        if args.name:
            add_stderr_sink(settings.log_level)
            sys.exit(switch(args.name, settings))
        main(settings=settings, open_picker=args.pick)
    except Exception:
        # Print standard Python traceback instead of Rich's fancy one
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    run()
