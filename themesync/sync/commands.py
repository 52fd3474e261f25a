"""External commands: appearance query and reload triggers.

Every command is bounded by a timeout and every failure is swallowed here,
so a missing tool never blocks switching the application theme.
"""

import shutil
import subprocess
import sys

from themesync.logger import get_logger
from themesync.sync.errors import ExternalToolUnavailable

logger = get_logger(__name__)

DEFAULT_COMMAND_TIMEOUT = 5.0

APPEARANCE_SCRIPT = 'tell application "System Events" to tell appearance preferences to return dark mode'
GHOSTTY_RELOAD_SCRIPT = (
    'tell application "System Events" to tell process "Ghostty" to click menu item '
    '"Reload Configuration" of menu "Ghostty" of menu bar item "Ghostty" of menu bar 1'
)
GNOME_INTERFACE_SCHEMA = "org.gnome.desktop.interface"


def resolve_executable(executable: str) -> str:
    """Return the absolute path to an executable.

    Args:
        executable: The name of the executable to find.

    Returns:
        The absolute path to the executable.

    Raises:
        ExternalToolUnavailable: If the executable is not found on PATH.
    """
    resolved = shutil.which(executable)
    if resolved is None:
        raise ExternalToolUnavailable(f"Executable {executable!r} was not found on PATH")
    return resolved


def run_command(args: list[str], timeout: float = DEFAULT_COMMAND_TIMEOUT) -> str:
    """Run an external command and return its stripped stdout.

    Args:
        args: Command name followed by its arguments.
        timeout: Seconds before the command is abandoned.

    Returns:
        The command's standard output.

    Raises:
        ExternalToolUnavailable: If the command is missing, times out, or
            exits with a non-zero status.
    """
    command = [resolve_executable(args[0]), *args[1:]]
    logger.debug(f"Running command: {' '.join(command)}")
    try:
        result = subprocess.run(  # noqa: S603
            command,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise ExternalToolUnavailable(f"{args[0]} timed out after {timeout}s") from exc
    except (OSError, subprocess.SubprocessError) as exc:
        raise ExternalToolUnavailable(f"Error running {args[0]}: {exc}") from exc

    if result.returncode != 0:
        error_msg = result.stderr.strip() or f"exit status {result.returncode}"
        raise ExternalToolUnavailable(f"{args[0]} failed: {error_msg}")
    return result.stdout.strip()


def _query_dark_mode(timeout: float) -> bool:
    if sys.platform == "darwin":
        return run_command(["osascript", "-e", APPEARANCE_SCRIPT], timeout) == "true"
    if sys.platform.startswith("linux"):
        scheme = run_command(["gsettings", "get", GNOME_INTERFACE_SCHEMA, "color-scheme"], timeout)
        return "prefer-dark" in scheme
    return False


def is_dark_mode(timeout: float = DEFAULT_COMMAND_TIMEOUT) -> bool:
    """Check whether the system appearance is dark.

    Args:
        timeout: Seconds before the query is abandoned.

    Returns:
        True if the system is in dark mode. Any failure reports light mode.
    """
    try:
        return _query_dark_mode(timeout)
    except ExternalToolUnavailable as exc:
        logger.debug(f"Appearance query unavailable, assuming light mode: {exc}")
        return False


def reload_terminal(timeout: float = DEFAULT_COMMAND_TIMEOUT) -> bool:
    """Ask Ghostty to reload its configuration.

    Only macOS exposes a reload hook we can trigger from outside; on other
    platforms Ghostty picks the change up on its next config reload.

    Args:
        timeout: Seconds before the command is abandoned.

    Returns:
        True if the reload was triggered.
    """
    if sys.platform != "darwin":
        logger.debug("Ghostty reload trigger not available on this platform")
        return False
    try:
        run_command(["osascript", "-e", GHOSTTY_RELOAD_SCRIPT], timeout)
    except ExternalToolUnavailable as exc:
        logger.debug(f"Ghostty reload skipped: {exc}")
        return False
    logger.info("Ghostty configuration reloaded")
    return True


def reload_multiplexer(theme_file: str, timeout: float = DEFAULT_COMMAND_TIMEOUT) -> bool:
    """Source the tmux theme file into the running tmux server.

    Args:
        theme_file: Path to the tmux theme file.
        timeout: Seconds before the command is abandoned.

    Returns:
        True if tmux accepted the file.
    """
    try:
        run_command(["tmux", "source-file", theme_file], timeout)
    except ExternalToolUnavailable as exc:
        logger.debug(f"tmux reload skipped: {exc}")
        return False
    logger.info(f"tmux theme reloaded from {theme_file}")
    return True
