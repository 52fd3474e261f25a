"""Rewriting of the ``theme = ...`` directive in a Ghostty config.

Only the first matching line is replaced. A document without a theme line
is returned untouched: the user has chosen not to set one and we do not
append a directive on their behalf.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from themesync.sync.pairs import ThemePair

# A CRLF line ending is not part of the value
THEME_LINE_PATTERN = re.compile(r"^theme\s*=\s*[^\r\n]+(?=\r?$)", re.MULTILINE)
_VALUE_PATTERN = re.compile(r"^theme\s*=\s*([^\r\n]+)(?=\r?$)", re.MULTILINE)


@dataclass(frozen=True)
class RewriteResult:
    """Outcome of a config rewrite.

    Attributes:
        text: The rewritten document.
        changed: Whether ``text`` differs from the input document.
    """

    text: str
    changed: bool


def theme_directive(value: str) -> str:
    """Format a full theme line for the given value."""
    return f"theme = {value}"


def pair_directive(pair: ThemePair) -> str:
    """Build Ghostty's light/dark composite value for a pair.

    Args:
        pair: Pair whose members should be followed by the terminal.

    Returns:
        A value of the form ``light:<name>,dark:<name>``.
    """
    return f"light:{pair.light.external_name},dark:{pair.dark.external_name}"


def current_theme_value(text: str) -> str | None:
    """Return the value of the first theme line, or None if there is none."""
    match = _VALUE_PATTERN.search(text)
    return match.group(1) if match else None


def rewrite_theme_line(text: str, value: str) -> RewriteResult:
    """Replace the first theme line in a document.

    Args:
        text: Full config document.
        value: New directive value (a single name or a composite).

    Returns:
        The rewritten document and whether anything changed.
    """
    replacement = theme_directive(value)
    # Callable replacement keeps backslashes in theme names literal
    updated = THEME_LINE_PATTERN.sub(lambda _match: replacement, text, count=1)
    return RewriteResult(text=updated, changed=updated != text)


def rewrite_for_pair(text: str, pair: ThemePair) -> RewriteResult:
    """Point the terminal at a pair using the light/dark composite syntax."""
    return rewrite_theme_line(text, pair_directive(pair))


def rewrite_pinned(text: str, external_name: str) -> RewriteResult:
    """Point the terminal at a single theme, dropping any composite syntax."""
    return rewrite_theme_line(text, external_name)
