"""Interactive theme picker with Auto, Dark and Light sections."""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from themesync.logger import get_logger
from themesync.session import AUTO_PREFIX, PIN_PREFIX
from themesync.sync.catalog import DARK_THEMES, LIGHT_THEMES
from themesync.sync.pairs import PAIR_NAMES, THEME_PAIRS

logger = get_logger(__name__)

# Header rows use this prefix and can never be returned
HEADER_PREFIX = "§"


def picker_options() -> list[Option]:
    """Build the picker rows in display order.

    Returns:
        Disabled section headers followed by their selectable rows.
    """
    options = [Option("── Auto  follows system ──", id=f"{HEADER_PREFIX}auto", disabled=True)]
    for pair_name in PAIR_NAMES:
        pair = THEME_PAIRS[pair_name]
        options.append(
            Option(
                f"{pair_name}  [dim]{pair.dark.name} (dark) / {pair.light.name} (light)[/dim]",
                id=f"{AUTO_PREFIX}{pair_name}",
            )
        )
    options.append(Option("── Dark ──", id=f"{HEADER_PREFIX}dark", disabled=True))
    options.extend(Option(name, id=f"{PIN_PREFIX}{name}") for name in DARK_THEMES)
    options.append(Option("── Light ──", id=f"{HEADER_PREFIX}light", disabled=True))
    options.extend(Option(name, id=f"{PIN_PREFIX}{name}") for name in LIGHT_THEMES)
    return options


class ThemePickerScreen(Screen[str | None]):
    """Screen for choosing a pair or a single theme.

    Dismisses with the chosen row value, or None when cancelled.
    """

    BINDINGS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("escape", "cancel", "Cancel"),
        ("q", "cancel", "Cancel"),
    )

    def __init__(self, current: str | None = None, on_preview: Callable[[str], None] | None = None) -> None:
        """Initialize the picker.

        Args:
            current: Row value to highlight initially.
            on_preview: Called with the row value whenever the highlight moves.
        """
        super().__init__()
        self._current = current
        self._on_preview = on_preview
        self._options = picker_options()
        # Highlights before the current row is shown are not user moves
        self._skip_initial_preview = current in {option.id for option in self._options}

    def compose(self) -> ComposeResult:
        """Create the picker layout.

        Yields:
            The widgets that make up the picker.
        """
        with Vertical(id="picker-container"):
            yield Static("[bold]Theme[/bold]", id="picker-title")
            yield OptionList(*self._options, id="picker-options")
            yield Static("↑↓ navigate • enter select • esc cancel", id="picker-hint")

    def on_mount(self) -> None:
        """Highlight the current selection and focus the list."""
        option_list = self.query_one("#picker-options", OptionList)
        ids = [option.id for option in self._options]
        if self._current in ids:
            option_list.highlighted = ids.index(self._current)
        option_list.focus()

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        """Preview the highlighted row.

        Args:
            event: The highlight event.
        """
        value = event.option.id
        if self._skip_initial_preview:
            self._skip_initial_preview = value != self._current
            return
        if value is None or value.startswith(HEADER_PREFIX) or self._on_preview is None:
            return
        self._on_preview(value)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Confirm the selected row.

        Args:
            event: The selection event.
        """
        value = event.option.id
        if value is None or value.startswith(HEADER_PREFIX):
            return
        logger.debug(f"Picker confirmed {value}")
        self.dismiss(value)

    def action_cancel(self) -> None:
        """Close the picker without choosing."""
        logger.debug("Picker cancelled")
        self.dismiss(None)
