"""A theme sync session: serialized transitions plus the appearance poll.

All writers (user commands, picker results and the poll) go through one
``asyncio.Lock``, so the state file, the Ghostty config and the tmux theme
file never see two concurrent writers. Blocking I/O runs in worker threads.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from functools import partial

from themesync.logger import get_logger
from themesync.persistence import SelectionStore, make_store
from themesync.settings import DEFAULT_POLL_INTERVAL, Settings, get_home_dir
from themesync.sync import commands
from themesync.sync.catalog import is_valid_theme
from themesync.sync.pairs import THEME_PAIRS, is_valid_pair, validate_name
from themesync.sync.resolver import ResolvedTarget, resolve_auto_pinned_terminal, resolve_selection
from themesync.sync.selection import AutoSelection, Selection, SelectionState, describe
from themesync.sync.targets import SyncPaths, SyncTargets

logger = get_logger(__name__)

AUTO_PREFIX = "auto:"
PIN_PREFIX = "pin:"


class ThemeSession:
    """Owns the selection state and the periodic appearance poll."""

    def __init__(
        self,
        store: SelectionStore,
        targets: SyncTargets,
        on_app_theme: Callable[[str], None],
        is_dark_mode: Callable[[], bool] | None = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        """Initialize the session from the persisted selection.

        Args:
            store: Where the selection is loaded from and saved to.
            targets: Ghostty and tmux file sync.
            on_app_theme: Called with a theme name to change the app theme.
            is_dark_mode: Appearance query. Defaults to the OS query.
            poll_interval: Seconds between appearance polls.
        """
        self.store = store
        self.targets = targets
        self.on_app_theme = on_app_theme
        self.is_dark_mode = is_dark_mode or partial(commands.is_dark_mode, targets.command_timeout)
        self.poll_interval = poll_interval
        self.state: SelectionState = store.load()
        self._lock = asyncio.Lock()
        self._poll_task: asyncio.Task[None] | None = None
        logger.info(f"Session initialized with {describe(self.state.selection)}")

    @property
    def selection(self) -> Selection:
        """The active selection."""
        return self.state.selection

    @property
    def is_running(self) -> bool:
        """Whether the appearance poll is active."""
        return self._poll_task is not None and not self._poll_task.done()

    async def start(self) -> ResolvedTarget:
        """Install bundled themes, apply the stored selection and start polling.

        Returns:
            The targets applied on startup.
        """
        await asyncio.to_thread(self.targets.install_terminal_themes)
        await asyncio.to_thread(self.targets.install_multiplexer_themes)
        async with self._lock:
            target = await self._apply()
        if not self.is_running:
            self._poll_task = asyncio.create_task(self._poll_loop(), name="themesync-poll")
            logger.info(f"Appearance poll started with interval {self.poll_interval}s")
        return target

    def stop(self) -> None:
        """Cancel the appearance poll. Safe to call more than once."""
        if self._poll_task is not None:
            self._poll_task.cancel()
            self._poll_task = None
            logger.info("Appearance poll stopped")

    async def _poll_loop(self) -> None:
        while True:
            await asyncio.sleep(self.poll_interval)
            try:
                await self.tick()
            except Exception:
                logger.exception("Appearance poll tick failed")

    async def tick(self) -> ResolvedTarget:
        """Re-resolve the current selection and apply anything that drifted.

        The selection itself is never changed here.

        Returns:
            The resolved targets.
        """
        async with self._lock:
            return await self._apply()

    async def _query_appearance(self) -> bool:
        return await asyncio.to_thread(self.is_dark_mode)

    async def _apply(self) -> ResolvedTarget:
        """Apply the current selection. Callers must hold the lock."""
        selection = self.state.selection
        dark = await self._query_appearance() if isinstance(selection, AutoSelection) else False
        target = resolve_selection(selection, dark)

        theme_name = target.app_theme.name
        # An open picker owns the app theme until it is confirmed or cancelled
        if not self.state.picker_open and self.state.needs_app_update(theme_name):
            logger.debug(f"Applying app theme {theme_name}")
            self.on_app_theme(theme_name)
            self.state.mark_applied(theme_name)

        await asyncio.to_thread(self.targets.update_terminal_config, target.terminal_directive)
        await asyncio.to_thread(self.targets.sync_multiplexer, target.multiplexer_theme_name)
        return target

    async def _persist(self) -> None:
        await asyncio.to_thread(self.store.save, self.state)

    async def set_pair(self, name: str) -> ResolvedTarget:
        """Follow the system appearance with a pair.

        Args:
            name: Pair name.

        Returns:
            The targets applied.

        Raises:
            UnknownPairError: If the pair is not registered. The selection
                is left unchanged.
        """
        async with self._lock:
            resolved_theme = None
            if self.state.settings_driven and name in THEME_PAIRS:
                # Only one theme is stored, so the pair is resolved once, now
                pinned = resolve_auto_pinned_terminal(name, await self._query_appearance())
                resolved_theme = pinned.app_theme.name
            self.state.set_pair(name, resolved_theme)
            logger.info(f"Selected {describe(self.state.selection)}")
            await self._persist()
            return await self._apply()

    async def set_individual(self, name: str) -> ResolvedTarget:
        """Pin a single theme regardless of appearance.

        Args:
            name: Theme name.

        Returns:
            The targets applied.

        Raises:
            UnknownThemeError: If the theme is not in the catalog. The
                selection is left unchanged.
        """
        async with self._lock:
            self.state.set_individual(name)
            logger.info(f"Selected {describe(self.state.selection)}")
            await self._persist()
            return await self._apply()

    async def select(self, name: str) -> tuple[Selection | None, str | None]:
        """Handle a direct ``theme <name>`` command.

        Args:
            name: Pair name or individual theme name.

        Returns:
            Tuple of (new selection, optional error message). The error
            message lists every valid name.
        """
        name = name.strip()
        if is_valid_pair(name):
            await self.set_pair(name)
        elif is_valid_theme(name):
            await self.set_individual(name)
        else:
            error = validate_name(name)
            logger.warning(error)
            return None, error
        return self.state.selection, None

    def preview(self, value: str) -> None:
        """Show a picker row in the app only.

        Nothing is written to Ghostty, tmux or the state file. Pair rows
        preview their dark member so the catppuccin flavours look distinct.

        Args:
            value: Picker row value (``auto:<pair>`` or ``pin:<theme>``) or
                a bare name.
        """
        name = value.removeprefix(AUTO_PREFIX).removeprefix(PIN_PREFIX)
        pair = THEME_PAIRS.get(name)
        if pair is not None:
            self.on_app_theme(pair.dark.name)
        elif is_valid_theme(name):
            self.on_app_theme(name)

    def open_picker(self) -> None:
        """Remember the current selection before an interactive pick."""
        self.state.open_picker()

    async def confirm_picker(self, value: str) -> Selection | None:
        """Commit a picker row.

        Args:
            value: Picker row value.

        Returns:
            The new selection, or None if the value is not a selectable row.
        """
        if value.startswith(AUTO_PREFIX):
            self.state.close_picker()
            await self.set_pair(value.removeprefix(AUTO_PREFIX))
        elif value.startswith(PIN_PREFIX):
            self.state.close_picker()
            await self.set_individual(value.removeprefix(PIN_PREFIX))
        else:
            return None
        return self.state.selection

    async def cancel_picker(self) -> Selection:
        """Restore the selection from before the picker and re-apply it fully.

        Returns:
            The restored selection.
        """
        async with self._lock:
            self.state.cancel_picker()
            await self._apply()
        return self.state.selection


async def run_once(session: ThemeSession, name: str) -> tuple[Selection | None, str | None]:
    """Apply a single direct switch without starting the poll.

    Args:
        session: Session to drive.
        name: Pair or theme name.

    Returns:
        Tuple of (new selection, optional error message).
    """
    await asyncio.to_thread(session.targets.install_terminal_themes)
    await asyncio.to_thread(session.targets.install_multiplexer_themes)
    return await session.select(name)


def create_session(
    settings: Settings,
    on_app_theme: Callable[[str], None],
    store: SelectionStore | None = None,
) -> ThemeSession:
    """Build a session wired to the real filesystem and OS commands.

    Args:
        settings: Loaded settings.
        on_app_theme: Called with a theme name to change the app theme.
        store: Selection store override. Defaults to the configured backend.

    Returns:
        A session that has not been started yet.
    """
    targets = SyncTargets(SyncPaths.from_home(get_home_dir()), command_timeout=settings.command_timeout)
    return ThemeSession(
        store=store or make_store(settings),
        targets=targets,
        on_app_theme=on_app_theme,
        poll_interval=settings.poll_interval,
    )
