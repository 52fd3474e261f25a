"""Tests for the selection stores."""

import json
from pathlib import Path

from themesync.persistence import PairState, PairStateStore, SettingsStore, make_store
from themesync.settings import Settings, get_pair_state_path, get_settings_path
from themesync.sync.selection import AutoSelection, PinnedSelection, SelectionState, SettingsSelection


class TestPairState:
    """Tests for PairState parsing."""

    def test_auto(self) -> None:
        state = PairState.from_mapping({"pair": "everforest", "pinned": None})
        assert state is not None
        assert state.selection == AutoSelection("everforest")

    def test_pinned(self) -> None:
        state = PairState.from_mapping({"pair": "everforest", "pinned": "high-contrast-dark"})
        assert state is not None
        assert state.selection == PinnedSelection("high-contrast-dark")

    def test_invalid_pair(self) -> None:
        assert PairState.from_mapping({"pair": "gone", "pinned": None}) is None
        assert PairState.from_mapping({}) is None

    def test_invalid_pinned_is_dropped(self) -> None:
        state = PairState.from_mapping({"pair": "high-contrast", "pinned": "gone"})
        assert state is not None
        assert state.selection == AutoSelection("high-contrast")


class TestPairStateStore:
    """Tests for the pair-state file backend."""

    def test_default_path(self) -> None:
        assert PairStateStore().path == get_pair_state_path()

    def test_missing_file_gives_default(self, tmp_path: Path) -> None:
        state = PairStateStore(tmp_path / "state.json").load()
        assert state.selection == AutoSelection("catppuccin")
        assert state.settings_driven is False

    def test_corrupt_file_gives_default(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text("not json")
        assert PairStateStore(path).load().selection == AutoSelection("catppuccin")

    def test_save_and_load_auto(self, tmp_path: Path) -> None:
        store = PairStateStore(tmp_path / "state.json")
        store.save(SelectionState(AutoSelection("everforest")))
        assert json.loads(store.path.read_text()) == {"pair": "everforest", "pinned": None}
        assert store.load().selection == AutoSelection("everforest")

    def test_save_and_load_pinned(self, tmp_path: Path) -> None:
        store = PairStateStore(tmp_path / "state.json")
        state = SelectionState(AutoSelection("high-contrast"))
        state.set_individual("catppuccin-latte")
        store.save(state)

        loaded = store.load()
        assert loaded.selection == PinnedSelection("catppuccin-latte")
        assert loaded.last_pair == "high-contrast"


class TestSettingsStore:
    """Tests for the settings.json backend."""

    def test_default_path(self) -> None:
        assert SettingsStore().path == get_settings_path()

    def test_load_uses_theme(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"theme": "everforest-dark"}))
        state = SettingsStore(path).load()
        assert state.selection == SettingsSelection("everforest-dark")
        assert state.settings_driven is True

    def test_load_missing_uses_default_theme(self, tmp_path: Path) -> None:
        state = SettingsStore(tmp_path / "settings.json").load()
        assert state.selection == SettingsSelection("catppuccin-mocha")

    def test_save_preserves_other_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"theme": "catppuccin-mocha", "log_level": "DEBUG"}))
        SettingsStore(path).save(SelectionState(SettingsSelection("high-contrast-light"), settings_driven=True))
        assert json.loads(path.read_text()) == {"theme": "high-contrast-light", "log_level": "DEBUG"}

    def test_save_ignores_non_settings_selection(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        SettingsStore(path).save(SelectionState(AutoSelection("everforest")))
        assert not path.exists()


def test_make_store() -> None:
    assert isinstance(make_store(Settings()), PairStateStore)
    assert isinstance(make_store(Settings(persistence="settings")), SettingsStore)
