from pathlib import Path

import pytest

from track.repository.local_storage import LocalStorage
from track.repository.preferences import (
    DARK_MODE_KEY,
    NOTES_HEIGHT_KEY,
    SIDEBAR_WIDTH_KEY,
    PreferencesRepository,
)


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    return tmp_path / "local-storage.yaml"


class TestLocalStorage:
    def test_items_survive_reopen(self, storage_path: Path):
        LocalStorage(storage_path).set_item("key", "value")

        assert LocalStorage(storage_path).get_item("key") == "value"

    def test_missing_item(self, storage_path: Path):
        assert LocalStorage(storage_path).get_item("missing") is None

    def test_remove_item(self, storage_path: Path):
        storage = LocalStorage(storage_path)
        storage.set_item("key", "value")

        storage.remove_item("key")
        storage.remove_item("never-set")

        assert LocalStorage(storage_path).get_item("key") is None

    def test_unreadable_file_is_empty(self, storage_path: Path):
        storage_path.write_text("key: [unclosed", encoding="utf-8")

        assert LocalStorage(storage_path).get_item("key") is None

    def test_json_payload_is_kept_verbatim(self, storage_path: Path):
        payload = '{"projects": [], "days": {"2024-03-12": {"entries": []}}}'
        LocalStorage(storage_path).set_item("track-data", payload)

        assert LocalStorage(storage_path).get_item("track-data") == payload


class TestPreferences:
    def test_defaults(self, storage_path: Path):
        preferences = PreferencesRepository(LocalStorage(storage_path)).get_preferences()

        assert preferences == {
            "dark_mode": False,
            "sidebar_width": 288,
            "notes_height": 200,
            "onboarding_seen": False,
        }

    def test_update_and_flush(self, storage_path: Path):
        repository = PreferencesRepository(LocalStorage(storage_path))

        repository.update_preferences(sidebar_width=320, onboarding_seen=True)
        repository.flush()

        reloaded = PreferencesRepository(LocalStorage(storage_path)).get_preferences()
        assert reloaded["sidebar_width"] == 320
        assert reloaded["onboarding_seen"] is True

    def test_sizes_are_clamped(self, storage_path: Path):
        repository = PreferencesRepository(LocalStorage(storage_path))

        repository.update_preferences(sidebar_width=900, notes_height=10)

        preferences = repository.get_preferences()
        assert preferences["sidebar_width"] == 500
        assert preferences["notes_height"] == 120

    def test_out_of_range_stored_values_use_defaults(self, storage_path: Path):
        storage = LocalStorage(storage_path)
        storage.set_item(SIDEBAR_WIDTH_KEY, "50")
        storage.set_item(NOTES_HEIGHT_KEY, "tall")
        storage.set_item(DARK_MODE_KEY, "true")

        preferences = PreferencesRepository(LocalStorage(storage_path)).get_preferences()

        assert preferences["sidebar_width"] == 288
        assert preferences["notes_height"] == 200
        assert preferences["dark_mode"] is True

    def test_toggle_dark_mode(self, storage_path: Path):
        repository = PreferencesRepository(LocalStorage(storage_path))

        assert repository.toggle_dark_mode() is True
        assert repository.toggle_dark_mode() is False

    def test_flush_without_changes_writes_nothing(self, storage_path: Path):
        repository = PreferencesRepository(LocalStorage(storage_path))
        repository.get_preferences()

        repository.flush()

        assert not storage_path.exists()
