"""Debounced persistence through the store and initial loading."""

import asyncio
from typing import Callable

import pytest

from conftest import MemoryRepository, TEST_DATE
from track.service.store import Store

pytestmark = [pytest.mark.asyncio]


class TestDebouncedSaves:
    async def test_rapid_updates_produce_one_save(self, make_store: Callable):
        repository = MemoryRepository()
        store: Store = make_store(repository, delay=0.05)
        await store.initialize()
        project_id = store.add_project("Client")
        entry_id = store.add_entry(project_id, "today")

        for hours in range(1, 11):
            store.update_entry_time(TEST_DATE, entry_id, hours)
        await asyncio.sleep(0.2)

        assert len(repository.saves) == 1
        [saved_entry] = repository.saves[0]["days"][TEST_DATE]["entries"]
        assert saved_entry["timeSpent"] == 10
        assert store.last_save_ok is True

    async def test_separate_bursts_save_separately(self, make_store: Callable):
        repository = MemoryRepository()
        store: Store = make_store(repository, delay=0.01)
        await store.initialize()

        store.add_project("First")
        await asyncio.sleep(0.1)
        store.add_project("Second")
        await asyncio.sleep(0.1)

        assert [len(saved["projects"]) for saved in repository.saves] == [1, 2]

    async def test_close_flushes_pending_changes(self, make_store: Callable):
        repository = MemoryRepository()
        store: Store = make_store(repository, delay=10)
        await store.initialize()

        project_id = store.add_project("Late")
        await store.close()

        assert len(repository.saves) == 1
        assert repository.data["projects"][0]["id"] == project_id
        assert store.scheduler.pending is False

    async def test_failed_save_keeps_state(self, make_store: Callable):
        repository = MemoryRepository(fail_saves=True)
        store: Store = make_store(repository)
        await store.initialize()

        project_id = store.add_project("Unsaved")
        await store.close()

        assert repository.saves
        assert repository.data is None
        assert store.last_save_ok is False
        assert store.get_project_by_id(project_id)["name"] == "Unsaved"

    async def test_repository_error_does_not_escape(self, make_store: Callable):
        class ExplodingRepository(MemoryRepository):
            async def save(self, data):
                raise RuntimeError("disk on fire")

        store: Store = make_store(ExplodingRepository())
        await store.initialize()

        store.add_project("Still here")
        await store.close()

        assert [p["name"] for p in store.projects] == ["Still here"]

    async def test_noop_mutation_does_not_save(self, make_store: Callable):
        repository = MemoryRepository()
        store: Store = make_store(repository)
        await store.initialize()

        store.update_entry_done("2024-01-01", "nonexistent-id", True)
        await store.close()

        assert repository.saves == []


class TestInitialize:
    async def test_empty_repository_starts_empty(self, make_store: Callable):
        store: Store = make_store(MemoryRepository())

        await store.initialize()

        assert store.is_loaded is True
        assert store.export_data() == {"projects": [], "days": {}}

    async def test_loaded_data_is_normalized(self, make_store: Callable):
        raw = {
            "projects": [
                {
                    "id": "p1",
                    "name": "Old",
                    "globalNotes": "",
                    "archived": False,
                    "createdAt": "2023-01-01T00:00:00.000Z",
                }
            ],
            "days": {
                TEST_DATE: {
                    "entries": [
                        {
                            "id": "e1",
                            "projectId": "p1",
                            "section": "today",
                            "timeSpent": 1.5,
                            "done": False,
                            "order": 0,
                        }
                    ]
                }
            },
        }
        store: Store = make_store(MemoryRepository(raw))

        await store.initialize()

        assert store.get_project_by_id("p1")["savedNotes"] == []
        [entry] = store.get_today_entries()
        assert entry["dailyTodos"] == []
        assert store.days[TEST_DATE]["date"] == TEST_DATE

    async def test_load_failure_starts_empty(self, make_store: Callable):
        class BrokenRepository(MemoryRepository):
            async def load(self):
                raise OSError("unreadable")

        store: Store = make_store(BrokenRepository())

        await store.initialize()

        assert store.is_loaded is True
        assert store.projects == []

    async def test_initialize_does_not_save(self, make_store: Callable):
        repository = MemoryRepository({"projects": [], "days": {}})
        store: Store = make_store(repository)

        await store.initialize()
        await store.close()

        assert repository.saves == []
