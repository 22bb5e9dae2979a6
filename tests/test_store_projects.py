"""Tests for project and saved note operations on the store."""

import pytest

from track.service.store import Store

DATE = "2024-03-12"


class TestProjects:
    def test_add_project_defaults(self, store: Store):
        project_id = store.add_project("Client work")

        project = store.get_project_by_id(project_id)
        assert project is not None
        assert project["name"] == "Client work"
        assert project["globalNotes"] == ""
        assert project["savedNotes"] == []
        assert project["archived"] is False
        assert project["createdAt"]
        assert "startMonth" not in project

    def test_project_ids_are_unique(self, store: Store):
        ids = {store.add_project(f"Project {i}") for i in range(20)}
        assert len(ids) == 20

    def test_rename_project(self, store: Store):
        project_id = store.add_project("Old")

        assert store.rename_project(project_id, "New") is True
        assert store.get_project_by_id(project_id)["name"] == "New"

    def test_rename_unknown_project_is_noop(self, store: Store):
        store.add_project("Keep")
        before = store.export_data()

        assert store.rename_project("missing", "Other") is False
        assert store.export_data() == before

    def test_delete_project_archives_and_keeps_entries(self, store: Store):
        """Deleting only archives, the project and its entries stay resolvable."""
        project_id = store.add_project("Archived")
        other_id = store.add_project("Active")
        entry_id = store.add_entry(project_id, "today")
        store.update_entry_time(DATE, entry_id, 3)

        assert store.delete_project(project_id) is True

        active_ids = [p["id"] for p in store.get_active_projects()]
        assert active_ids == [other_id]
        archived = store.get_project_by_id(project_id)
        assert archived is not None
        assert archived["archived"] is True
        entry = store.get_entry(DATE, entry_id)
        assert entry is not None
        assert entry["projectId"] == project_id
        assert entry["timeSpent"] == 3

    def test_restore_project(self, store: Store):
        project_id = store.add_project("Back")
        store.delete_project(project_id)

        assert store.restore_project(project_id) is True
        assert [p["id"] for p in store.get_active_projects()] == [project_id]

    def test_active_projects_sorted_case_insensitively(self, store: Store):
        store.add_project("beta")
        store.add_project("Alpha")
        store.add_project("gamma")

        assert [p["name"] for p in store.get_active_projects()] == [
            "Alpha",
            "beta",
            "gamma",
        ]

    def test_set_project_months(self, store: Store):
        project_id = store.add_project("Seasonal")

        assert store.set_project_months(project_id, 11, 2) is True
        project = store.get_project_by_id(project_id)
        assert project["startMonth"] == 11
        assert project["endMonth"] == 2

        assert store.set_project_months(project_id, None, None) is True
        project = store.get_project_by_id(project_id)
        assert "startMonth" not in project
        assert "endMonth" not in project

    @pytest.mark.parametrize("start,end", [(0, 5), (3, 13), (3, None)])
    def test_set_project_months_rejects_invalid(self, store: Store, start, end):
        project_id = store.add_project("Seasonal")

        with pytest.raises(ValueError):
            store.set_project_months(project_id, start, end)

    def test_returned_project_is_a_copy(self, store: Store):
        project_id = store.add_project("Copy")

        store.get_project_by_id(project_id)["name"] = "Changed"
        store.projects[0]["archived"] = True

        project = store.get_project_by_id(project_id)
        assert project["name"] == "Copy"
        assert project["archived"] is False


class TestProjectNotes:
    def test_update_global_notes(self, store: Store):
        project_id = store.add_project("Notes")

        assert store.update_project_global_notes(project_id, "line one") is True
        assert store.get_project_by_id(project_id)["globalNotes"] == "line one"

    def test_save_and_load_note(self, store: Store):
        project_id = store.add_project("Notes")
        store.update_project_global_notes(project_id, "first draft")
        note_id = store.save_project_note(project_id, "Draft")
        store.update_project_global_notes(project_id, "rewritten")

        assert note_id is not None
        assert store.load_project_note(project_id, note_id) is True

        project = store.get_project_by_id(project_id)
        assert project["globalNotes"] == "first draft"
        # Loading keeps the snapshot
        assert [note["id"] for note in project["savedNotes"]] == [note_id]
        saved = project["savedNotes"][0]
        assert saved["name"] == "Draft"
        assert saved["content"] == "first draft"
        assert saved["savedAt"]

    def test_rename_and_delete_note(self, store: Store):
        project_id = store.add_project("Notes")
        keep_id = store.save_project_note(project_id, "Keep")
        drop_id = store.save_project_note(project_id, "Drop")

        assert store.rename_project_note(project_id, keep_id, "Kept") is True
        assert store.delete_project_note(project_id, drop_id) is True

        saved_notes = store.get_project_by_id(project_id)["savedNotes"]
        assert [(note["id"], note["name"]) for note in saved_notes] == [
            (keep_id, "Kept")
        ]

    def test_note_operations_on_unknown_targets(self, store: Store):
        project_id = store.add_project("Notes")
        before = store.export_data()

        assert store.save_project_note("missing", "x") is None
        assert store.load_project_note(project_id, "missing") is False
        assert store.rename_project_note(project_id, "missing", "x") is False
        assert store.delete_project_note("missing", "missing") is False
        assert store.update_project_global_notes("missing", "x") is False
        assert store.export_data() == before
