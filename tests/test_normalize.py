from copy import deepcopy

import pytest

from track.migrate import registry
from track.migrate.normalize import normalize

LEGACY_DATA = {
    "projects": [
        {
            "id": "p1",
            "name": "Legacy",
            "globalNotes": "notes",
            "archived": False,
            "createdAt": "2023-05-01T09:00:00.000Z",
        },
        {
            "id": "p2",
            "name": "Seasonal",
            "globalNotes": "",
            "savedNotes": None,
            "archived": True,
            "createdAt": "2023-05-02T09:00:00.000Z",
            "startMonth": 11,
            "endMonth": 2,
        },
    ],
    "days": {
        "2023-05-03": {
            "date": "2023-05-03",
            "entries": [
                {
                    "id": "e1",
                    "projectId": "p1",
                    "section": "onDeck",
                    "timeSpent": 2,
                    "done": True,
                    "order": 4,
                }
            ],
        },
        "2023-05-04": {},
    },
}


class TestNormalize:
    @pytest.mark.parametrize("raw", [None, {}, [], "garbage", 42])
    def test_unusable_input_becomes_empty(self, raw):
        assert normalize(raw) == {"projects": [], "days": {}}

    def test_missing_collections_are_added(self):
        assert normalize({"projects": []}) == {"projects": [], "days": {}}
        assert normalize({"days": {}}) == {"projects": [], "days": {}}

    def test_wrong_collection_types_are_replaced(self):
        assert normalize({"projects": {}, "days": []}) == {"projects": [], "days": {}}

    def test_legacy_fields_are_filled(self):
        data = normalize(LEGACY_DATA)

        assert [p["savedNotes"] for p in data["projects"]] == [[], []]
        assert data["days"]["2023-05-03"]["entries"][0]["dailyTodos"] == []
        assert data["days"]["2023-05-04"] == {"date": "2023-05-04", "entries": []}

    def test_existing_values_are_kept(self):
        data = normalize(LEGACY_DATA)

        seasonal = data["projects"][1]
        assert seasonal["archived"] is True
        assert (seasonal["startMonth"], seasonal["endMonth"]) == (11, 2)
        entry = data["days"]["2023-05-03"]["entries"][0]
        assert entry["order"] == 4
        assert entry["section"] == "onDeck"
        assert entry["timeSpent"] == 2

    def test_unknown_top_level_keys_are_dropped(self):
        assert normalize({"projects": [], "days": {}, "version": 3}) == {
            "projects": [],
            "days": {},
        }

    def test_input_is_not_mutated(self):
        raw = deepcopy(LEGACY_DATA)

        normalize(raw)

        assert raw == LEGACY_DATA

    def test_idempotent(self):
        once = normalize(LEGACY_DATA)

        assert normalize(once) == once


class TestRegistry:
    def test_migrations_run_in_version_order(self):
        registry.register_migrations()

        versions = [version for version, _ in registry.get_migrations()]

        assert versions == sorted(versions)
        assert versions[:3] == [1, 2, 3]

    def test_version_cannot_be_registered_twice(self):
        registry.register_migrations()

        with pytest.raises(ValueError):

            @registry.migration(1)
            def other(data):
                pass


class TestPartialRecords:
    def test_project_fields_are_filled(self):
        data = normalize({"projects": [{"id": "p1", "name": "A"}]})

        [project] = data["projects"]
        assert project["id"] == "p1"
        assert project["name"] == "A"
        assert project["archived"] is False
        assert project["globalNotes"] == ""
        assert project["savedNotes"] == []
        assert project["createdAt"]

    def test_entry_fields_are_filled(self):
        data = normalize(
            {
                "days": {
                    "2024-03-12": {
                        "entries": [
                            {"id": "e1", "projectId": "p1"},
                            {"id": "e2", "section": "later", "timeSpent": "2"},
                        ]
                    }
                }
            }
        )

        first, second = data["days"]["2024-03-12"]["entries"]
        assert (first["section"], first["order"]) == ("today", 0)
        assert (second["section"], second["order"]) == ("today", 1)
        assert first["timeSpent"] == 0 and second["timeSpent"] == 0
        assert first["done"] is False
        assert second["projectId"] == ""

    def test_nested_records_are_filled(self):
        data = normalize(
            {
                "projects": [{"id": "p1", "savedNotes": [{"name": "Draft"}, "junk"]}],
                "days": {
                    "2024-03-12": {
                        "entries": [{"id": "e1", "dailyTodos": [{"text": "x"}, 3]}]
                    }
                },
            }
        )

        [note] = data["projects"][0]["savedNotes"]
        assert note["id"]
        assert note["content"] == ""
        assert note["savedAt"]
        [todo] = data["days"]["2024-03-12"]["entries"][0]["dailyTodos"]
        assert todo["id"]
        assert todo["done"] is False

    def test_filled_records_are_stable(self):
        once = normalize({"projects": [{"name": "No id"}]})

        assert normalize(once) == once
