# SPDX-License-Identifier: MIT

from typing import Any

from track.migrate.registry import migration
from track.model.day import SECTIONS
from track.model.entity_id import generate_entity_id

# Stands in for timestamps older records never stored
EPOCH_ISO_STR = "1970-01-01T00:00:00+00:00"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _fill_id(record: dict[str, Any]) -> None:
    if not isinstance(record.get("id"), str) or not record["id"]:
        record["id"] = generate_entity_id()


def _fill_text(record: dict[str, Any], key: str) -> None:
    if not isinstance(record.get(key), str):
        record[key] = ""


def _fill_bool(record: dict[str, Any], key: str) -> None:
    if not isinstance(record.get(key), bool):
        record[key] = False


def _fill_project(project: dict[str, Any]) -> None:
    _fill_id(project)
    _fill_text(project, "name")
    _fill_text(project, "globalNotes")
    _fill_bool(project, "archived")
    if not isinstance(project.get("createdAt"), str) or not project["createdAt"]:
        project["createdAt"] = EPOCH_ISO_STR

    saved_notes = project.get("savedNotes")
    if not isinstance(saved_notes, list):
        saved_notes = []
    project["savedNotes"] = [note for note in saved_notes if isinstance(note, dict)]
    for note in project["savedNotes"]:
        _fill_id(note)
        _fill_text(note, "name")
        _fill_text(note, "content")
        if not isinstance(note.get("savedAt"), str) or not note["savedAt"]:
            note["savedAt"] = EPOCH_ISO_STR


def _fill_entry(entry: dict[str, Any], index: int) -> None:
    _fill_id(entry)
    _fill_text(entry, "projectId")
    if entry.get("section") not in SECTIONS:
        entry["section"] = "today"
    if not _is_number(entry.get("timeSpent")):
        entry["timeSpent"] = 0
    _fill_bool(entry, "done")
    if not _is_number(entry.get("order")):
        entry["order"] = index

    entry["dailyTodos"] = [
        todo for todo in entry["dailyTodos"] if isinstance(todo, dict)
    ]
    for todo in entry["dailyTodos"]:
        _fill_id(todo)
        _fill_text(todo, "text")
        _fill_bool(todo, "done")


@migration(4)
def migrate(data: dict[str, Any]) -> None:
    for project in data["projects"]:
        _fill_project(project)

    for day in data["days"].values():
        for index, entry in enumerate(day["entries"]):
            _fill_entry(entry, index)
