# SPDX-License-Identifier: MIT

from track.model.day import Day, DayEntry, Section, TodoItem
from track.model.entity_id import EntityId, generate_entity_id


def get_day_template(date: str) -> Day:
    return {"date": date, "entries": []}


def get_day_entry_template(project_id: EntityId, section: Section, order: int) -> DayEntry:
    return {
        "id": generate_entity_id(),
        "projectId": project_id,
        "section": section,
        "timeSpent": 0,
        "done": False,
        "dailyTodos": [],
        "order": order,
    }


def get_todo_template(text: str) -> TodoItem:
    return {
        "id": generate_entity_id(),
        "text": text,
        "done": False,
    }
