# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, TypedDict

from track.model.entity_id import EntityId

Section: TypeAlias = Literal["today", "onDeck"]

SECTIONS: tuple[Section, ...] = ("today", "onDeck")


class TodoItem(TypedDict):
    id: EntityId
    text: str
    done: bool


class DayEntry(TypedDict):
    id: EntityId
    projectId: EntityId  # May dangle if the project record is gone
    section: Section
    timeSpent: float  # Hours in [0, 24]
    done: bool
    dailyTodos: list[TodoItem]
    order: int  # Position within (date, section), gaps allowed


class Day(TypedDict):
    date: str  # YYYY-MM-DD
    entries: list[DayEntry]


class NotesTarget(TypedDict):
    entryId: EntityId
    projectId: EntityId


def parse_section(value: str) -> Optional[Section]:
    normalized = value.strip().lower().replace("-", "").replace("_", "")
    if normalized == "today":
        return "today"
    if normalized == "ondeck":
        return "onDeck"
    return None
