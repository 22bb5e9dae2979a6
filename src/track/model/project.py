# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

from track.model.entity_id import EntityId


class SavedNote(TypedDict):
    id: EntityId
    name: str
    content: str
    savedAt: str  # ISO-8601


class Project(TypedDict):
    id: EntityId
    name: str
    globalNotes: str
    savedNotes: list[SavedNote]
    createdAt: str  # ISO-8601
    archived: bool  # Soft delete

    # Recurring active window, may wrap the year boundary (11 -> 2)
    startMonth: NotRequired[Optional[int]]
    endMonth: NotRequired[Optional[int]]
