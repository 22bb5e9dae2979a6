# SPDX-License-Identifier: MIT

from track.model.entity_id import generate_entity_id
from track.model.project import Project, SavedNote
from track.time import now_utc_iso_str


def get_project_template(name: str) -> Project:
    return {
        "id": generate_entity_id(),
        "name": name,
        "globalNotes": "",
        "savedNotes": [],
        "createdAt": now_utc_iso_str(),
        "archived": False,
    }


def get_saved_note_template(name: str, content: str) -> SavedNote:
    return {
        "id": generate_entity_id(),
        "name": name,
        "content": content,
        "savedAt": now_utc_iso_str(),
    }
