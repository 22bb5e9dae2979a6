# SPDX-License-Identifier: MIT

from typing import Any

from track.migrate.registry import migration


@migration(2)
def migrate(data: dict[str, Any]) -> None:
    for project in data["projects"]:
        if not project.get("savedNotes"):
            project["savedNotes"] = []
