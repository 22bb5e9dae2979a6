# SPDX-License-Identifier: MIT

from typing import Any

from track.migrate.registry import migration


@migration(1)
def migrate(data: dict[str, Any]) -> None:
    projects = data.get("projects")
    if not isinstance(projects, list):
        projects = []
    data["projects"] = [project for project in projects if isinstance(project, dict)]

    days = data.get("days")
    if not isinstance(days, dict):
        days = {}
    data["days"] = {
        date: day for date, day in days.items() if isinstance(day, dict)
    }
