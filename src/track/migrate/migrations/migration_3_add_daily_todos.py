# SPDX-License-Identifier: MIT

from typing import Any

from track.migrate.registry import migration


@migration(3)
def migrate(data: dict[str, Any]) -> None:
    for date, day in data["days"].items():
        day.setdefault("date", date)

        entries = day.get("entries")
        if not isinstance(entries, list):
            entries = []
        day["entries"] = [entry for entry in entries if isinstance(entry, dict)]

        for entry in day["entries"]:
            if not isinstance(entry.get("dailyTodos"), list):
                entry["dailyTodos"] = []
