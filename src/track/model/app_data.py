# SPDX-License-Identifier: MIT

from typing import TypedDict

from track.model.day import Day
from track.model.project import Project


class AppData(TypedDict):
    projects: list[Project]
    days: dict[str, Day]


def empty_app_data() -> AppData:
    return {"projects": [], "days": {}}
