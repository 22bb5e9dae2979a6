# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from track.model.day import Day, DayEntry, Section
from track.model.entity_id import EntityId
from track.model.project import Project, SavedNote
from track.service.month import is_month_in_range, is_month_upcoming

DELETED_PROJECT_LABEL = "(Deleted project)"


class SeasonalProjects(TypedDict):
    active: list[Project]
    upcoming: list[Project]


def sorted_section(entries: list[DayEntry], section: Section) -> list[DayEntry]:
    # sorted() is stable, equal orders keep insertion order
    return sorted(
        [entry for entry in entries if entry["section"] == section],
        key=lambda entry: entry["order"],
    )


def dates_with_entries(days: dict[str, Day]) -> list[str]:
    return sorted((date for date, day in days.items() if day["entries"]), reverse=True)


def find_project(projects: list[Project], project_id: EntityId) -> Optional[Project]:
    for project in projects:
        if project["id"] == project_id:
            return project
    return None


def active_projects(projects: list[Project]) -> list[Project]:
    return sorted(
        [project for project in projects if not project["archived"]],
        key=lambda project: project["name"].casefold(),
    )


def project_label(projects: list[Project], project_id: EntityId) -> str:
    project = find_project(projects, project_id)
    if project is None:
        return DELETED_PROJECT_LABEL
    return project["name"]


def day_total(entries: list[DayEntry]) -> float:
    return round(sum(entry["timeSpent"] for entry in entries), 2)


def sorted_saved_notes(project: Project) -> list[SavedNote]:
    return sorted(project["savedNotes"], key=lambda note: note["savedAt"], reverse=True)


def seasonal_projects(projects: list[Project], month: int) -> SeasonalProjects:
    """
    Split projects with a month window into those active in month and those
    beginning within the next two months. Archived projects and projects
    without both months set are left out.
    """
    active: list[Project] = []
    upcoming: list[Project] = []
    for project in projects:
        start_month = project.get("startMonth")
        end_month = project.get("endMonth")
        if project["archived"] or start_month is None or end_month is None:
            continue
        if is_month_in_range(month, start_month, end_month):
            active.append(project)
        elif is_month_upcoming(month, start_month):
            upcoming.append(project)
    return {"active": active, "upcoming": upcoming}
