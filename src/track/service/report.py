# SPDX-License-Identifier: MIT

from typing import TypedDict

from track.model.day import Day
from track.model.entity_id import EntityId
from track.model.project import Project
from track.service.query import find_project
from track.time import week_dates

DELETED_LABEL = "(Deleted)"


class WeeklyReportRow(TypedDict):
    projectId: EntityId
    name: str
    dailyTotals: list[float]
    total: float


class WeeklyReport(TypedDict):
    dates: list[str]
    rows: list[WeeklyReportRow]
    columnTotals: list[float]
    grandTotal: float


def weekly_report(
    days: dict[str, Day], projects: list[Project], week_of: str
) -> WeeklyReport:
    """
    Sum logged hours per project for each day of the Monday-to-Sunday week
    containing week_of. Rows are ordered by weekly total, largest first.
    """
    dates = week_dates(week_of)
    project_times: dict[EntityId, list[float]] = {}

    for index, date in enumerate(dates):
        day = days.get(date)
        if day is None:
            continue
        for entry in day["entries"]:
            if entry["timeSpent"] <= 0:
                continue
            totals = project_times.setdefault(entry["projectId"], [0.0] * len(dates))
            totals[index] += entry["timeSpent"]

    rows: list[WeeklyReportRow] = []
    for project_id, totals in project_times.items():
        project = find_project(projects, project_id)
        daily_totals = [round(total, 2) for total in totals]
        rows.append(
            {
                "projectId": project_id,
                "name": project["name"] if project is not None else DELETED_LABEL,
                "dailyTotals": daily_totals,
                "total": round(sum(totals), 2),
            }
        )
    rows.sort(key=lambda row: row["total"], reverse=True)

    column_totals = [
        round(sum(row["dailyTotals"][index] for row in rows), 2)
        for index in range(len(dates))
    ]
    return {
        "dates": dates,
        "rows": rows,
        "columnTotals": column_totals,
        "grandTotal": round(sum(column_totals), 2),
    }
