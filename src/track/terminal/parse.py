# SPDX-License-Identifier: MIT

import re
from typing import Optional

import typer

from track.model.day import DayEntry, Section, parse_section
from track.model.entity_id import EntityId
from track.model.project import Project
from track.service.store import Store
from track.time import is_date_str, shift_date_str, today_local_date_str


def parse_date(date_param: Optional[str]) -> Optional[str]:
    if date_param is None:
        return None

    date = date_param.strip().lower()
    today = today_local_date_str()

    if is_date_str(date):
        return date
    if date in ("today", "t"):
        return today
    if date in ("yesterday", "y"):
        return shift_date_str(today, -1)
    if date in ("tomorrow", "tm"):
        return shift_date_str(today, 1)
    # Relative day offsets, e.g. "-1", "+2", "7"
    if re.match(r"^[+-]?\d+$", date):
        return shift_date_str(today, int(date))

    raise typer.BadParameter(
        f"Invalid date '{date_param}', use YYYY-MM-DD, today, yesterday, tomorrow or an offset"
    )


def parse_section_param(section_param: str) -> Section:
    section = parse_section(section_param)
    if section is None:
        raise typer.BadParameter(
            f"Invalid section '{section_param}', valid options: today, on-deck"
        )
    return section


def resolve_project(
    store: Store, project_ref: str, include_archived: bool = False
) -> Project:
    """Find a project by exact id, unique id prefix or case-insensitive name."""
    projects = store.projects
    if not include_archived:
        projects = [project for project in projects if not project["archived"]]

    for project in projects:
        if project["id"] == project_ref:
            return project

    by_name = [
        project
        for project in projects
        if project["name"].casefold() == project_ref.strip().casefold()
    ]
    if len(by_name) == 1:
        return by_name[0]

    by_prefix = [project for project in projects if project["id"].startswith(project_ref)]
    if len(by_prefix) == 1:
        return by_prefix[0]

    if len(by_name) > 1 or len(by_prefix) > 1:
        typer.echo(f"Project reference '{project_ref}' is ambiguous, use the id")
    else:
        typer.echo(f"No project found for '{project_ref}'")
    raise typer.Exit(1)


def displayed_entries(store: Store) -> list[DayEntry]:
    """Entries of the current date in the numbered order `day show` prints them."""
    return store.get_today_entries() + store.get_on_deck_entries()


def resolve_entry(store: Store, entry_ref: int) -> DayEntry:
    entries = displayed_entries(store)
    if entry_ref < 1 or entry_ref > len(entries):
        typer.echo(f"No entry {entry_ref} on {store.current_date}")
        raise typer.Exit(1)
    return entries[entry_ref - 1]


def resolve_todo(entry: DayEntry, todo_ref: int) -> EntityId:
    todos = entry["dailyTodos"]
    if todo_ref < 1 or todo_ref > len(todos):
        typer.echo(f"No todo {todo_ref} on this entry")
        raise typer.Exit(1)
    return todos[todo_ref - 1]["id"]
