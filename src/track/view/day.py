# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from track.model.day import DayEntry
from track.model.project import Project
from track.service.month import month_name
from track.service.query import SeasonalProjects, day_total, project_label
from track.time import date_to_display_str

SECTION_LABELS = {"today": "Today", "onDeck": "On Deck"}


def format_hours(hours: float) -> str:
    return f"{hours:g}"


def day_view(
    date: str,
    today_entries: list[DayEntry],
    on_deck_entries: list[DayEntry],
    projects: list[Project],
    seasonal: SeasonalProjects,
) -> None:
    """Display both sections of a day, numbered the way entry commands address them."""
    console = Console()
    console.print()
    console.print(f"[bold]{date_to_display_str(date)}[/bold]")

    if seasonal["active"]:
        console.print(
            "[green]In season:[/green] "
            + ", ".join(project["name"] for project in seasonal["active"])
        )
    if seasonal["upcoming"]:
        console.print(
            "[yellow]Coming up:[/yellow] "
            + ", ".join(
                f"{project['name']} (Begins in {month_name(project.get('startMonth') or 0)})"
                for project in seasonal["upcoming"]
            )
        )

    number = 1
    for section, entries in (("today", today_entries), ("onDeck", on_deck_entries)):
        table = Table(box=box.SIMPLE, title=SECTION_LABELS[section], title_justify="left")
        table.add_column("#", justify="right")
        table.add_column("project")
        table.add_column("hours", justify="right")
        table.add_column("done")
        table.add_column("todos")

        for entry in entries:
            todos_done = sum(1 for todo in entry["dailyTodos"] if todo["done"])
            todos = (
                f"{todos_done}/{len(entry['dailyTodos'])}" if entry["dailyTodos"] else ""
            )
            name = project_label(projects, entry["projectId"])
            if entry["done"]:
                name = f"[strike dim]{name}[/strike dim]"
            table.add_row(
                str(number),
                name,
                format_hours(entry["timeSpent"]) if entry["timeSpent"] else "-",
                "✓" if entry["done"] else "",
                todos,
            )
            number += 1

        if not entries:
            table.add_row("", "[dim]nothing here[/dim]", "", "", "")
        console.print(table)

    total = day_total(today_entries + on_deck_entries)
    if total > 0:
        console.print(f"Day total: [bold]{format_hours(total)} hrs[/bold]")


def entry_notes_view(entry: DayEntry, project: Optional[Project]) -> None:
    """Display the daily todos of an entry and its project's active notes."""
    console = Console()
    title = project["name"] if project is not None else project_label([], entry["projectId"])
    console.print()
    console.print(f"[bold]{title}[/bold]")

    table = Table(box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("todo")
    table.add_column("done")
    for index, todo in enumerate(entry["dailyTodos"], start=1):
        table.add_row(str(index), todo["text"], "✓" if todo["done"] else "")
    console.print(table)

    if project is not None and project["globalNotes"]:
        console.print("[cyan]Notes[/cyan]")
        console.print(project["globalNotes"])


def dates_view(dates: list[str]) -> None:
    console = Console()
    for date in dates:
        console.print(f"{date}  [dim]{date_to_display_str(date)}[/dim]")
