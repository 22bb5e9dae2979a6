# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from track.model.project import Project
from track.service.month import month_name
from track.service.query import sorted_saved_notes
from track.time import datetime_str_to_display_local_str


def format_months(project: Project) -> str:
    start_month = project.get("startMonth")
    end_month = project.get("endMonth")
    if start_month is None or end_month is None:
        return ""
    return f"{month_name(start_month)} - {month_name(end_month)}"


def projects_view(projects: list[Project]) -> None:
    table = Table(box=box.SIMPLE)
    table.add_column("id")
    table.add_column("name")
    table.add_column("months")
    table.add_column("saved notes", justify="right")

    for project in projects:
        name = project["name"]
        if project["archived"]:
            name = f"[dim]{name} (archived)[/dim]"
        table.add_row(
            project["id"][:8],
            name,
            format_months(project),
            str(len(project["savedNotes"])),
        )

    console = Console()
    console.print(table)


def project_notes_view(project: Project) -> None:
    """Display the active notes of a project followed by its saved snapshots."""
    console = Console()
    console.print()
    console.print(f"[bold]{project['name']}[/bold]")
    console.print(project["globalNotes"] or "[dim]no notes[/dim]")

    saved_notes = sorted_saved_notes(project)
    if not saved_notes:
        return

    table = Table(box=box.SIMPLE, title="Saved notes", title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("name")
    table.add_column("saved")
    table.add_column("preview", no_wrap=True, overflow="ellipsis", max_width=40)
    for index, note in enumerate(saved_notes, start=1):
        table.add_row(
            str(index),
            note["name"],
            datetime_str_to_display_local_str(note["savedAt"]),
            note["content"].splitlines()[0] if note["content"] else "",
        )
    console.print(table)
