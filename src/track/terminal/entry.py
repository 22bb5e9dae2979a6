# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from track.service.query import sorted_section
from track.service.store import Store
from track.terminal.custom_typer import AliasedTyperGroup
from track.terminal.parse import (
    parse_section_param,
    resolve_entry,
    resolve_project,
)
from track.terminal.session import run_with_store
from track.view.day import entry_notes_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

SectionOption = Annotated[
    str,
    typer.Option("--section", "-s", help="today, on-deck"),
]


@app.command("add, a", no_args_is_help=True)
def add(project: str, section: SectionOption = "today") -> None:
    """Put a project on the current day."""
    target_section = parse_section_param(section)

    def command(store: Store) -> None:
        store.add_entry(resolve_project(store, project)["id"], target_section)

    run_with_store(command)


@app.command("remove, rm", no_args_is_help=True)
def remove(entry: int) -> None:
    """Remove an entry (numbered as in `day show`) from the current day."""

    def command(store: Store) -> None:
        store.remove_entry(store.current_date, resolve_entry(store, entry)["id"])

    run_with_store(command)


@app.command("time, tm", no_args_is_help=True)
def time(
    entry: int,
    hours: Annotated[float, typer.Argument(help="Hours spent, kept within 0-24")],
    add: Annotated[
        bool, typer.Option("--add", "-a", help="Add to the logged time instead")
    ] = False,
) -> None:
    """Log hours on an entry."""

    def command(store: Store) -> None:
        target = resolve_entry(store, entry)
        new_hours = target["timeSpent"] + hours if add else hours
        store.update_entry_time(store.current_date, target["id"], new_hours)

    run_with_store(command)


@app.command("done", no_args_is_help=True)
def done(entry: int) -> None:
    """Mark an entry done."""

    def command(store: Store) -> None:
        store.update_entry_done(store.current_date, resolve_entry(store, entry)["id"], True)

    run_with_store(command)


@app.command("undone", no_args_is_help=True)
def undone(entry: int) -> None:
    """Mark an entry not done."""

    def command(store: Store) -> None:
        store.update_entry_done(
            store.current_date, resolve_entry(store, entry)["id"], False
        )

    run_with_store(command)


@app.command("move, mv", no_args_is_help=True)
def move(
    entry: int,
    section: Annotated[str, typer.Argument(help="today, on-deck")],
    position: Annotated[
        int, typer.Argument(help="1-based position in the target section")
    ] = 1,
) -> None:
    """Move an entry to a position in a section."""
    target_section = parse_section_param(section)

    def command(store: Store) -> None:
        store.move_entry(
            store.current_date,
            resolve_entry(store, entry)["id"],
            target_section,
            position - 1,
        )

    run_with_store(command)


@app.command("reorder, ro", no_args_is_help=True)
def reorder(
    section: Annotated[str, typer.Argument(help="today, on-deck")],
    entries: Annotated[
        list[int], typer.Argument(help="Entries in their new order (numbered as in `day show`)")
    ],
) -> None:
    """Reorder the entries of a section."""
    target_section = parse_section_param(section)

    def command(store: Store) -> None:
        entry_ids = [resolve_entry(store, entry)["id"] for entry in entries]
        section_ids = {
            e["id"]
            for e in sorted_section(
                store.get_entries_for_date(store.current_date), target_section
            )
        }
        if any(entry_id not in section_ids for entry_id in entry_ids):
            typer.echo(f"All entries must already be in {section}")
            raise typer.Exit(1)
        store.reorder_entries(store.current_date, target_section, entry_ids)

    run_with_store(command)


@app.command("show, s", no_args_is_help=True)
def show(entry: int) -> None:
    """Show the todos of an entry and the notes of its project."""

    def command(store: Store) -> None:
        target = resolve_entry(store, entry)
        entry_notes_view(target, store.get_project_by_id(target["projectId"]))

    run_with_store(command)
