# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from track.service.query import seasonal_projects
from track.service.store import Store
from track.terminal.custom_typer import AliasedTyperGroup
from track.terminal.parse import parse_date
from track.terminal.session import run_with_store
from track.time import month_of_date_str
from track.view.day import dates_view, day_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, s")
def show() -> None:
    """Show the Today and On Deck lists of the current day."""

    def command(store: Store) -> None:
        projects = store.projects
        day_view(
            store.current_date,
            store.get_today_entries(),
            store.get_on_deck_entries(),
            projects,
            seasonal_projects(projects, month_of_date_str(store.current_date)),
        )

    run_with_store(command)


@app.command("dates, ds")
def dates() -> None:
    """List the days that have entries, most recent first."""
    run_with_store(lambda store: dates_view(store.get_dates_with_entries()))


@app.command("populate, pop")
def populate(
    source: Annotated[
        str,
        typer.Argument(help="Day to copy from: YYYY-MM-DD, yesterday or an offset"),
    ] = "yesterday",
    todos: Annotated[
        bool,
        typer.Option("--todos/--no-todos", help="Carry over todos that are not done"),
    ] = False,
) -> None:
    """Copy the entries of another day onto the current day, without time or status."""
    source_date = parse_date(source)

    def command(store: Store) -> None:
        if source_date is None or source_date not in store.get_dates_with_entries():
            typer.echo(f"No entries on {source}")
            raise typer.Exit(1)
        count = store.populate_from_day(source_date, import_incomplete_todos=todos)
        typer.echo(f"Added {count} entries from {source_date}")

    run_with_store(command)
