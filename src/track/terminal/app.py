# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from track import state as app_state
from track.terminal import (
    configuration,
    data,
    day,
    entry,
    preferences,
    project,
    report,
    todo,
)
from track.terminal.custom_typer import OrderedAliasedTyperGroup
from track.terminal.parse import parse_date

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Track - daily time tracking in the CLI",
    no_args_is_help=True,
)
app.add_typer(day.app, name="day, d", help="View and fill days")
app.add_typer(entry.app, name="entry, e", help="Manage the entries of a day")
app.add_typer(todo.app, name="todo, t", help="Manage the todos of an entry")
app.add_typer(project.app, name="project, p", help="Manage projects and their notes")
app.add_typer(report.app, name="report, r", help="Summaries of logged time")
app.add_typer(data.app, name="data", help="Backup, restore and storage location")
app.add_typer(configuration.app, name="config, c", help="Configuration")
app.add_typer(preferences.app, name="prefs", help="UI preferences")


@app.callback()
def main_callback(
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-D",
            help="Day to work on: YYYY-MM-DD, today, yesterday, tomorrow or an offset",
        ),
    ] = None,
) -> None:
    """
    Track - daily time tracking in the CLI

    Global options that apply to all commands.
    """
    app_state.set_current_date(parse_date(date))


def run() -> None:
    app()
