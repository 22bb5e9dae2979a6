# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from track.service.report import weekly_report
from track.service.store import Store
from track.terminal.custom_typer import AliasedTyperGroup
from track.terminal.parse import parse_date
from track.terminal.session import run_with_store
from track.view.report import weekly_report_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("week, w")
def week(
    week_of: Annotated[
        Optional[str],
        typer.Argument(help="Any day of the week to report, defaults to the current day"),
    ] = None,
) -> None:
    """Show hours per project for each day of a week."""
    date = parse_date(week_of)

    def command(store: Store) -> None:
        weekly_report_view(
            weekly_report(store.days, store.projects, date or store.current_date)
        )

    run_with_store(command)
