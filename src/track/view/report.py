# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from track.service.report import WeeklyReport
from track.time import date_from_str
from track.view.day import format_hours


def weekly_report_view(report: WeeklyReport) -> None:
    dates = report["dates"]
    console = Console()
    console.print()
    console.print(
        f"[bold]Week of {date_from_str(dates[0]).format('MMM D')} - "
        f"{date_from_str(dates[-1]).format('MMM D, YYYY')}[/bold]"
    )

    if not report["rows"]:
        console.print("[dim]No time entries for this week.[/dim]")
        return

    table = Table(box=box.SIMPLE, show_footer=True)
    table.add_column("project", footer="Total")
    for index, date in enumerate(dates):
        column_total = report["columnTotals"][index]
        table.add_column(
            date_from_str(date).format("ddd M/D"),
            justify="right",
            footer=format_hours(column_total) if column_total > 0 else "-",
        )
    table.add_column("total", justify="right", footer=format_hours(report["grandTotal"]))

    for row in report["rows"]:
        table.add_row(
            row["name"],
            *[format_hours(time) if time > 0 else "-" for time in row["dailyTotals"]],
            format_hours(row["total"]),
        )
    console.print(table)
