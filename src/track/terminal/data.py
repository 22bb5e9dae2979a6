# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from track.service.backup import InvalidBackupError, read_backup, write_backup
from track.service.store import Store
from track.terminal.custom_typer import AliasedTyperGroup
from track.terminal.session import run_with_store

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("export")
def export(
    directory: Annotated[
        Path,
        typer.Argument(file_okay=False, help="Directory to write the backup into"),
    ] = Path("."),
) -> None:
    """Write a dated JSON backup of all data."""

    def command(store: Store) -> None:
        file_path = write_backup(store.export_data(), directory)
        typer.echo(f"Exported to {file_path}")

    run_with_store(command)


@app.command("import", no_args_is_help=True)
def import_(
    file: Annotated[Path, typer.Argument(dir_okay=False)],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Replace without asking")
    ] = False,
) -> None:
    """Replace all data with the contents of a backup file."""
    try:
        data = read_backup(file)
    except InvalidBackupError as e:
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if not yes:
        typer.confirm("This will replace all current data. Continue?", abort=True)

    def command(store: Store) -> None:
        store.import_data(data)
        typer.echo(f"Imported {file}")

    run_with_store(command)


@app.command("path")
def path() -> None:
    """Show where data is stored."""
    run_with_store(lambda store: typer.echo(store.repository.location()))
