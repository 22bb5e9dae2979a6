# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from track import configuration
from track.repository.configuration import CONFIGURATION_REPO
from track.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("storage_mode", config["storage_mode"])
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("persist_delay_ms", str(config["persist_delay_ms"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("config_file", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set_config(
    storage_mode: Annotated[
        Optional[str],
        typer.Option("--storage-mode", help="auto, host, sandbox"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding the data files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Go back to the platform data directory"),
    ] = False,
    persist_delay_ms: Annotated[
        Optional[int],
        typer.Option("--persist-delay-ms", help="Debounce window for saving"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    ] = None,
) -> None:
    """Change configuration settings."""
    try:
        CONFIGURATION_REPO.update_config(
            storage_mode=storage_mode,  # type: ignore[arg-type]
            data_path=data_path,
            remove_data_path=remove_data_path,
            persist_delay_ms=persist_delay_ms,
            log_level=log_level,
        )
    except ValueError as e:
        typer.echo(str(e))
        raise typer.Exit(1)
    CONFIGURATION_REPO.flush()
