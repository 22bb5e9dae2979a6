# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from track.repository.preferences import PREFERENCES_REPO
from track.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display UI preferences."""
    preferences = PREFERENCES_REPO.get_preferences()

    table = Table()
    table.add_column("Preference", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("dark_mode", "✓ Enabled" if preferences["dark_mode"] else "✗ Disabled")
    table.add_row("sidebar_width", str(preferences["sidebar_width"]))
    table.add_row("notes_height", str(preferences["notes_height"]))
    table.add_row(
        "onboarding_seen", "✓ Yes" if preferences["onboarding_seen"] else "✗ No"
    )
    Console().print(table)


@app.command("set, s")
def set_preferences(
    dark_mode: Annotated[
        Optional[bool], typer.Option("--dark-mode/--light-mode")
    ] = None,
    sidebar_width: Annotated[Optional[int], typer.Option("--sidebar-width")] = None,
    notes_height: Annotated[Optional[int], typer.Option("--notes-height")] = None,
    onboarding_seen: Annotated[
        Optional[bool], typer.Option("--onboarding-seen/--onboarding-unseen")
    ] = None,
) -> None:
    """Change UI preferences."""
    PREFERENCES_REPO.update_preferences(
        dark_mode=dark_mode,
        sidebar_width=sidebar_width,
        notes_height=notes_height,
        onboarding_seen=onboarding_seen,
    )
    PREFERENCES_REPO.flush()


@app.command("toggle-dark, td")
def toggle_dark() -> None:
    """Switch between dark and light mode."""
    dark_mode = PREFERENCES_REPO.toggle_dark_mode()
    PREFERENCES_REPO.flush()
    typer.echo("Dark mode on" if dark_mode else "Dark mode off")
