# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from track.service.query import sorted_saved_notes
from track.service.store import Store
from track.terminal.custom_typer import AliasedTyperGroup
from track.terminal.parse import resolve_project
from track.terminal.session import run_with_store
from track.view.project import project_notes_view, projects_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


# ─────────────────────────────────────────────────────────────
# Project Management
# ─────────────────────────────────────────────────────────────


@app.command("add, a", no_args_is_help=True)
def add(name: str) -> None:
    """Create a new project."""
    name = name.strip()
    if not name:
        typer.echo("Project name must not be empty")
        raise typer.Exit(1)

    def command(store: Store) -> None:
        store.add_project(name)
        typer.echo(f"Added project {name}")

    run_with_store(command)


@app.command("list, ls")
def list_projects(
    archived: Annotated[
        bool, typer.Option("--archived", "-a", help="Include archived projects")
    ] = False,
) -> None:
    """List projects."""

    def command(store: Store) -> None:
        if archived:
            projects = sorted(store.projects, key=lambda p: p["name"].casefold())
        else:
            projects = store.get_active_projects()
        projects_view(projects)

    run_with_store(command)


@app.command("rename, rn", no_args_is_help=True)
def rename(project: str, name: str) -> None:
    """Rename a project."""

    def command(store: Store) -> None:
        store.rename_project(resolve_project(store, project)["id"], name.strip())

    run_with_store(command)


@app.command("delete, d", no_args_is_help=True)
def delete(project: str) -> None:
    """Archive a project; its past entries are kept."""

    def command(store: Store) -> None:
        target = resolve_project(store, project)
        store.delete_project(target["id"])
        typer.echo(f"Archived project {target['name']}")

    run_with_store(command)


@app.command("restore", no_args_is_help=True)
def restore(project: str) -> None:
    """Bring an archived project back."""

    def command(store: Store) -> None:
        store.restore_project(
            resolve_project(store, project, include_archived=True)["id"]
        )

    run_with_store(command)


@app.command("months, m", no_args_is_help=True)
def months(
    project: str,
    start_month: Annotated[Optional[int], typer.Argument(min=1, max=12)] = None,
    end_month: Annotated[Optional[int], typer.Argument(min=1, max=12)] = None,
) -> None:
    """Set the recurring active months of a project, or clear them when omitted."""

    def command(store: Store) -> None:
        store.set_project_months(
            resolve_project(store, project)["id"], start_month, end_month
        )

    run_with_store(command)


# ─────────────────────────────────────────────────────────────
# Project Notes
# ─────────────────────────────────────────────────────────────


@app.command("notes, n", no_args_is_help=True)
def notes(project: str) -> None:
    """Show the active notes and saved snapshots of a project."""

    def command(store: Store) -> None:
        project_notes_view(resolve_project(store, project, include_archived=True))

    run_with_store(command)


@app.command("write, w", no_args_is_help=True)
def write(
    project: str,
    text: Annotated[
        Optional[str],
        typer.Argument(help="New notes text; opens an editor when omitted"),
    ] = None,
) -> None:
    """Replace the active notes of a project."""

    def command(store: Store) -> None:
        target = resolve_project(store, project)
        new_text = text
        if new_text is None:
            new_text = typer.edit(target["globalNotes"])
        if new_text is not None:
            store.update_project_global_notes(target["id"], new_text)

    run_with_store(command)


@app.command("save-note, sn", no_args_is_help=True)
def save_note(project: str, name: str) -> None:
    """Save the current notes as a named snapshot."""

    def command(store: Store) -> None:
        store.save_project_note(resolve_project(store, project)["id"], name.strip())

    run_with_store(command)


def _saved_note_id(store: Store, project_id: str, note_ref: int) -> str:
    project = store.get_project_by_id(project_id)
    saved_notes = sorted_saved_notes(project) if project is not None else []
    if note_ref < 1 or note_ref > len(saved_notes):
        typer.echo(f"No saved note {note_ref}")
        raise typer.Exit(1)
    return saved_notes[note_ref - 1]["id"]


@app.command("load-note, ln", no_args_is_help=True)
def load_note(project: str, note: int) -> None:
    """Replace the active notes with a saved snapshot (numbered as in `notes`)."""

    def command(store: Store) -> None:
        project_id = resolve_project(store, project)["id"]
        store.load_project_note(project_id, _saved_note_id(store, project_id, note))

    run_with_store(command)


@app.command("rename-note, rnn", no_args_is_help=True)
def rename_note(project: str, note: int, name: str) -> None:
    """Rename a saved snapshot."""

    def command(store: Store) -> None:
        project_id = resolve_project(store, project)["id"]
        store.rename_project_note(
            project_id, _saved_note_id(store, project_id, note), name.strip()
        )

    run_with_store(command)


@app.command("delete-note, dn", no_args_is_help=True)
def delete_note(project: str, note: int) -> None:
    """Delete a saved snapshot."""

    def command(store: Store) -> None:
        project_id = resolve_project(store, project)["id"]
        store.delete_project_note(project_id, _saved_note_id(store, project_id, note))

    run_with_store(command)
