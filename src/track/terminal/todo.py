# SPDX-License-Identifier: MIT

import typer

from track.service.store import Store
from track.terminal.custom_typer import AliasedTyperGroup
from track.terminal.parse import resolve_entry, resolve_todo
from track.terminal.session import run_with_store

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(entry: int, text: str) -> None:
    """Add a todo to an entry of the current day."""

    def command(store: Store) -> None:
        store.add_daily_todo(store.current_date, resolve_entry(store, entry)["id"], text)

    run_with_store(command)


@app.command("done", no_args_is_help=True)
def done(entry: int, todo: int) -> None:
    """Check off a todo."""

    def command(store: Store) -> None:
        target = resolve_entry(store, entry)
        store.update_daily_todo(
            store.current_date, target["id"], resolve_todo(target, todo), done=True
        )

    run_with_store(command)


@app.command("undone", no_args_is_help=True)
def undone(entry: int, todo: int) -> None:
    """Uncheck a todo."""

    def command(store: Store) -> None:
        target = resolve_entry(store, entry)
        store.update_daily_todo(
            store.current_date, target["id"], resolve_todo(target, todo), done=False
        )

    run_with_store(command)


@app.command("edit, e", no_args_is_help=True)
def edit(entry: int, todo: int, text: str) -> None:
    """Change the text of a todo."""

    def command(store: Store) -> None:
        target = resolve_entry(store, entry)
        store.update_daily_todo(
            store.current_date, target["id"], resolve_todo(target, todo), text=text
        )

    run_with_store(command)


@app.command("remove, rm", no_args_is_help=True)
def remove(entry: int, todo: int) -> None:
    """Delete a todo."""

    def command(store: Store) -> None:
        target = resolve_entry(store, entry)
        store.remove_daily_todo(
            store.current_date, target["id"], resolve_todo(target, todo)
        )

    run_with_store(command)
