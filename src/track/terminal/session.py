# SPDX-License-Identifier: MIT

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, TypeVar

import typer

from track import state as app_state
from track.repository.configuration import CONFIGURATION_REPO
from track.repository.data import select_data_repository
from track.service.scheduler import PersistScheduler
from track.service.store import Store

T = TypeVar("T")


@asynccontextmanager
async def open_store() -> AsyncIterator[Store]:
    config = CONFIGURATION_REPO.get_config()
    repository = select_data_repository(config["storage_mode"])
    scheduler = PersistScheduler(config["persist_delay_ms"] / 1000)
    store = Store(repository, scheduler, current_date=app_state.get_current_date())

    await store.initialize()
    try:
        yield store
    finally:
        await store.close()


def run_with_store(command: Callable[[Store], T]) -> T:
    """Run one command against a loaded store and flush before returning."""

    async def runner() -> T:
        async with open_store() as store:
            return command(store)

    try:
        return asyncio.run(runner())
    except ValueError as e:
        typer.echo(str(e))
        raise typer.Exit(1)
