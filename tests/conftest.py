"""Shared fixtures: in-memory storage and an isolated data directory."""

from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Iterator, Optional

import pytest

from track import configuration
from track.model.app_data import AppData
from track.repository.configuration import CONFIGURATION_REPO
from track.repository.data import DataRepository
from track.service.scheduler import PersistScheduler
from track.service.store import Store

TEST_DATE = "2024-03-12"


class MemoryRepository(DataRepository):
    """Keeps every saved snapshot so tests can count and inspect writes."""

    def __init__(self, data: Optional[Any] = None, fail_saves: bool = False) -> None:
        self.data = data
        self.fail_saves = fail_saves
        self.saves: list[AppData] = []

    async def load(self) -> Optional[AppData]:
        return deepcopy(self.data)

    async def save(self, data: AppData) -> bool:
        self.saves.append(deepcopy(data))
        if self.fail_saves:
            return False
        self.data = deepcopy(data)
        return True

    def location(self) -> str:
        return "memory"


@pytest.fixture
def memory_repository() -> MemoryRepository:
    return MemoryRepository()


@pytest.fixture
def make_store() -> Callable[..., Store]:
    def factory(
        repository: Optional[DataRepository] = None,
        delay: float = 0.01,
        current_date: str = TEST_DATE,
    ) -> Store:
        return Store(
            repository if repository is not None else MemoryRepository(),
            PersistScheduler(delay),
            current_date=current_date,
        )

    return factory


@pytest.fixture
def store(make_store: Callable[..., Store]) -> Store:
    return make_store()


@pytest.fixture
def data_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration and data files at a temporary directory."""
    for name in (
        "DATA_PATH",
        "DATA_DIR",
        "DATA_FILE_PATH",
        "SANDBOX_DB_PATH",
        "LOCAL_STORAGE_PATH",
    ):
        monkeypatch.setattr(configuration, name, getattr(configuration, name))
    monkeypatch.setattr(
        configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"
    )
    monkeypatch.delenv(configuration.STORAGE_MODE_ENV, raising=False)

    configuration.set_data_path(tmp_path / "data")
    CONFIGURATION_REPO.reset()
    yield tmp_path / "data"
    CONFIGURATION_REPO.reset()
