# SPDX-License-Identifier: MIT

import logging
import os
from abc import ABC, abstractmethod
from typing import Optional

from track import configuration
from track.model.app_data import AppData

logger = logging.getLogger(__name__)


class DataRepository(ABC):
    """Durable home of the full AppData snapshot."""

    @abstractmethod
    async def load(self) -> Optional[AppData]:
        """Return the stored snapshot, or None when nothing usable is stored."""

    @abstractmethod
    async def save(self, data: AppData) -> bool:
        """Overwrite the stored snapshot. Failures are reported, never raised."""

    @abstractmethod
    def location(self) -> str: ...


def resolve_storage_mode(config_mode: configuration.StorageMode) -> str:
    mode = os.environ.get(configuration.STORAGE_MODE_ENV) or config_mode
    if mode not in configuration.STORAGE_MODES:
        raise ValueError(
            f"{resolve_storage_mode.__name__}: error, unknown storage mode {mode}"
        )
    if mode == "auto":
        # The CLI always runs next to its own host bridge
        return "host"
    return mode


def select_data_repository(config_mode: configuration.StorageMode) -> DataRepository:
    # Imported here so each backend only loads when selected
    mode = resolve_storage_mode(config_mode)
    logger.debug("using %s storage", mode)
    if mode == "sandbox":
        from track.repository.sandboxed import SandboxedRepository

        return SandboxedRepository()

    from track.repository.host_file import HostFileRepository

    return HostFileRepository()
