# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Optional

from track.host.bridge import GET_DATA_PATH, LOAD_DATA, SAVE_DATA, HostBridge
from track.model.app_data import AppData
from track.repository.data import DataRepository

logger = logging.getLogger(__name__)


class HostFileRepository(DataRepository):
    """Storage delegated to the host bridge and its single JSON file."""

    def __init__(self, bridge: Optional[HostBridge] = None) -> None:
        self._bridge = bridge if bridge is not None else HostBridge()

    async def load(self) -> Optional[AppData]:
        return await asyncio.to_thread(self._bridge.handle, LOAD_DATA)

    async def save(self, data: AppData) -> bool:
        try:
            return bool(
                await asyncio.to_thread(self._bridge.handle, SAVE_DATA, data)
            )
        except Exception:
            logger.exception("host bridge failed to save data")
            return False

    def location(self) -> str:
        return str(self._bridge.handle(GET_DATA_PATH))
