# SPDX-License-Identifier: MIT

import asyncio
import json
import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Optional, cast

from track import configuration
from track.model.app_data import AppData
from track.repository.data import DataRepository
from track.repository.local_storage import LocalStorage

logger = logging.getLogger(__name__)

TABLE_NAME = "app_data"
RECORD_KEY = "data"
LEGACY_KEY = "track-data"


class SandboxedRepository(DataRepository):
    """
    Embedded sqlite database as the primary store, one fixed record holding
    the whole snapshot, mirrored into a flat LocalStorage slot as backup.

    Data written by older versions only exists in the flat slot; the first
    load adopts it and copies it into the database.
    """

    def __init__(
        self,
        db_path: Optional[Path] = None,
        local_storage: Optional[LocalStorage] = None,
    ) -> None:
        self._db_path = db_path
        self._local_storage = (
            local_storage if local_storage is not None else LocalStorage()
        )

    @property
    def db_path(self) -> Path:
        if self._db_path is not None:
            return self._db_path
        return configuration.SANDBOX_DB_PATH

    def location(self) -> str:
        return str(self.db_path)

    def __connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        connection = sqlite3.connect(self.db_path)
        connection.execute(
            f"CREATE TABLE IF NOT EXISTS {TABLE_NAME} (key TEXT PRIMARY KEY, value TEXT NOT NULL)"
        )
        return connection

    def __read_record(self) -> Optional[str]:
        with closing(self.__connect()) as connection:
            row = connection.execute(
                f"SELECT value FROM {TABLE_NAME} WHERE key = ?", (RECORD_KEY,)
            ).fetchone()
        return None if row is None else cast(str, row[0])

    def __write_record(self, payload: str) -> None:
        with closing(self.__connect()) as connection:
            with connection:
                connection.execute(
                    f"INSERT OR REPLACE INTO {TABLE_NAME} (key, value) VALUES (?, ?)",
                    (RECORD_KEY, payload),
                )

    def __load_primary(self) -> Optional[AppData]:
        try:
            payload = self.__read_record()
        except (sqlite3.Error, OSError) as e:
            logger.error("could not read %s: %s", self.db_path, e)
            return None
        if payload is None:
            return None
        return self.__parse(payload, str(self.db_path))

    def __load_legacy(self) -> Optional[AppData]:
        try:
            payload = self._local_storage.get_item(LEGACY_KEY)
        except OSError as e:
            logger.error("could not read legacy slot %s: %s", LEGACY_KEY, e)
            return None
        if payload is None:
            return None
        return self.__parse(payload, f"legacy slot {LEGACY_KEY}")

    @staticmethod
    def __parse(payload: str, source: str) -> Optional[AppData]:
        try:
            data = json.loads(payload)
        except ValueError as e:
            logger.error("ignoring corrupt data in %s: %s", source, e)
            return None
        if not isinstance(data, dict):
            logger.error("ignoring non-object data in %s", source)
            return None
        return cast(AppData, data)

    async def load(self) -> Optional[AppData]:
        data = await asyncio.to_thread(self.__load_primary)
        if data is not None:
            return data

        data = await asyncio.to_thread(self.__load_legacy)
        if data is None:
            return None

        logger.info("migrating legacy slot %s into %s", LEGACY_KEY, self.db_path)
        try:
            await asyncio.to_thread(self.__write_record, json.dumps(data))
        except (sqlite3.Error, OSError) as e:
            logger.error("could not migrate legacy data into %s: %s", self.db_path, e)
        return data

    async def save(self, data: AppData) -> bool:
        try:
            payload = json.dumps(data, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error("could not serialize data: %s", e)
            return False

        saved = True
        try:
            await asyncio.to_thread(self.__write_record, payload)
        except (sqlite3.Error, OSError) as e:
            logger.error("could not write %s: %s", self.db_path, e)
            saved = False

        try:
            await asyncio.to_thread(self._local_storage.set_item, LEGACY_KEY, payload)
        except Exception as e:
            logger.debug("could not mirror data into legacy slot: %s", e)

        return saved
