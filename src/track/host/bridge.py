# SPDX-License-Identifier: MIT

import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional

from track import configuration
from track.model.app_data import AppData, empty_app_data

logger = logging.getLogger(__name__)

LOAD_DATA = "load-data"
SAVE_DATA = "save-data"
GET_DATA_PATH = "get-data-path"


class HostBridge:
    """
    The privileged side of the desktop shell.

    Owns the single JSON data file inside the application data directory and
    exposes it through three named channels. Nothing raised by file I/O
    crosses the boundary: reads fall back to empty data and writes report
    success as a boolean.
    """

    def __init__(self, data_file_path: Optional[Path] = None) -> None:
        self._data_file_path = data_file_path
        self._handlers: dict[str, Callable[..., Any]] = {
            LOAD_DATA: self.load_data,
            SAVE_DATA: self.save_data,
            GET_DATA_PATH: self.get_data_path,
        }

    @property
    def data_file_path(self) -> Path:
        if self._data_file_path is not None:
            return self._data_file_path
        return configuration.DATA_FILE_PATH

    def handle(self, channel: str, *args: Any) -> Any:
        handler = self._handlers.get(channel)
        if handler is None:
            raise ValueError(
                f"{HostBridge.__name__}.{HostBridge.handle.__name__}: error, unknown channel {channel}"
            )
        return handler(*args)

    def __ensure_data_dir(self) -> None:
        self.data_file_path.parent.mkdir(parents=True, exist_ok=True)

    def load_data(self) -> AppData:
        try:
            self.__ensure_data_dir()
            if self.data_file_path.is_file():
                return json.loads(self.data_file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error("error loading data from %s: %s", self.data_file_path, e)
        return empty_app_data()

    def save_data(self, data: AppData) -> bool:
        try:
            self.__ensure_data_dir()
            self.data_file_path.write_text(
                json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except (OSError, TypeError, ValueError) as e:
            logger.error("error saving data to %s: %s", self.data_file_path, e)
            return False
        return True

    def get_data_path(self) -> str:
        return str(self.data_file_path)
