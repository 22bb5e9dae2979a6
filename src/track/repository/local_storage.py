# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from track import configuration

logger = logging.getLogger(__name__)


class LocalStorage:
    """
    Flat string-keyed slots kept in one YAML file.

    Writes go straight to disk so a slot survives even when nothing else
    is flushed. An unreadable file behaves like an empty one.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._items: Optional[dict[str, str]] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.LOCAL_STORAGE_PATH

    @property
    def items(self) -> dict[str, str]:
        if self._items is None:
            self.__load_data()
        if self._items is None:
            raise ValueError()
        return self._items

    def __load_data(self) -> None:
        self._items = {}
        if not self.path.is_file():
            return
        try:
            raw_items = load(self.path.read_text(encoding="utf-8"), Loader=Loader)
        except (OSError, YAMLError, ValueError) as e:
            logger.warning("ignoring unreadable local storage %s: %s", self.path, e)
            return
        if isinstance(raw_items, dict):
            self._items = {
                str(key): str(value)
                for key, value in raw_items.items()
                if value is not None
            }

    def __save_data(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            dump(self.items, Dumper=Dumper, allow_unicode=True), encoding="utf-8"
        )

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.__save_data()

    def remove_item(self, key: str) -> None:
        if key in self.items:
            del self.items[key]
            self.__save_data()
