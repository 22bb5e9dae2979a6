# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from track import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        self._config = configuration.get_default_configuration()
        if loaded is not None:
            # Keys missing from older config files keep their defaults
            self._config.update(loaded)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        storage_mode: Optional[configuration.StorageMode] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        persist_delay_ms: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if storage_mode is not None:
            if storage_mode not in configuration.STORAGE_MODES:
                raise ValueError(
                    f"{ConfigurationRepository.__name__}.{ConfigurationRepository.update_config.__name__}: error, unknown storage mode {storage_mode}"
                )
            self.config["storage_mode"] = storage_mode
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if persist_delay_ms is not None:
            if persist_delay_ms < 0:
                raise ValueError(
                    f"{ConfigurationRepository.__name__}.{ConfigurationRepository.update_config.__name__}: error, persist delay must not be negative"
                )
            self.config["persist_delay_ms"] = persist_delay_ms
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
