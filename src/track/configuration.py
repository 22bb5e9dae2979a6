# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypeAlias, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "track"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_DIR: Path = DATA_PATH / "track-data"
DATA_FILE_PATH: Path = DATA_DIR / "data.json"
SANDBOX_DB_PATH: Path = DATA_PATH / "track-db.sqlite3"
LOCAL_STORAGE_PATH: Path = DATA_PATH / "local-storage.yaml"

StorageMode: TypeAlias = Literal["auto", "host", "sandbox"]

STORAGE_MODES: tuple[str, ...] = ("auto", "host", "sandbox")
STORAGE_MODE_ENV = "TRACK_STORAGE_MODE"


class Configuration(TypedDict):
    storage_mode: StorageMode
    data_path: Optional[str]
    persist_delay_ms: int
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "storage_mode": "auto",
        "data_path": None,
        "persist_delay_ms": 150,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_DIR, DATA_FILE_PATH, SANDBOX_DB_PATH, LOCAL_STORAGE_PATH

    DATA_PATH = data_path
    DATA_DIR = DATA_PATH / "track-data"
    DATA_FILE_PATH = DATA_DIR / "data.json"
    SANDBOX_DB_PATH = DATA_PATH / "track-db.sqlite3"
    LOCAL_STORAGE_PATH = DATA_PATH / "local-storage.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())
