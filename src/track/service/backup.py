# SPDX-License-Identifier: MIT

import json
from pathlib import Path
from typing import Any, Optional

from track.model.app_data import AppData
from track.time import today_local_date_str

BACKUP_FILE_PREFIX = "track-backup-"


class InvalidBackupError(ValueError):
    pass


def backup_file_name(date: str) -> str:
    return f"{BACKUP_FILE_PREFIX}{date}.json"


def validate_backup(data: Any) -> None:
    """Only presence is checked, the migration layer fills in the rest."""
    if not isinstance(data, dict) or ("projects" not in data and "days" not in data):
        raise InvalidBackupError("Invalid backup file.")


def serialize_backup(data: AppData) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_backup(data: AppData, directory: Path, date: Optional[str] = None) -> Path:
    file_path = directory / backup_file_name(date or today_local_date_str())
    directory.mkdir(parents=True, exist_ok=True)
    file_path.write_text(serialize_backup(data), encoding="utf-8")
    return file_path


def read_backup(file_path: Path) -> dict[str, Any]:
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise InvalidBackupError(
            "Could not read file. Make sure it's a valid Track backup."
        ) from e
    validate_backup(data)
    return data
