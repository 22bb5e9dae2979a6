# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, cast

from track.migrate import registry
from track.model.app_data import AppData


def normalize(raw: Any) -> AppData:
    """
    Bring a loaded or imported payload into the current AppData shape.

    Older payloads may be missing whole collections or the fields added in
    later versions; every registered migration step fills its part in order.
    The input is never mutated and normalizing twice changes nothing.
    """
    data: dict[str, Any] = deepcopy(raw) if isinstance(raw, dict) else {}

    registry.register_migrations()
    for _, migration_step in registry.get_migrations():
        migration_step(data)

    return cast(AppData, {"projects": data["projects"], "days": data["days"]})
