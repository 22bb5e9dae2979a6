# SPDX-License-Identifier: MIT

import importlib
import pkgutil
from typing import Any, Callable, TypeAlias

MigrationStep: TypeAlias = Callable[[dict[str, Any]], None]

MIGRATIONS: dict[int, MigrationStep] = {}


def migration(version: int) -> Callable[[MigrationStep], MigrationStep]:
    def wrapper(func: MigrationStep) -> MigrationStep:
        global MIGRATIONS
        if version in MIGRATIONS and MIGRATIONS[version] is not func:
            raise ValueError(f"migration {version} is already registered")
        MIGRATIONS[version] = func
        return func

    return wrapper


def __import_all_modules(package_name: str) -> None:
    package = importlib.import_module(package_name)

    for importer, modname, ispkg in pkgutil.iter_modules(package.__path__):
        full_module_name = f"{package_name}.{modname}"
        importlib.import_module(full_module_name)


def register_migrations() -> None:
    __import_all_modules("track.migrate.migrations")


def get_migrations() -> list[tuple[int, MigrationStep]]:
    global MIGRATIONS
    return sorted(MIGRATIONS.items(), key=lambda kvp: kvp[0])
