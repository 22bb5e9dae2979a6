# SPDX-License-Identifier: MIT

import atexit

from track.repository.configuration import CONFIGURATION_REPO
from track.repository.preferences import PREFERENCES_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    PREFERENCES_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
