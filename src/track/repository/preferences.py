# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from track.model.preferences import Preferences
from track.repository.local_storage import LocalStorage
from track.template.preferences import get_preferences_template

DARK_MODE_KEY = "track-dark-mode"
SIDEBAR_WIDTH_KEY = "track-sidebar-width"
NOTES_HEIGHT_KEY = "track-notes-height"
ONBOARDING_SEEN_KEY = "track-onboarding-seen"

SIDEBAR_WIDTH_RANGE = (200, 500)
NOTES_HEIGHT_RANGE = (120, 500)


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value == "true"


def _parse_bounded_int(
    value: Optional[str], bounds: tuple[int, int], default: int
) -> int:
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        return default
    if bounds[0] <= number <= bounds[1]:
        return number
    return default


class PreferencesRepository:
    def __init__(self, local_storage: Optional[LocalStorage] = None) -> None:
        self._local_storage = (
            local_storage if local_storage is not None else LocalStorage()
        )
        self._preferences: Optional[Preferences] = None
        self.is_dirty = False

    @property
    def preferences(self) -> Preferences:
        if self._preferences is None:
            self.__load_data()
        if self._preferences is None:
            raise ValueError()
        return self._preferences

    def __load_data(self) -> None:
        defaults = get_preferences_template()
        storage = self._local_storage
        self._preferences = {
            "dark_mode": _parse_bool(
                storage.get_item(DARK_MODE_KEY), defaults["dark_mode"]
            ),
            "sidebar_width": _parse_bounded_int(
                storage.get_item(SIDEBAR_WIDTH_KEY),
                SIDEBAR_WIDTH_RANGE,
                defaults["sidebar_width"],
            ),
            "notes_height": _parse_bounded_int(
                storage.get_item(NOTES_HEIGHT_KEY),
                NOTES_HEIGHT_RANGE,
                defaults["notes_height"],
            ),
            "onboarding_seen": _parse_bool(
                storage.get_item(ONBOARDING_SEEN_KEY), defaults["onboarding_seen"]
            ),
        }

    def __save_data(self, preferences: Preferences) -> None:
        storage = self._local_storage
        storage.set_item(DARK_MODE_KEY, str(preferences["dark_mode"]).lower())
        storage.set_item(SIDEBAR_WIDTH_KEY, str(preferences["sidebar_width"]))
        storage.set_item(NOTES_HEIGHT_KEY, str(preferences["notes_height"]))
        storage.set_item(
            ONBOARDING_SEEN_KEY, str(preferences["onboarding_seen"]).lower()
        )

    def flush(self) -> None:
        if self._preferences is not None and self.is_dirty:
            self.__save_data(self._preferences)
            self.is_dirty = False

    def get_preferences(self) -> Preferences:
        return deepcopy(self.preferences)

    def update_preferences(
        self,
        dark_mode: Optional[bool] = None,
        sidebar_width: Optional[int] = None,
        notes_height: Optional[int] = None,
        onboarding_seen: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if dark_mode is not None:
            self.preferences["dark_mode"] = dark_mode
        if sidebar_width is not None:
            self.preferences["sidebar_width"] = min(
                SIDEBAR_WIDTH_RANGE[1], max(SIDEBAR_WIDTH_RANGE[0], sidebar_width)
            )
        if notes_height is not None:
            self.preferences["notes_height"] = min(
                NOTES_HEIGHT_RANGE[1], max(NOTES_HEIGHT_RANGE[0], notes_height)
            )
        if onboarding_seen is not None:
            self.preferences["onboarding_seen"] = onboarding_seen

    def toggle_dark_mode(self) -> bool:
        dark_mode = not self.preferences["dark_mode"]
        self.update_preferences(dark_mode=dark_mode)
        return dark_mode


PREFERENCES_REPO = PreferencesRepository()
