# SPDX-License-Identifier: MIT

from track.model.preferences import Preferences


def get_preferences_template() -> Preferences:
    return {
        "dark_mode": False,
        "sidebar_width": 288,
        "notes_height": 200,
        "onboarding_seen": False,
    }
