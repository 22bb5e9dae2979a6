# SPDX-License-Identifier: MIT

from typing import TypedDict


class Preferences(TypedDict):
    dark_mode: bool
    sidebar_width: int
    notes_height: int
    onboarding_seen: bool
