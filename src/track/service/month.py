# SPDX-License-Identifier: MIT

from typing import Optional

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(month: int) -> str:
    if 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return ""


def validate_month(month: Optional[int]) -> None:
    if month is not None and not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")


def is_month_in_range(month: int, start: int, end: int) -> bool:
    """Check if month falls within start..end, where the range may wrap the year."""
    if start <= end:
        return start <= month <= end
    return month >= start or month <= end


def is_month_upcoming(current_month: int, start_month: int, window_size: int = 2) -> bool:
    """Check if start_month is one of the next window_size months after current_month."""
    for offset in range(1, window_size + 1):
        if (current_month - 1 + offset) % 12 + 1 == start_month:
            return True
    return False
