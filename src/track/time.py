# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum

DATE_FORMAT = "YYYY-MM-DD"


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def now_utc_iso_str() -> str:
    return datetime_to_iso_str(now_utc())


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def today_local_date_str() -> str:
    return pendulum.now("local").format(DATE_FORMAT)


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string, raising ValueError for anything else."""
    try:
        parsed = pendulum.from_format(date_str, DATE_FORMAT)
    except ValueError as e:
        raise ValueError(f"invalid date '{date_str}', expected YYYY-MM-DD") from e
    return parsed.date()


def date_to_str(date: pendulum.Date) -> str:
    return date.format(DATE_FORMAT)


def is_date_str(date_str: str) -> bool:
    try:
        date_from_str(date_str)
    except ValueError:
        return False
    return True


def shift_date_str(date_str: str, days: int) -> str:
    return date_to_str(date_from_str(date_str).add(days=days))


def month_of_date_str(date_str: str) -> int:
    return date_from_str(date_str).month


def week_dates(date_str: str) -> list[str]:
    """Return the Monday-to-Sunday dates of the week containing date_str."""
    monday = date_from_str(date_str).start_of("week")
    return [date_to_str(monday.add(days=offset)) for offset in range(7)]


def date_to_display_str(date_str: str) -> str:
    return date_from_str(date_str).format("ddd MMM D, YYYY")


def datetime_str_to_display_local_str(datetime: str) -> str:
    return datetime_from_str(datetime).in_tz("local").format("MMM-DD ddd HH:mm")
