# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

_current_date: ContextVar[Optional[str]] = ContextVar("current_date", default=None)


def set_current_date(value: Optional[str]) -> None:
    _current_date.set(value)


def get_current_date() -> Optional[str]:
    return _current_date.get()
