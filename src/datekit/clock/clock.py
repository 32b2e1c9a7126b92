from __future__ import annotations

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    return datetime.now()


def get_current_year(clock: Clock | None = None) -> int:
    """Year of ``clock()``; reads the system clock when no clock is given."""
    now = (clock or system_clock)()
    return now.year
