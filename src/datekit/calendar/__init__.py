"""
datekit.calendar
~~~~~~~~~~~~~~~~

Calendar arithmetic over naive wall-clock instants.  ``add`` shifts an
instant by a signed amount of seconds, minutes, days, weeks, months or years,
clamping the day-of-month at the end of short months; the comparators test
strict ordering, strict range membership and same-day equality.

Basic usage::

    from datetime import datetime
    from datekit.calendar import AmountUnit, add, is_within_range

    add(datetime(2025, 1, 31), 1, AmountUnit.MONTHS)   # → 2025-02-28
    is_within_range(datetime(2025, 1, 15),
                    datetime(2025, 1, 10),
                    datetime(2025, 1, 20))             # → True

NumPy ``datetime64`` arrays are accepted everywhere a scalar is::

    import numpy as np
    days = np.array(["2025-01-31", "2024-03-31"], dtype="datetime64[D]")
    add(days, [1, -1], "months")   # → ['2025-02-28', '2024-02-29']

Public API
----------
add, subtract          Unit-typed calendar arithmetic.
is_date_before         Strict ordering.
is_within_range        Strict range membership.
is_same_day            Calendar-date equality.
AmountUnit             Closed set of units accepted by ``add``.
CalendarError          Base exception for all calendar-related errors.
"""

from __future__ import annotations

from datekit.calendar._exceptions import (
    CalendarError,
    CalendarOverflowError,
    InvalidAmountError,
    InvalidDateError,
    InvalidRangeError,
    InvalidUnitError,
)
from datekit.calendar.arithmetic import add, clamp_day, days_in_month, subtract
from datekit.calendar.compare import is_date_before, is_same_day, is_within_range
from datekit.calendar.units import DEFAULT_UNIT, AmountUnit
from datekit.calendar.validation import (
    require_valid_amount,
    require_valid_instant,
    require_valid_unit,
)

__all__ = [
    "AmountUnit",
    "DEFAULT_UNIT",
    "add",
    "subtract",
    "clamp_day",
    "days_in_month",
    "is_date_before",
    "is_within_range",
    "is_same_day",
    "require_valid_instant",
    "require_valid_amount",
    "require_valid_unit",
    "CalendarError",
    "CalendarOverflowError",
    "InvalidAmountError",
    "InvalidDateError",
    "InvalidRangeError",
    "InvalidUnitError",
]
