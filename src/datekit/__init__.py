"""
datekit
~~~~~~~

Calendar arithmetic, comparisons and holiday lookup over naive wall-clock
instants.  See the ``calendar``, ``holidays`` and ``clock`` subpackages.
"""

import logging

from datekit.calendar import (
    DEFAULT_UNIT,
    AmountUnit,
    CalendarError,
    CalendarOverflowError,
    InvalidAmountError,
    InvalidDateError,
    InvalidRangeError,
    InvalidUnitError,
    add,
    is_date_before,
    is_same_day,
    is_within_range,
    require_valid_amount,
    require_valid_instant,
    subtract,
)
from datekit.clock import Clock, get_current_year, system_clock
from datekit.holidays import Holiday, HolidayCalendar, get_holidays, is_holiday

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AmountUnit",
    "DEFAULT_UNIT",
    "add",
    "subtract",
    "is_date_before",
    "is_within_range",
    "is_same_day",
    "require_valid_instant",
    "require_valid_amount",
    "Holiday",
    "HolidayCalendar",
    "get_holidays",
    "is_holiday",
    "Clock",
    "get_current_year",
    "system_clock",
    "CalendarError",
    "CalendarOverflowError",
    "InvalidAmountError",
    "InvalidDateError",
    "InvalidRangeError",
    "InvalidUnitError",
]
