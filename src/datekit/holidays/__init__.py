"""
datekit.holidays
~~~~~~~~~~~~~~~~

Fixed-date holiday lookup keyed by year.  The default calendar holds New
Year's Day, Christmas Day and New Year's Eve; a HolidayCalendar can be built
from any other set of fixed-date rules.

Basic usage::

    from datetime import datetime
    from datekit.holidays import get_holidays, is_holiday

    get_holidays(2025)                         # → [2025-01-01, 2025-12-25, 2025-12-31]
    is_holiday(datetime(2025, 12, 25, 18, 30)) # → True

With custom rules::

    from datekit.holidays import Holiday, HolidayCalendar

    cal = HolidayCalendar([Holiday(5, 1, "Labour Day"), Holiday(1, 1, "New Year's Day")])
    cal.holidays(2025)                         # → [2025-01-01, 2025-05-01]
"""

from datekit.holidays.holidays import (
    DEFAULT_HOLIDAYS,
    Holiday,
    HolidayCalendar,
    get_holidays,
    is_holiday,
)

__all__ = [
    "DEFAULT_HOLIDAYS",
    "Holiday",
    "HolidayCalendar",
    "get_holidays",
    "is_holiday",
]
