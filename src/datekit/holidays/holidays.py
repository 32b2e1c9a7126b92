from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

import numpy as np

from datekit.calendar import CalendarError, days_in_month, is_same_day
from datekit.calendar.validation import InstantLike, as_datetime64

logger = logging.getLogger(__name__)

# Any non-leap year: a rule must name a date that exists every year.
_REFERENCE_YEAR = 2001


@dataclass(frozen=True, slots=True)
class Holiday:
    month: int
    day: int
    name: str

    def on(self, year: int) -> datetime:
        """Midnight of this holiday in `year`."""
        return datetime(year, self.month, self.day)

    def on_years(self, years: np.ndarray) -> np.ndarray:
        """Vectorised :meth:`on` over a ``datetime64[Y]`` array."""
        months = years.astype("datetime64[M]") + np.timedelta64(self.month - 1, "M")
        return months.astype("datetime64[D]") + np.timedelta64(self.day - 1, "D")


DEFAULT_HOLIDAYS: tuple[Holiday, ...] = (
    Holiday(1, 1, "New Year's Day"),
    Holiday(12, 25, "Christmas Day"),
    Holiday(12, 31, "New Year's Eve"),
)


class HolidayCalendar:
    """
    Fixed-date holidays, recurring every year on the same month and day.

    Instances are immutable: the rules are frozen at construction, so one
    calendar can be shared between threads.
    """

    def __init__(self, holidays: Sequence[Holiday] = DEFAULT_HOLIDAYS) -> None:
        if not holidays:
            raise CalendarError("Holiday list must not be empty.")

        for h in holidays:
            if not 1 <= h.month <= 12:
                raise CalendarError(f"Holiday month must be in 1..12; got {h.month}.")
            last = days_in_month(_REFERENCE_YEAR, h.month)
            if not 1 <= h.day <= last:
                raise CalendarError(
                    f"Holiday {h.name!r} on {h.month:02d}-{h.day:02d} "
                    f"does not occur every year."
                )

        self._rules: tuple[Holiday, ...] = tuple(
            sorted(holidays, key=lambda h: (h.month, h.day))
        )
        logger.debug("Built %r", self)

    # ── lookups ──────────────────────────────────────────────────────────

    def holidays(self, year: int) -> list[datetime]:
        return [h.on(year) for h in self._rules]

    def named(self, year: int) -> list[tuple[datetime, str]]:
        return [(h.on(year), h.name) for h in self._rules]

    def is_holiday(self, x: InstantLike) -> bool | np.ndarray:
        """
        True where `x` falls on a holiday of its own year.  Only the calendar
        date of `x` is compared; its time of day never matters.

        Years are taken from ``datetime64[Y]``, so instants beyond the
        ``datetime`` range (years past 9999) are looked up too.
        """
        days = as_datetime64(x).astype("datetime64[D]")
        years = days.astype("datetime64[Y]")
        result = np.zeros(days.shape, dtype=bool)
        for rule in self._rules:
            result |= is_same_day(days, rule.on_years(years))
        return bool(result) if result.ndim == 0 else result

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def rules(self) -> tuple[Holiday, ...]:
        return self._rules

    def __repr__(self) -> str:
        names = [h.name for h in self._rules]
        return f"HolidayCalendar(holidays={names})"


_DEFAULT_CALENDAR = HolidayCalendar()


def get_holidays(year: int) -> list[datetime]:
    """New Year's Day, Christmas Day and New Year's Eve of `year`, in order."""
    return _DEFAULT_CALENDAR.holidays(year)


def is_holiday(x: InstantLike) -> bool | np.ndarray:
    return _DEFAULT_CALENDAR.is_holiday(x)
