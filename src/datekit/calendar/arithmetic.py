from __future__ import annotations

import calendar
import logging
from datetime import MAXYEAR, MINYEAR, datetime, timedelta
from typing import Any, Callable

import numpy as np

from ._exceptions import CalendarOverflowError
from .units import DEFAULT_UNIT, AmountUnit
from .validation import (
    InstantLike,
    as_datetime64,
    require_valid_amount,
    require_valid_instant,
    require_valid_unit,
)

logger = logging.getLogger(__name__)

ScalarShift = Callable[[datetime, int], datetime]
ArrayShift = Callable[[np.ndarray, np.ndarray], np.ndarray]


# ── day-of-month clamping (shared by MONTHS and YEARS) ───────────────────────

def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> int:
    """Last valid day of (year, month) if `day` runs past it, else `day`."""
    return min(day, days_in_month(year, month))


# ── scalar backend (datetime.datetime) ───────────────────────────────────────

def _shift_delta(t: datetime, **kwargs: int) -> datetime:
    try:
        return t + timedelta(**kwargs)
    except OverflowError:
        raise CalendarOverflowError(
            f"Result of shifting {t.isoformat()} is outside the supported range."
        ) from None


def _shift_seconds(t: datetime, n: int) -> datetime:
    return _shift_delta(t, seconds=n)


def _shift_minutes(t: datetime, n: int) -> datetime:
    return _shift_delta(t, minutes=n)


def _shift_days(t: datetime, n: int) -> datetime:
    return _shift_delta(t, days=n)


def _shift_weeks(t: datetime, n: int) -> datetime:
    return _shift_delta(t, weeks=n)


def _shift_months(t: datetime, n: int) -> datetime:
    total = t.year * 12 + (t.month - 1) + n
    year, month0 = divmod(total, 12)
    month = month0 + 1
    if not MINYEAR <= year <= MAXYEAR:
        raise CalendarOverflowError(
            f"Year {year} is outside the supported range [{MINYEAR}, {MAXYEAR}]."
        )
    day = clamp_day(year, month, t.day)
    if day != t.day:
        logger.debug(
            "Clamped day %d to %d for %04d-%02d", t.day, day, year, month
        )
    return t.replace(year=year, month=month, day=day)


def _shift_years(t: datetime, n: int) -> datetime:
    return _shift_months(t, 12 * n)


_SCALAR_SHIFTS: dict[AmountUnit, ScalarShift] = {
    AmountUnit.SECONDS: _shift_seconds,
    AmountUnit.MINUTES: _shift_minutes,
    AmountUnit.DAYS: _shift_days,
    AmountUnit.WEEKS: _shift_weeks,
    AmountUnit.MONTHS: _shift_months,
    AmountUnit.YEARS: _shift_years,
}


# ── array backend (numpy.datetime64) ─────────────────────────────────────────

def _shift_seconds_array(t: np.ndarray, n: np.ndarray) -> np.ndarray:
    return t + n.astype("timedelta64[s]")


def _shift_minutes_array(t: np.ndarray, n: np.ndarray) -> np.ndarray:
    return t + n.astype("timedelta64[m]")


def _shift_days_array(t: np.ndarray, n: np.ndarray) -> np.ndarray:
    return t + n.astype("timedelta64[D]")


def _shift_weeks_array(t: np.ndarray, n: np.ndarray) -> np.ndarray:
    return t + (n * 7).astype("timedelta64[D]")


def _shift_months_array(t: np.ndarray, n: np.ndarray) -> np.ndarray:
    days = t.astype("datetime64[D]")
    time_of_day = t - days

    start = days.astype("datetime64[M]")
    day = (days - start).astype(np.int64) + 1

    target = start + n.astype("timedelta64[M]")
    first = target.astype("datetime64[D]")
    length = (
        (target + np.timedelta64(1, "M")).astype("datetime64[D]") - first
    ).astype(np.int64)

    clamped = np.minimum(day, length)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Clamped %d day(s) to end of month", int(np.sum(clamped != day)))
    return first + (clamped - 1).astype("timedelta64[D]") + time_of_day


def _shift_years_array(t: np.ndarray, n: np.ndarray) -> np.ndarray:
    return _shift_months_array(t, n * 12)


_ARRAY_SHIFTS: dict[AmountUnit, ArrayShift] = {
    AmountUnit.SECONDS: _shift_seconds_array,
    AmountUnit.MINUTES: _shift_minutes_array,
    AmountUnit.DAYS: _shift_days_array,
    AmountUnit.WEEKS: _shift_weeks_array,
    AmountUnit.MONTHS: _shift_months_array,
    AmountUnit.YEARS: _shift_years_array,
}


# Coarsest to finest; a shift is carried out in the finer of the instant's unit
# and the unit's own base.
_TIME_UNITS = ["Y", "M", "W", "D", "h", "m", "s", "ms", "us", "ns", "ps", "fs", "as"]

_BASE_UNIT: dict[AmountUnit, str] = {
    AmountUnit.SECONDS: "s",
    AmountUnit.MINUTES: "m",
    AmountUnit.DAYS: "D",
    AmountUnit.WEEKS: "D",
    AmountUnit.MONTHS: "D",
    AmountUnit.YEARS: "D",
}

# Upper bound on the length of one unit, in seconds.
_STEP_SECONDS: dict[AmountUnit, float] = {
    AmountUnit.SECONDS: 1.0,
    AmountUnit.MINUTES: 60.0,
    AmountUnit.DAYS: 86_400.0,
    AmountUnit.WEEKS: 7 * 86_400.0,
    AmountUnit.MONTHS: 31 * 86_400.0,
    AmountUnit.YEARS: 366 * 86_400.0,
}

# Stay clear of int64 min, which numpy reserves for NaT.
_TICK_LIMIT = 0.999 * 2.0**63


def _seconds_per_tick(unit: str) -> float:
    if unit == "Y":
        return 365.2425 * 86_400.0
    if unit == "M":
        return 30.436875 * 86_400.0
    return float(np.timedelta64(1, unit) / np.timedelta64(1, "s"))


def _check_range(t: np.ndarray, n: np.ndarray, unit: AmountUnit) -> None:
    """
    Raise CalendarOverflowError if shifting `t` by `n` units would leave the
    int64 range of the result's datetime64 resolution.  numpy wraps around
    silently, so the bound is checked up front in floating point.
    """
    t_unit, t_count = np.datetime_data(t.dtype)
    base = _BASE_UNIT[unit]
    r_unit = max(t_unit, base, key=_TIME_UNITS.index)
    r_sec = _seconds_per_tick(r_unit)

    start = t.view(np.int64).astype(float) * t_count * _seconds_per_tick(t_unit)
    shift = n.astype(float) * _STEP_SECONDS[unit]
    if (
        np.any(np.abs(start + shift) / r_sec >= _TICK_LIMIT)
        or np.any(np.abs(shift) / r_sec >= _TICK_LIMIT)
    ):
        raise CalendarOverflowError(
            f"Result of shifting by {unit.value} is outside the datetime64[{r_unit}] range."
        )


# ── public API ───────────────────────────────────────────────────────────────

def add(
    instant: InstantLike,
    amount: Any,
    unit: AmountUnit | str = DEFAULT_UNIT,
) -> InstantLike:
    """
    Shift `instant` by `amount` units and return the new instant.

    MONTHS and YEARS clamp the day-of-month to the end of the target month
    (Jan 31 + 1 month -> Feb 28, or Feb 29 in a leap year).  The time of day
    is kept for every unit coarser than MINUTES.

    ``datetime`` in, ``datetime`` out; ``datetime64`` scalars and arrays are
    shifted elementwise, broadcasting against array amounts.
    """
    instant = require_valid_instant(instant)
    amount = require_valid_amount(amount)
    unit = require_valid_unit(unit)

    if isinstance(instant, datetime) and np.ndim(amount) == 0:
        return _SCALAR_SHIFTS[unit](instant, amount)

    try:
        n = np.asarray(amount, dtype=np.int64)
    except OverflowError:
        raise CalendarOverflowError(
            f"Amount {amount!r} does not fit in a 64-bit integer."
        ) from None
    t, n = np.broadcast_arrays(as_datetime64(instant), n)
    _check_range(t, n, unit)
    result = np.asarray(_ARRAY_SHIFTS[unit](t, n))
    return result[()] if result.ndim == 0 else result


def subtract(
    instant: InstantLike,
    amount: Any,
    unit: AmountUnit | str = DEFAULT_UNIT,
) -> InstantLike:
    return add(instant, -require_valid_amount(amount), unit)
