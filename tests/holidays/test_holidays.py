"""
tests/holidays/test_holidays.py

Covers:
  - get_holidays: count, order, values, types, day resolution
  - Determinism and concurrent lookups for different years
  - is_holiday: each holiday, regular days, neighbours, time of day
  - NumPy datetime64 scalars and arrays
  - Custom HolidayCalendar rules and rule validation
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import numpy as np
import pytest

from datekit.calendar import CalendarError, add
from datekit.holidays import (
    DEFAULT_HOLIDAYS,
    Holiday,
    HolidayCalendar,
    get_holidays,
    is_holiday,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def labour():
    """Unordered custom rules."""
    return HolidayCalendar([
        Holiday(5, 1, "Labour Day"),
        Holiday(1, 1, "New Year's Day"),
        Holiday(11, 11, "Armistice Day"),
    ])


def expected(year):
    return [datetime(year, 1, 1), datetime(year, 12, 25), datetime(year, 12, 31)]


# ── get_holidays ──────────────────────────────────────────────────────────────

class TestGetHolidays:

    def test_returns_three(self):
        holidays = get_holidays(2025)
        assert isinstance(holidays, list)
        assert len(holidays) == 3

    def test_values_2025(self):
        assert get_holidays(2025) == expected(2025)

    def test_values_2030(self):
        assert get_holidays(2030) == expected(2030)

    def test_returns_datetimes(self):
        for holiday in get_holidays(2025):
            assert isinstance(holiday, datetime)

    def test_day_resolution(self):
        for h in get_holidays(2025):
            assert (h.hour, h.minute, h.second, h.microsecond) == (0, 0, 0, 0)

    def test_chronological(self):
        holidays = get_holidays(2024)
        assert holidays == sorted(holidays)

    def test_deterministic(self):
        assert get_holidays(2025) == get_holidays(2025)

    def test_years_are_disjoint(self):
        assert not set(get_holidays(2025)) & set(get_holidays(2026))

    def test_returned_list_is_fresh(self):
        first = get_holidays(2025)
        first.clear()
        assert get_holidays(2025) == expected(2025)

    def test_concurrent_different_years(self):
        years = [2025, 2030] * 50
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(get_holidays, years))
        for year, holidays in zip(years, results):
            assert holidays == expected(year)


# ── is_holiday ────────────────────────────────────────────────────────────────

class TestIsHoliday:

    def test_new_years_day(self):
        assert is_holiday(datetime(2025, 1, 1)) is True

    def test_christmas(self):
        assert is_holiday(datetime(2025, 12, 25)) is True

    def test_new_years_eve(self):
        assert is_holiday(datetime(2025, 12, 31)) is True

    def test_regular_day(self):
        assert is_holiday(datetime(2025, 6, 15)) is False

    def test_time_of_day_ignored(self):
        assert is_holiday(datetime(2025, 12, 25, 18, 30, 0))
        assert is_holiday(datetime(2025, 12, 31, 23, 59, 59, 999999))

    def test_day_before(self):
        assert not is_holiday(datetime(2025, 12, 24))

    def test_day_after(self):
        assert not is_holiday(datetime(2025, 1, 2))

    def test_other_year(self):
        assert is_holiday(datetime(2030, 1, 1))
        assert not is_holiday(datetime(2030, 6, 15))

    def test_datetime64_scalar(self):
        assert is_holiday(np.datetime64("2025-12-25T18:30"))
        assert not is_holiday(np.datetime64("2025-12-24"))

    def test_nat_is_not_a_holiday(self):
        assert is_holiday(np.datetime64("NaT")) is False

    def test_beyond_datetime_range(self):
        new_year = add(np.datetime64("9999-12-31"), 1)
        assert is_holiday(new_year) is True
        assert is_holiday(add(new_year, 1)) is False

    def test_array_beyond_datetime_range(self):
        days = add(np.array(["9999-12-25", "9999-12-31"], dtype="datetime64[D]"), [0, 2])
        np.testing.assert_array_equal(is_holiday(days), [True, False])

    def test_array(self):
        days = np.array(
            ["2024-12-31T23:00", "2025-01-01T08:00", "2025-01-02", "2025-12-25", "NaT"],
            dtype="datetime64[m]",
        )
        np.testing.assert_array_equal(
            is_holiday(days), [True, True, False, True, False]
        )

    def test_array_consistency_with_scalar(self):
        rng = np.random.default_rng(3)
        days = np.datetime64("2020-01-01") + rng.integers(0, 3000, 200).astype("timedelta64[D]")
        array_result = is_holiday(days)
        scalar_results = np.array([is_holiday(d) for d in days])
        np.testing.assert_array_equal(array_result, scalar_results)


# ── Custom calendars ──────────────────────────────────────────────────────────

class TestHolidayCalendar:

    def test_default_rules(self):
        assert HolidayCalendar().rules == DEFAULT_HOLIDAYS

    def test_rules_sorted(self, labour):
        assert labour.holidays(2025) == [
            datetime(2025, 1, 1), datetime(2025, 5, 1), datetime(2025, 11, 11),
        ]

    def test_named(self, labour):
        assert labour.named(2025)[1] == (datetime(2025, 5, 1), "Labour Day")

    def test_default_names(self):
        names = [name for _, name in HolidayCalendar().named(2025)]
        assert names == ["New Year's Day", "Christmas Day", "New Year's Eve"]

    def test_is_holiday(self, labour):
        assert labour.is_holiday(datetime(2025, 5, 1, 9))
        assert not labour.is_holiday(datetime(2025, 12, 25))

    def test_holiday_on(self):
        assert Holiday(7, 4, "Independence Day").on(2026) == datetime(2026, 7, 4)

    def test_empty_rules_raise(self):
        with pytest.raises(CalendarError):
            HolidayCalendar([])

    def test_bad_month_raises(self):
        with pytest.raises(CalendarError):
            HolidayCalendar([Holiday(13, 1, "Nope")])

    def test_bad_day_raises(self):
        with pytest.raises(CalendarError):
            HolidayCalendar([Holiday(4, 31, "Nope")])

    def test_leap_day_rule_raises(self):
        with pytest.raises(CalendarError):
            HolidayCalendar([Holiday(2, 29, "Leap Day")])

    def test_repr(self):
        assert "Christmas Day" in repr(HolidayCalendar())
