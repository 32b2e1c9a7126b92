from __future__ import annotations

from enum import Enum


class AmountUnit(str, Enum):
    """Unit of a signed offset passed to :func:`datekit.calendar.add`."""
    SECONDS = "seconds"
    MINUTES = "minutes"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


DEFAULT_UNIT: AmountUnit = AmountUnit.DAYS
