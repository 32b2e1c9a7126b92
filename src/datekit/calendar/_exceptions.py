from __future__ import annotations


class CalendarError(Exception):
    """Base class for all datekit errors."""


class InvalidDateError(CalendarError, TypeError):
    """Instant argument is missing, of the wrong kind, NaT or timezone-aware."""

    def __init__(self, message: str = "Invalid date provided") -> None:
        super().__init__(message)


class InvalidAmountError(CalendarError, ValueError):
    """Amount argument is not a finite whole number."""

    def __init__(self, message: str = "Invalid amount provided") -> None:
        super().__init__(message)


class InvalidUnitError(CalendarError, ValueError):
    """Unit argument is not an AmountUnit member or value."""


class InvalidRangeError(CalendarError, ValueError):
    """Lower bound of a range is not strictly before its upper bound."""

    def __init__(
        self, message: str = "Invalid range: from date must be before to date"
    ) -> None:
        super().__init__(message)


class CalendarOverflowError(CalendarError, OverflowError):
    """Result falls outside the range the instant type can represent."""
