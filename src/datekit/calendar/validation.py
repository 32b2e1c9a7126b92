from __future__ import annotations

import numbers
from datetime import datetime
from typing import Any, Union

import numpy as np

from ._exceptions import (
    CalendarOverflowError,
    InvalidAmountError,
    InvalidDateError,
    InvalidUnitError,
)
from .units import AmountUnit

Instant = Union[datetime, np.datetime64]
InstantLike = Union[datetime, np.datetime64, np.ndarray]
AmountLike = Union[int, float, np.ndarray]


def as_datetime64(x: Any) -> np.ndarray:
    """
    View `x` as a datetime64 array (0-d for scalars).

    Naive ``datetime`` objects become ``datetime64[us]``; datetime64 input is
    passed through with its own resolution.  Nothing else is accepted.
    """
    arr = np.asarray(x)
    if arr.dtype.kind == "M":
        return arr
    if arr.dtype == object and all(isinstance(v, datetime) for v in arr.flat):
        return arr.astype("datetime64[us]")
    raise InvalidDateError()


def require_valid_instant(x: Any) -> InstantLike:
    if np.ndim(x) == 0:
        return _require_scalar_instant(x)

    arr = np.asarray(x)
    if arr.dtype == object:
        if not all(
            isinstance(v, datetime) and v.tzinfo is None for v in arr.flat
        ):
            raise InvalidDateError()
        arr = arr.astype("datetime64[us]")
    if arr.dtype.kind != "M" or np.isnat(arr).any():
        raise InvalidDateError()
    return arr


def _require_scalar_instant(x: Any) -> Instant:
    if isinstance(x, np.ndarray):
        x = x[()]
    if isinstance(x, datetime):
        # Only naive wall-clock values are supported.
        if x.tzinfo is not None:
            raise InvalidDateError()
        return x
    if isinstance(x, np.datetime64):
        if np.isnat(x):
            raise InvalidDateError()
        return x
    raise InvalidDateError()


def require_valid_amount(n: Any) -> int | np.ndarray:
    if np.ndim(n) == 0:
        return _require_scalar_amount(n)

    arr = np.asarray(n)
    if arr.dtype.kind in "iu":
        return arr.astype(np.int64)
    if arr.dtype.kind != "f":
        raise InvalidAmountError()
    if not np.isfinite(arr).all() or not np.all(arr == np.floor(arr)):
        raise InvalidAmountError()
    if np.any(np.abs(arr) >= 2.0**63):
        raise CalendarOverflowError("Amounts do not fit in a 64-bit integer.")
    return arr.astype(np.int64)


def _require_scalar_amount(n: Any) -> int:
    if isinstance(n, np.ndarray):
        n = n[()]
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, numbers.Real):
        raise InvalidAmountError()
    if isinstance(n, numbers.Integral):
        return int(n)
    value = float(n)
    if not np.isfinite(value) or not value.is_integer():
        raise InvalidAmountError()
    return int(value)


def require_valid_unit(unit: Any) -> AmountUnit:
    try:
        return AmountUnit(unit)
    except (ValueError, TypeError):
        choices = ", ".join(u.value for u in AmountUnit)
        raise InvalidUnitError(
            f"Unknown amount unit {unit!r}; expected one of: {choices}."
        ) from None
