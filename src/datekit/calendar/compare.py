from __future__ import annotations

from typing import Any

import numpy as np

from ._exceptions import InvalidRangeError
from .validation import InstantLike, as_datetime64


def _unwrap(result: Any) -> bool | np.ndarray:
    return bool(result) if np.ndim(result) == 0 else result


def is_date_before(a: InstantLike, b: InstantLike) -> bool | np.ndarray:
    """True where `a` is strictly earlier than `b`, at full resolution."""
    return _unwrap(as_datetime64(a) < as_datetime64(b))


def is_within_range(
    x: InstantLike, start: InstantLike, end: InstantLike
) -> bool | np.ndarray:
    """
    True where ``start < x < end``.  Both bounds are exclusive.

    Raises InvalidRangeError unless every `start` is strictly before its
    `end`; an empty range (``start == end``) is rejected as well.
    """
    lo, hi = as_datetime64(start), as_datetime64(end)
    if not np.all(lo < hi):
        raise InvalidRangeError()
    v = as_datetime64(x)
    return _unwrap((lo < v) & (v < hi))


def is_same_day(a: InstantLike, b: InstantLike) -> bool | np.ndarray:
    """True where `a` and `b` fall on the same calendar date."""
    return _unwrap(
        as_datetime64(a).astype("datetime64[D]")
        == as_datetime64(b).astype("datetime64[D]")
    )
