"""
Saturating integer arithmetic.

Results are clamped to the range of a numpy integer type instead of
wrapping around. Python integers never overflow, so each function computes
the exact result and then clamps it.

Examples:
    >>> import numpy as np
    >>> saturating_add(120, 10, np.int8)
    127
    >>> saturating_subtract(3, 5, np.uint32)
    0
"""
from __future__ import annotations

from typing import Tuple, Type

import numpy as np

IntType = Type[np.integer]


def _bounds(dtype: IntType) -> Tuple[int, int]:
    info = np.iinfo(dtype)
    return int(info.min), int(info.max)


def _clamp(value: int, dtype: IntType) -> int:
    lo, hi = _bounds(dtype)
    return max(lo, min(hi, value))


def saturating_add(a: int, b: int, dtype: IntType = np.int64) -> int:
    return _clamp(int(a) + int(b), dtype)


def saturating_subtract(a: int, b: int, dtype: IntType = np.int64) -> int:
    return _clamp(int(a) - int(b), dtype)


def saturating_multiply(a: int, b: int, dtype: IntType = np.int64) -> int:
    return _clamp(int(a) * int(b), dtype)


def saturating_divide(a: int, b: int, dtype: IntType = np.int64) -> int:
    """
    Divide, truncating toward zero.

    Division by zero saturates to the upper bound for non-negative
    dividends and to the lower bound otherwise.
    """
    a, b = int(a), int(b)
    lo, hi = _bounds(dtype)
    if b == 0:
        return hi if a >= 0 else lo
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return _clamp(quotient, dtype)
