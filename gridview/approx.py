"""
Approximate comparison of floating point values.

``Approx(x)`` compares equal to any number within ``margin`` of ``x`` and
orders strictly only beyond that margin:

    >>> 0.1 + 0.2 == Approx(0.3)
    True
    >>> Approx(1.0, 0.5) < 1.2
    False
"""
from __future__ import annotations

import sys
from numbers import Real
from typing import Final, Tuple

DEFAULT_MARGIN: Final[float] = 100 * sys.float_info.epsilon


class Approx:
    __slots__ = ("value", "margin")

    def __init__(self, value: float, margin: float = DEFAULT_MARGIN):
        if margin < 0:
            raise ValueError(f"Margin must be non-negative, got {margin}")
        self.value = value
        self.margin = margin

    def _against(self, other) -> Tuple[float, float]:
        """Reference value and margin to compare ``other`` with."""
        if isinstance(other, Approx):
            return other.value, max(self.margin, other.margin)
        if isinstance(other, Real):
            return other, self.margin
        return NotImplemented, 0.0

    def __eq__(self, other) -> bool:
        v, margin = self._against(other)
        if v is NotImplemented:
            return NotImplemented
        return abs(self.value - v) <= margin

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other) -> bool:
        v, margin = self._against(other)
        if v is NotImplemented:
            return NotImplemented
        return self.value + margin < v

    def __gt__(self, other) -> bool:
        v, margin = self._against(other)
        if v is NotImplemented:
            return NotImplemented
        return self.value - margin > v

    def __le__(self, other) -> bool:
        result = self.__gt__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __ge__(self, other) -> bool:
        result = self.__lt__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    __hash__ = None

    def __repr__(self) -> str:
        return f"Approx({self.value!r} ± {self.margin!r})"
