# gridview/interval_map.py
"""
Piecewise-constant map from a float key to a value.

The map is a sorted table of breakpoints. A key belongs to the interval of
the last breakpoint that is less than or equal to it. The first breakpoint
is -inf, so every key has a value.
"""
from __future__ import annotations

import bisect
import math
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

V = TypeVar("V")


class IntervalMap(Generic[V]):
    __slots__ = ("_keys", "_values")

    def __init__(self, default: Optional[V] = None):
        self._keys: List[float] = [-math.inf]
        self._values: List[Optional[V]] = [default]

    def _index(self, key: float) -> int:
        return bisect.bisect_right(self._keys, key) - 1

    def find(self, key: float) -> Tuple[float, V]:
        """The breakpoint whose interval contains ``key`` and its value."""
        i = self._index(key)
        return self._keys[i], self._values[i]

    def __getitem__(self, key: float) -> V:
        return self._values[self._index(key)]

    def insert(self, key: float, value: V) -> Tuple[float, V]:
        """Start a new interval at ``key``, replacing one that starts there."""
        i = self._index(key)
        if self._keys[i] == key:
            self._values[i] = value
        else:
            i += 1
            self._keys.insert(i, key)
            self._values.insert(i, value)
        return self._keys[i], self._values[i]

    def assign(self, low: float, high: float, value: V) -> None:
        """
        Give every key in ``[low, high)`` the value ``value``.

        Keys from ``high`` onwards keep the value they had before.
        """
        if not low < high:
            return
        tail = self[high]
        lo = bisect.bisect_left(self._keys, low)
        hi = bisect.bisect_right(self._keys, high)
        self._keys[lo:hi] = [low, high]
        self._values[lo:hi] = [value, tail]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Tuple[float, V]]:
        return iter(zip(self._keys, self._values))

    def __repr__(self) -> str:
        return f"IntervalMap({list(self)!r})"
