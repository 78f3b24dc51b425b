# gridview/index.py
"""
Two-dimensional index and size values.

Components are non-negative integers bounded by INDEX_MAX. Arithmetic
between indices and sizes saturates at 0 and INDEX_MAX rather than
wrapping, so an "unbounded" size can be added to any origin safely.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Final, Iterator, Tuple, Union

import numpy as np

INDEX_MAX: Final[int] = int(np.iinfo(np.intp).max)


def _saturate(value: int) -> int:
    return max(0, min(INDEX_MAX, value))


def _component(value, name: str) -> int:
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return min(value, INDEX_MAX)


def _pair(value) -> Tuple[int, int]:
    a, b = value
    return int(a), int(b)


@dataclass(frozen=True)
class Index2D:
    """A (row, column) position."""
    row:    int = 0
    column: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "row", _component(self.row, "row"))
        object.__setattr__(self, "column", _component(self.column, "column"))

    @classmethod
    def max(cls) -> Index2D:
        return cls(INDEX_MAX, INDEX_MAX)

    def __iter__(self) -> Iterator[int]:
        yield self.row
        yield self.column

    def __add__(self, other: PairLike) -> Index2D:
        r, c = _pair(other)
        return Index2D(_saturate(self.row + r), _saturate(self.column + c))

    def __sub__(self, other: PairLike) -> Size2D:
        r, c = _pair(other)
        return Size2D(_saturate(self.row - r), _saturate(self.column - c))

    def __repr__(self) -> str:
        return f"Index2D({self.row}, {self.column})"


@dataclass(frozen=True)
class Size2D:
    """A (rows, columns) extent measured in elements."""
    rows:    int = 0
    columns: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", _component(self.rows, "rows"))
        object.__setattr__(self, "columns", _component(self.columns, "columns"))

    @classmethod
    def max(cls) -> Size2D:
        return cls(INDEX_MAX, INDEX_MAX)

    @property
    def empty(self) -> bool:
        return self.rows == 0 or self.columns == 0

    @property
    def count(self) -> int:
        return _saturate(self.rows * self.columns)

    def transposed(self) -> Size2D:
        return Size2D(self.columns, self.rows)

    def __iter__(self) -> Iterator[int]:
        yield self.rows
        yield self.columns

    def __add__(self, other: PairLike) -> Size2D:
        r, c = _pair(other)
        return Size2D(_saturate(self.rows + r), _saturate(self.columns + c))

    def __sub__(self, other: PairLike) -> Size2D:
        r, c = _pair(other)
        return Size2D(_saturate(self.rows - r), _saturate(self.columns - c))

    def __repr__(self) -> str:
        return f"Size2D({self.rows}, {self.columns})"


PairLike = Union[Index2D, Size2D, Tuple[int, int]]


def as_index(value: PairLike) -> Index2D:
    if isinstance(value, Index2D):
        return value
    return Index2D(*_pair(value))


def as_size(value: PairLike) -> Size2D:
    if isinstance(value, Size2D):
        return value
    return Size2D(*_pair(value))


def get_min(a: PairLike, b: PairLike):
    """Component-wise minimum. The result has the type of ``a``."""
    a0, a1 = _pair(a)
    b0, b1 = _pair(b)
    cls = Size2D if isinstance(a, Size2D) else Index2D
    return cls(min(a0, b0), min(a1, b1))


def get_max(a: PairLike, b: PairLike):
    """Component-wise maximum. The result has the type of ``a``."""
    a0, a1 = _pair(a)
    b0, b1 = _pair(b)
    cls = Size2D if isinstance(a, Size2D) else Index2D
    return cls(max(a0, b0), max(a1, b1))
