# gridview/view2d.py
"""
Strided two-dimensional views.

A view is a base array, the offset of its first element, a (rows, columns)
size and a row gap: the number of elements skipped between the end of one
row and the start of the next. Element (r, c) lives at

    offset + r * (columns + row_gap) + c

Views never own or copy memory. Taking a sub-view produces a new view over
the same elements, usually with a larger row gap.

Every accessor is bounds-checked and raises IndexError for coordinates
outside the view, negative ones included.
"""
from __future__ import annotations

from typing import Any, List, Tuple, Type

import numpy as np

from gridview.array_view import ArrayView, MutableArrayView, _as_base
from gridview.errors import NonContiguousView
from gridview.extent import Extent2D, clamp
from gridview.index import PairLike, Size2D, as_size


def equal_sequences_with_gaps(
    seq1: np.ndarray,
    gap1: int,
    seq2: np.ndarray,
    gap2: int,
    seq_size: int,
    count: int,
) -> bool:
    """
    Compare ``count`` runs of ``seq_size`` elements.

    After each run, ``gap1`` elements are skipped in ``seq1`` and ``gap2``
    in ``seq2``. Gap elements are never compared.
    """
    if gap1 == 0 and gap2 == 0:
        n = seq_size * count
        return bool(np.array_equal(seq1[:n], seq2[:n]))

    i = j = 0
    for _ in range(count):
        if not np.array_equal(seq1[i:i + seq_size], seq2[j:j + seq_size]):
            return False
        i += seq_size + gap1
        j += seq_size + gap2
    return True


class RowIterator:
    """
    Iterator over the rows of a strided view.

    Each step yields a flat view of one row and then advances
    ``columns + row_gap`` elements. Two iterators are equal when they point
    at the same element of the same array with the same row length and gap.
    """
    __slots__ = ("_base", "_offset", "_columns", "_row_gap", "_remaining", "_row_type")

    def __init__(
        self,
        base: np.ndarray,
        offset: int,
        columns: int,
        row_gap: int,
        count: int,
        row_type: Type[ArrayView] = ArrayView,
    ):
        self._base = base
        self._offset = offset
        self._columns = columns
        self._row_gap = row_gap
        self._remaining = count
        self._row_type = row_type

    @property
    def offset(self) -> int:
        return self._offset

    def _step(self) -> int:
        return self._columns + self._row_gap

    def __iter__(self) -> RowIterator:
        return self

    def __next__(self) -> ArrayView:
        if self._remaining == 0:
            raise StopIteration
        row = self._row_type(self._base, self._offset, self._columns)
        self._offset += self._step()
        self._remaining -= 1
        return row

    def __len__(self) -> int:
        return self._remaining

    def __getitem__(self, n: int) -> ArrayView:
        if not (0 <= n < self._remaining):
            raise IndexError(f"Row {n} out of bounds, {self._remaining} rows remaining")
        return self._row_type(self._base, self._offset + n * self._step(), self._columns)

    def advance(self, n: int) -> RowIterator:
        if not (0 <= n <= self._remaining):
            raise IndexError(f"Cannot advance {n} rows, {self._remaining} rows remaining")
        self._offset += n * self._step()
        self._remaining -= n
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RowIterator):
            return NotImplemented
        return (self._base is other._base
                and self._offset == other._offset
                and self._columns == other._columns
                and self._row_gap == other._row_gap)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"RowIterator(offset={self._offset}, columns={self._columns}, "
                f"row_gap={self._row_gap}, remaining={self._remaining})")


class ArrayView2D:
    __slots__ = ("_base", "_offset", "_size", "_row_gap")

    _row_type: Type[ArrayView] = ArrayView
    _writable = False

    def __init__(self, data: Any, size: PairLike, row_gap: int = 0, offset: int = 0):
        base = _as_base(data, self._writable)
        size = as_size(size)
        if row_gap < 0 or offset < 0:
            raise ValueError("row_gap and offset must be non-negative")
        if not size.empty:
            last = offset + (size.rows - 1) * (size.columns + row_gap) + size.columns
            if last > len(base):
                raise ValueError(
                    f"View of {size} with row gap {row_gap} at offset {offset} "
                    f"needs {last} elements, data has {len(base)}"
                )
        self._base = base
        self._offset = offset
        self._size = size
        self._row_gap = row_gap

    # ── Geometry ─────────────────────────────────────────────────────────────

    @property
    def base(self) -> np.ndarray:
        return self._base

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def size(self) -> Size2D:
        return self._size

    @property
    def shape(self) -> Tuple[int, int]:
        return self._size.rows, self._size.columns

    @property
    def row_count(self) -> int:
        return self._size.rows

    @property
    def col_count(self) -> int:
        return self._size.columns

    @property
    def value_count(self) -> int:
        return self._size.rows * self._size.columns

    @property
    def row_gap(self) -> int:
        return self._row_gap

    @property
    def empty(self) -> bool:
        return self._size.empty

    @property
    def contiguous(self) -> bool:
        return self._row_gap == 0 or self._size.rows <= 1

    def _row_size(self) -> int:
        return self._size.columns + self._row_gap

    def _position(self, index: PairLike) -> int:
        r, c = index
        if not (0 <= r < self._size.rows and 0 <= c < self._size.columns):
            raise IndexError(f"Index ({r}, {c}) out of bounds for size {self._size}")
        return self._offset + r * self._row_size() + c

    def _row_offset(self, r: int) -> int:
        if not (0 <= r < self._size.rows):
            raise IndexError(f"Row index {r} out of bounds [0, {self._size.rows})")
        return self._offset + r * self._row_size()

    def _sub_view_args(self, extent: Extent2D) -> Tuple[int, Size2D, int]:
        extent = clamp(extent, self._size)
        offset = self._offset
        if not extent.empty:
            offset += extent.origin.row * self._row_size() + extent.origin.column
        row_gap = self._row_gap + self._size.columns - extent.size.columns
        return offset, extent.size, row_gap

    # ── Access ───────────────────────────────────────────────────────────────

    def __getitem__(self, index: PairLike) -> Any:
        return self._base[self._position(index)]

    def at(self, row: int, column: int) -> Any:
        return self._base[self._position((row, column))]

    def row(self, r: int) -> ArrayView:
        return ArrayView(self._base, self._row_offset(r), self._size.columns)

    def array(self) -> ArrayView:
        """Flat view of all elements; only valid for contiguous views."""
        if not self.contiguous:
            raise NonContiguousView(
                f"Cannot flatten a {self._size} view with row gap {self._row_gap}"
            )
        return ArrayView(self._base, self._offset, self.value_count)

    def sub_view(self, extent: Extent2D) -> ArrayView2D:
        offset, size, row_gap = self._sub_view_args(extent)
        return ArrayView2D(self._base, size, row_gap, offset)

    def rows(self) -> RowIterator:
        return RowIterator(self._base, self._offset, self._size.columns,
                           self._row_gap, self._size.rows, self._row_type)

    def __iter__(self) -> RowIterator:
        return self.rows()

    # ── Conversion ───────────────────────────────────────────────────────────

    def _strided(self, writeable: bool) -> np.ndarray:
        step = self._base.strides[0]
        return np.lib.stride_tricks.as_strided(
            self._base[self._offset:],
            shape=self.shape,
            strides=(self._row_size() * step, step),
            writeable=writeable,
        )

    def as_ndarray(self) -> np.ndarray:
        """Read-only 2D numpy view over the same memory."""
        return self._strided(writeable=False)

    def to_list(self) -> List[List[Any]]:
        return [row.to_list() for row in self.rows()]

    # ── Comparison ───────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayView2D):
            return NotImplemented
        if self._size != other._size:
            return False
        if (self._base is other._base
                and self._offset == other._offset
                and self._row_gap == other._row_gap):
            return True
        if self._size.empty:
            return True
        return equal_sequences_with_gaps(
            self._base[self._offset:], self._row_gap,
            other._base[other._offset:], other._row_gap,
            self._size.columns, self._size.rows,
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size!r}, row_gap={self._row_gap})"


class MutableArrayView2D(ArrayView2D):
    __slots__ = ()

    _row_type = MutableArrayView
    _writable = True

    def __setitem__(self, index: PairLike, value: Any) -> None:
        self._base[self._position(index)] = value

    def view(self) -> ArrayView2D:
        return ArrayView2D(self._base, self._size, self._row_gap, self._offset)

    def mut_row(self, r: int) -> MutableArrayView:
        return MutableArrayView(self._base, self._row_offset(r), self._size.columns)

    def mut_array(self) -> MutableArrayView:
        if not self.contiguous:
            raise NonContiguousView(
                f"Cannot flatten a {self._size} view with row gap {self._row_gap}"
            )
        return MutableArrayView(self._base, self._offset, self.value_count)

    def mut_sub_view(self, extent: Extent2D) -> MutableArrayView2D:
        offset, size, row_gap = self._sub_view_args(extent)
        return MutableArrayView2D(self._base, size, row_gap, offset)

    def as_ndarray(self) -> np.ndarray:
        """Writable 2D numpy view over the same memory."""
        return self._strided(writeable=True)

    def fill(self, value: Any) -> None:
        for row in self.rows():
            row.fill(value)
