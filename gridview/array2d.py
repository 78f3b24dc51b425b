from __future__ import annotations

import logging
from typing import Any, Final, Iterable, List, Optional, Tuple

import numpy as np

from gridview.array_view import ArrayView, MutableArrayView
from gridview.errors import SizeMismatch
from gridview.extent import Extent2D
from gridview.index import PairLike, Size2D, as_size
from gridview.view2d import ArrayView2D, MutableArrayView2D, RowIterator

DEFAULT_DTYPE: Final = np.int32

logger = logging.getLogger(__name__)


class Array2D:
    """
    Owner of a rows x columns block of homogeneous values.

    Storage is one contiguous 1D numpy array in row-major order. Views
    taken from the array share that storage; writes through a mutable view
    are visible in the array and vice versa.

    Examples:
        >>> a = Array2D((2, 3), [1, 2, 3, 4, 5, 6])
        >>> int(a[1, 2])
        6
        >>> a.sub_view(Extent2D((0, 1), (2, 2))).to_list()
        [[2, 3], [5, 6]]
    """
    __slots__ = ("_buffer", "_size")

    def __init__(
        self,
        size: PairLike = (0, 0),
        values: Optional[Iterable[Any]] = None,
        dtype: Any = None,
    ):
        size = as_size(size)
        if values is None:
            self._buffer = np.zeros(size.count, dtype=DEFAULT_DTYPE if dtype is None else dtype)
        else:
            buffer = np.array(values, dtype=dtype).reshape(-1)
            if buffer.size != size.count:
                raise SizeMismatch(
                    f"Array2D of size {size} needs {size.count} values, got {buffer.size}"
                )
            self._buffer = buffer
        self._size = size

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]], dtype: Any = None) -> Array2D:
        rows = [list(r) for r in rows]
        columns = len(rows[0]) if rows else 0
        for i, r in enumerate(rows):
            if len(r) != columns:
                raise SizeMismatch(f"Row {i} has length {len(r)}, expected {columns}")
        values = [v for r in rows for v in r]
        return cls((len(rows), columns), values, dtype=dtype)

    # ── Geometry ─────────────────────────────────────────────────────────────

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
    def empty(self) -> bool:
        return self._buffer.size == 0

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    @property
    def data(self) -> np.ndarray:
        return self._buffer

    # ── Access ───────────────────────────────────────────────────────────────

    def _position(self, index: PairLike) -> int:
        r, c = index
        if not (0 <= r < self._size.rows and 0 <= c < self._size.columns):
            raise IndexError(f"Index ({r}, {c}) out of bounds for size {self._size}")
        return r * self._size.columns + c

    def __getitem__(self, index: PairLike) -> Any:
        return self._buffer[self._position(index)]

    def __setitem__(self, index: PairLike, value: Any) -> None:
        self._buffer[self._position(index)] = value

    def row(self, r: int) -> ArrayView:
        return self.view().row(r)

    def mut_row(self, r: int) -> MutableArrayView:
        return self.mut_view().mut_row(r)

    def array(self) -> ArrayView:
        return ArrayView(self._buffer, 0, self.value_count)

    def mut_array(self) -> MutableArrayView:
        return MutableArrayView(self._buffer, 0, self.value_count)

    def view(self) -> ArrayView2D:
        return ArrayView2D(self._buffer, self._size)

    def mut_view(self) -> MutableArrayView2D:
        return MutableArrayView2D(self._buffer, self._size)

    def sub_view(self, extent: Extent2D) -> ArrayView2D:
        return self.view().sub_view(extent)

    def mut_sub_view(self, extent: Extent2D) -> MutableArrayView2D:
        return self.mut_view().mut_sub_view(extent)

    def __iter__(self) -> RowIterator:
        return self.view().rows()

    # ── Mutation ─────────────────────────────────────────────────────────────

    def fill(self, value: Any) -> None:
        self._buffer.fill(value)

    def resize(self, size: PairLike) -> None:
        """
        Change the shape, keeping the overlapping top-left region.

        Rows and columns present in both shapes keep their values, new
        cells are zero and cells outside the new shape are dropped.
        """
        size = as_size(size)
        old_size = self._size
        buffer = np.zeros(size.count, dtype=self._buffer.dtype)
        if old_size.rows != 0 and not size.empty:
            rows = min(old_size.rows, size.rows)
            cols = min(old_size.columns, size.columns)
            new_grid = buffer.reshape(size.rows, size.columns)
            old_grid = self._buffer.reshape(old_size.rows, old_size.columns)
            new_grid[:rows, :cols] = old_grid[:rows, :cols]
        logger.debug("Resized Array2D %s -> %s", old_size, size)
        self._buffer = buffer
        self._size = size

    def release(self) -> np.ndarray:
        """Hand the storage to the caller and leave this array empty."""
        buffer = self._buffer
        self._buffer = np.zeros(0, dtype=buffer.dtype)
        self._size = Size2D(0, 0)
        logger.debug("Released Array2D storage of %d values", buffer.size)
        return buffer

    # ── Conversion ───────────────────────────────────────────────────────────

    def copy(self) -> Array2D:
        return Array2D(self._size, self._buffer, dtype=self._buffer.dtype)

    def to_numpy(self) -> np.ndarray:
        """2D numpy view of the storage; writes go to this array."""
        return self._buffer.reshape(self._size.rows, self._size.columns)

    def to_list(self) -> List[List[Any]]:
        return self.to_numpy().tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array2D):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._buffer, other._buffer)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Array2D(size={self._size!r}, dtype={self._buffer.dtype})"
