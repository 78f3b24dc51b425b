from __future__ import annotations

from typing import Tuple

import numpy as np

from gridview.index import Index2D, PairLike, Size2D, as_size
from gridview.orientation import Orientation, invert, is_row_major


class Index2DMap:
    """
    Maps coordinates between a source grid and the grid obtained by
    traversing it with an orientation.

    ``to_destination`` and ``to_source`` are exact inverses of each other
    for every coordinate inside the respective shapes.

    Examples:
        >>> m = Index2DMap((2, 3), Orientation.COLUMNS)
        >>> m.to_size
        Size2D(3, 2)
        >>> m.to_destination(0, 2)
        Index2D(2, 0)
    """
    __slots__ = ("_from_size", "_orientation", "_inverse")

    def __init__(self, from_size: PairLike, orientation: Orientation):
        self._from_size = as_size(from_size)
        self._orientation = Orientation(orientation)
        self._inverse = invert(self._orientation)

    @property
    def from_size(self) -> Size2D:
        return self._from_size

    @property
    def to_size(self) -> Size2D:
        if is_row_major(self._orientation):
            return self._from_size
        return self._from_size.transposed()

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    def _to(self, i, j):
        u = int(self._orientation)
        rows, cols = self._from_size
        if is_row_major(self._orientation):
            return (rows - 1 - i if u & 2 else i,
                    cols - 1 - j if u & 1 else j)
        return (cols - 1 - j if u & 1 else j,
                rows - 1 - i if u & 2 else i)

    def _from(self, i, j):
        u = int(self._inverse)
        rows, cols = self._from_size
        if is_row_major(self._inverse):
            return (rows - 1 - i if u & 2 else i,
                    cols - 1 - j if u & 1 else j)
        return (rows - 1 - j if u & 1 else j,
                cols - 1 - i if u & 2 else i)

    @staticmethod
    def _check(size: Size2D, row, column) -> None:
        inside = (0 <= row) & (row < size.rows) & (0 <= column) & (column < size.columns)
        if not np.all(inside):
            raise IndexError(f"Index ({row}, {column}) out of bounds for size {size}")

    @staticmethod
    def _result(i, j):
        if np.ndim(i) == 0 and np.ndim(j) == 0:
            return Index2D(int(i), int(j))
        return i, j

    def to_destination(self, row, column):
        """
        Destination coordinate of source (row, column).

        Scalars give an Index2D; integer arrays are mapped element-wise and
        give a (rows, columns) pair of arrays.
        """
        self._check(self._from_size, row, column)
        return self._result(*self._to(row, column))

    def to_source(self, row, column):
        self._check(self.to_size, row, column)
        return self._result(*self._from(row, column))

    def source_indices(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Source row and column of every destination cell, as two integer
        arrays shaped like the destination.
        """
        i, j = np.indices(tuple(self.to_size), dtype=np.intp)
        return self._from(i, j)

    def __repr__(self) -> str:
        return f"Index2DMap({self._from_size!r}, {self._orientation.name})"
