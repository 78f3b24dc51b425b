"""
Borrowed one-dimensional views.

An ArrayView is a window of ``size`` consecutive elements starting at
``offset`` in a one-dimensional numpy array. It never copies; it keeps a
reference to the array it borrows from, so the memory stays alive for as
long as the view does.
"""
from __future__ import annotations

from typing import Any, Iterator, List, Optional

import numpy as np


def _as_base(data: Any, writable: bool = False) -> np.ndarray:
    if isinstance(data, np.ndarray):
        base = data
    elif writable:
        # Writes must land in the caller's memory, never in a copy.
        raise TypeError(f"Mutable views need a numpy array, got {type(data).__name__}")
    else:
        base = np.asarray(data)
    if base.ndim != 1:
        raise ValueError(f"View data must be 1D, got {base.ndim}D")
    return base


class ArrayView:
    __slots__ = ("_base", "_offset", "_size")

    _writable = False

    def __init__(self, data: Any, offset: int = 0, size: Optional[int] = None):
        base = _as_base(data, self._writable)
        if size is None:
            size = len(base) - offset
        if offset < 0 or size < 0 or offset + size > len(base):
            raise ValueError(
                f"Window [{offset}, {offset + size}) does not fit in {len(base)} elements"
            )
        self._base = base
        self._offset = offset
        self._size = size

    @property
    def base(self) -> np.ndarray:
        return self._base

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def size(self) -> int:
        return self._size

    @property
    def empty(self) -> bool:
        return self._size == 0

    def array(self) -> np.ndarray:
        """Read-only numpy view of the window."""
        out = self._base[self._offset:self._offset + self._size]
        out.flags.writeable = False
        return out

    def to_list(self) -> List[Any]:
        return self._base[self._offset:self._offset + self._size].tolist()

    def _position(self, i: int) -> int:
        if not (0 <= i < self._size):
            raise IndexError(f"Index {i} out of bounds for view of size {self._size}")
        return self._offset + i

    def __getitem__(self, i: int) -> Any:
        return self._base[self._position(i)]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._base[self._offset:self._offset + self._size])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayView):
            return NotImplemented
        if self._size != other._size:
            return False
        if are_identical(self, other):
            return True
        return bool(np.array_equal(self.array(), other.array()))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


class MutableArrayView(ArrayView):
    __slots__ = ()

    _writable = True

    def array(self) -> np.ndarray:
        """Writable numpy view of the window."""
        return self._base[self._offset:self._offset + self._size]

    def view(self) -> ArrayView:
        return ArrayView(self._base, self._offset, self._size)

    def fill(self, value: Any) -> None:
        self.array()[...] = value

    def __setitem__(self, i: int, value: Any) -> None:
        self._base[self._position(i)] = value


def are_identical(a: ArrayView, b: ArrayView) -> bool:
    """True if both views cover the very same elements of the same array."""
    return a._base is b._base and a._offset == b._offset and a._size == b._size
