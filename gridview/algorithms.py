# gridview/algorithms.py
"""
Traversal algorithms over 2D views.

A traversal visits the cells of a destination grid in row-major order and
reads, for each one, the source cell that an Index2DMap assigns to it.
Copying with an orientation therefore yields the source rotated or
mirrored without building an intermediate transposed buffer.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Optional, Tuple, TypeVar, Union

import numpy as np

from gridview.array2d import Array2D
from gridview.errors import ShapeMismatch
from gridview.index import Index2D, PairLike, as_size
from gridview.index_map import Index2DMap
from gridview.orientation import Orientation
from gridview.view2d import ArrayView2D, MutableArrayView2D

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[[Any], Any])

Readable = Union[ArrayView2D, Array2D]
Writable = Union[MutableArrayView2D, Array2D]


def _view(source: Readable) -> ArrayView2D:
    return source.view() if isinstance(source, Array2D) else source


def _mut_view(destination: Writable) -> MutableArrayView2D:
    if isinstance(destination, Array2D):
        return destination.mut_view()
    if not isinstance(destination, MutableArrayView2D):
        raise TypeError(f"Destination must be writable, got {type(destination).__name__}")
    return destination


def copy(
    source: Readable,
    destination: Writable,
    orientation: Orientation = Orientation.ROWS,
) -> MutableArrayView2D:
    """
    Copy ``source`` into ``destination`` traversed with ``orientation``.

    Raises:
        ShapeMismatch: If the destination shape differs from the mapped
            destination shape.
    """
    src = _view(source)
    dst = _mut_view(destination)
    mapping = Index2DMap(src.size, orientation)
    if dst.size != mapping.to_size:
        raise ShapeMismatch(
            f"{mapping.orientation.name} maps {src.size} to {mapping.to_size}, "
            f"destination is {dst.size}"
        )
    if dst.empty:
        return dst

    rows, cols = mapping.source_indices()
    # Fancy indexing gathers into a new array, so overlapping views are safe.
    dst.as_ndarray()[...] = src.as_ndarray()[rows, cols]
    logger.debug("Copied %s with %s into %s", src.size, mapping.orientation.name, dst.size)
    return dst


def transformed(source: Readable, orientation: Orientation) -> Array2D:
    """Return a new Array2D holding ``source`` traversed with ``orientation``."""
    src = _view(source)
    out = Array2D(Index2DMap(src.size, orientation).to_size, dtype=src.base.dtype)
    copy(src, out, orientation)
    return out


def traversal_indices(size: PairLike, orientation: Orientation) -> Iterator[Index2D]:
    """Yield source indices in the order ``orientation`` visits them."""
    mapping = Index2DMap(as_size(size), orientation)
    to_size = mapping.to_size
    for i in range(to_size.rows):
        for j in range(to_size.columns):
            yield mapping.to_source(i, j)


def traverse(source: Readable, orientation: Orientation) -> Iterator[Any]:
    src = _view(source)
    for index in traversal_indices(src.size, orientation):
        yield src[index]


def for_each(source: Readable, orientation: Orientation, fn: F) -> F:
    for value in traverse(source, orientation):
        fn(value)
    return fn


def find_min_max(source: Readable) -> Optional[Tuple[Index2D, Index2D]]:
    """
    Positions of the smallest and largest values, first occurrence in
    row-major order. None for an empty view.
    """
    src = _view(source)
    if src.empty:
        return None
    values = src.as_ndarray()
    lo = np.unravel_index(int(np.argmin(values)), values.shape)
    hi = np.unravel_index(int(np.argmax(values)), values.shape)
    return Index2D(int(lo[0]), int(lo[1])), Index2D(int(hi[0]), int(hi[1]))


def _bracket(x: float, count: int, name: str) -> Tuple[int, int, float]:
    if not (0 <= x <= count - 1):
        raise IndexError(f"{name} {x} outside [0, {count - 1}]")
    lo = int(x)
    hi = lo if lo == count - 1 else lo + 1
    return lo, hi, x - lo


def interpolate_value(source: Readable, row: float, column: float) -> float:
    """
    Bilinear interpolation at fractional (row, column).

    Raises:
        IndexError: If either coordinate lies outside the grid.
    """
    src = _view(source)
    r0, r1, fr = _bracket(row, src.row_count, "Row")
    c0, c1, fc = _bracket(column, src.col_count, "Column")
    top = (1 - fc) * src[r0, c0] + fc * src[r0, c1]
    bottom = (1 - fc) * src[r1, c0] + fc * src[r1, c1]
    return float((1 - fr) * top + fr * bottom)
