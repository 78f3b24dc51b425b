from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from gridview.index import Index2D, PairLike, Size2D, as_index, as_size, get_max, get_min


@dataclass(frozen=True)
class Extent2D:
    """
    A rectangular region: an origin plus a size.

    The default size is unbounded (Size2D.max()), so ``Extent2D((r, c))``
    means "everything from (r, c) onwards" once clamped to a shape.
    """
    origin: Index2D = field(default_factory=Index2D)
    size:   Size2D = field(default_factory=Size2D.max)

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", as_index(self.origin))
        object.__setattr__(self, "size", as_size(self.size))

    @property
    def min_index(self) -> Index2D:
        return self.origin

    @property
    def max_index(self) -> Index2D:
        return self.origin + self.size

    @property
    def empty(self) -> bool:
        return self.size.empty

    def clamp(self, size: PairLike) -> Extent2D:
        return clamp(self, size)

    def __repr__(self) -> str:
        return f"Extent2D({self.origin!r}, {self.size!r})"


def clamp(extent: Extent2D, size: PairLike) -> Extent2D:
    """
    Shrink ``extent`` to fit inside a shape of ``size``.

    The origin is pulled inside first, then the size is cut to what remains.
    Never raises; an extent entirely outside the shape becomes empty.
    """
    size = as_size(size)
    origin = get_min(extent.origin, size)
    return Extent2D(origin, get_min(extent.size, size - origin))


def get_intersection(a: Extent2D, b: Extent2D) -> Optional[Extent2D]:
    lo = get_max(a.min_index, b.min_index)
    hi = get_min(a.max_index, b.max_index)
    if lo.row >= hi.row or lo.column >= hi.column:
        return None
    return Extent2D(lo, hi - lo)


def get_union(a: Extent2D, b: Extent2D) -> Extent2D:
    lo = get_min(a.min_index, b.min_index)
    hi = get_max(a.max_index, b.max_index)
    return Extent2D(lo, hi - lo)
