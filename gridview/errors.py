from __future__ import annotations


class GridViewError(Exception):
    """Base class for errors raised by gridview."""


class SizeMismatch(GridViewError, ValueError):
    """Source values do not fill a buffer of the requested size exactly."""


class NonContiguousView(GridViewError, ValueError):
    """A gapped multi-row view was asked for a flat view of its data."""


class ShapeMismatch(GridViewError, ValueError):
    """A traversal destination does not have the mapped destination shape."""
