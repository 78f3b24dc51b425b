from .errors import GridViewError, NonContiguousView, ShapeMismatch, SizeMismatch
from .index import INDEX_MAX, Index2D, Size2D, get_max, get_min
from .saturation import (
    saturating_add,
    saturating_divide,
    saturating_multiply,
    saturating_subtract,
)
from .extent import Extent2D, clamp, get_intersection, get_union
from .array_view import ArrayView, MutableArrayView, are_identical
from .view2d import ArrayView2D, MutableArrayView2D, RowIterator, equal_sequences_with_gaps
from .array2d import Array2D
from .orientation import (
    Orientation,
    compose,
    invert,
    is_mirrored,
    is_row_major,
    is_transposed,
    orientation_from_name,
    rotate,
    transpose,
)
from .index_map import Index2DMap
from .algorithms import (
    copy,
    find_min_max,
    for_each,
    interpolate_value,
    transformed,
    traversal_indices,
    traverse,
)
from .approx import Approx
from .interval_map import IntervalMap
from .ring_buffer import RingBuffer

__all__ = [
    "GridViewError",
    "NonContiguousView",
    "ShapeMismatch",
    "SizeMismatch",
    "INDEX_MAX",
    "Index2D",
    "Size2D",
    "get_max",
    "get_min",
    "saturating_add",
    "saturating_divide",
    "saturating_multiply",
    "saturating_subtract",
    "Extent2D",
    "clamp",
    "get_intersection",
    "get_union",
    "ArrayView",
    "MutableArrayView",
    "are_identical",
    "ArrayView2D",
    "MutableArrayView2D",
    "RowIterator",
    "equal_sequences_with_gaps",
    "Array2D",
    "Orientation",
    "compose",
    "invert",
    "is_mirrored",
    "is_row_major",
    "is_transposed",
    "orientation_from_name",
    "rotate",
    "transpose",
    "Index2DMap",
    "copy",
    "find_min_max",
    "for_each",
    "interpolate_value",
    "transformed",
    "traversal_indices",
    "traverse",
    "Approx",
    "IntervalMap",
    "RingBuffer",
]
