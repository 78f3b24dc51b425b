# gridview/orientation.py
"""
The eight symmetries of a rectangle as traversal orientations.

An orientation is a 3-bit code read as "optionally reverse, then
optionally transpose":

    bit 0   reverse the order of elements within each row
    bit 1   reverse the order of the rows
    bit 2   transpose (rows become columns)

ROWS (0) is ordinary row-major traversal. Every orientation is row-major
exactly when bit 2 is clear. All operations below are bit arithmetic on
the code.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Dict, Final


class Orientation(IntEnum):
    ROWS                            = 0  # identity
    REVERSED_ROWS                   = 1  # mirror left-right
    ROWS_REVERSED_ORDER             = 2  # mirror top-bottom
    REVERSED_ROWS_REVERSED_ORDER    = 3  # rotate 180
    COLUMNS                         = 4  # transpose
    COLUMNS_REVERSED_ORDER          = 5  # rotate 90 counter-clockwise
    REVERSED_COLUMNS                = 6  # rotate 90 clockwise
    REVERSED_COLUMNS_REVERSED_ORDER = 7  # anti-transpose


ALIASES: Final[Dict[str, Orientation]] = {
    "identity":       Orientation.ROWS,
    "flip_h":         Orientation.REVERSED_ROWS,
    "flip_v":         Orientation.ROWS_REVERSED_ORDER,
    "rot180":         Orientation.REVERSED_ROWS_REVERSED_ORDER,
    "transpose":      Orientation.COLUMNS,
    "rot270":         Orientation.COLUMNS_REVERSED_ORDER,
    "rot90":          Orientation.REVERSED_COLUMNS,
    "anti_transpose": Orientation.REVERSED_COLUMNS_REVERSED_ORDER,
}

_MIRRORED_CODES: Final[int] = 0b10010110


def is_transposed(o: Orientation) -> bool:
    return bool(int(o) & 4)


def is_row_major(o: Orientation) -> bool:
    return int(o) < 4


def is_mirrored(o: Orientation) -> bool:
    """True for the four reflections, False for the four rotations."""
    return bool(_MIRRORED_CODES & (1 << int(o)))


def transpose(o: Orientation) -> Orientation:
    return Orientation(int(o) ^ 4)


def invert(o: Orientation) -> Orientation:
    """
    The orientation that undoes ``o``.

    Only the two quarter turns (codes 5 and 6) are not their own inverse;
    they are each other's.
    """
    u = int(o)
    if (u + 1) & 0b110 != 0b110:
        return Orientation(u)
    return Orientation(u ^ 0b11)


def rotate(o: Orientation, turns: int) -> Orientation:
    """Rotate ``o`` by ``turns`` quarter turns counter-clockwise."""
    u = int(o)
    b = u & 4
    turns %= 4
    if turns == 1:
        mask = 4 | (b >> 1) | ((b >> 2) ^ 1)
    elif turns == 2:
        mask = 3
    elif turns == 3:
        mask = 4 | ((b >> 1) ^ 2) | (b >> 2)
    else:
        mask = 0
    return Orientation(u ^ mask)


def compose(first: Orientation, second: Orientation) -> Orientation:
    """
    The orientation equivalent to traversing with ``first``, then
    traversing the result with ``second``.

    When ``first`` transposes, the row and element reversals of ``second``
    act on swapped axes, so its two low bits trade places.
    """
    s = int(second)
    if int(first) & 4:
        s = (s & 4) | ((s & 1) << 1) | ((s >> 1) & 1)
    return Orientation(int(first) ^ s)


def orientation_from_name(name: str) -> Orientation:
    """
    Look up an orientation by enum name or geometric alias.

    Examples:
        >>> orientation_from_name("rot90")
        <Orientation.REVERSED_COLUMNS: 6>
        >>> orientation_from_name("columns")
        <Orientation.COLUMNS: 4>
    """
    key = name.strip()
    if key.lower() in ALIASES:
        return ALIASES[key.lower()]
    try:
        return Orientation[key.upper()]
    except KeyError:
        raise ValueError(f"Unknown orientation: {name}") from None
