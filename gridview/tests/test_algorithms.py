# gridview/tests/test_algorithms.py
"""
Oriented copy and traversal checked against numpy's own rotations and
flips, plus min/max search and bilinear interpolation.
"""
from __future__ import annotations

import itertools
import logging

import numpy as np
import pytest

from gridview.algorithms import (
    copy,
    find_min_max,
    for_each,
    interpolate_value,
    transformed,
    traversal_indices,
    traverse,
)
from gridview.approx import Approx
from gridview.array2d import Array2D
from gridview.errors import ShapeMismatch
from gridview.extent import Extent2D
from gridview.index import Index2D
from gridview.orientation import Orientation, compose, invert

O = Orientation

NUMPY_EQUIVALENT = {
    O.ROWS:                            lambda a: a,
    O.REVERSED_ROWS:                   np.fliplr,
    O.ROWS_REVERSED_ORDER:             np.flipud,
    O.REVERSED_ROWS_REVERSED_ORDER:    lambda a: np.rot90(a, 2),
    O.COLUMNS:                         lambda a: a.T,
    O.COLUMNS_REVERSED_ORDER:          lambda a: np.rot90(a, 1),
    O.REVERSED_COLUMNS:                lambda a: np.rot90(a, -1),
    O.REVERSED_COLUMNS_REVERSED_ORDER: lambda a: np.rot90(a, 2).T,
}


@pytest.fixture
def grid2x3():
    return Array2D((2, 3), [1, 2, 3, 4, 5, 6])


# ─────────────────────────────────────────────────────────────────────────────
# copy / transformed
# ─────────────────────────────────────────────────────────────────────────────

def test_copy_anti_transpose(grid2x3):
    out = Array2D((3, 2))
    copy(grid2x3, out, O.REVERSED_COLUMNS_REVERSED_ORDER)
    assert out.to_list() == [[6, 3], [5, 2], [4, 1]]


def test_copy_defaults_to_plain_copy(grid2x3):
    out = Array2D((2, 3))
    copy(grid2x3, out)
    assert out == grid2x3


@pytest.mark.parametrize("o", list(O))
def test_transformed_matches_numpy(o):
    source = Array2D((3, 4), range(12))
    expected = NUMPY_EQUIVALENT[o](np.arange(12).reshape(3, 4))
    assert np.array_equal(transformed(source, o).to_numpy(), expected)


@pytest.mark.parametrize("x, y", list(itertools.product(list(O), repeat=2)))
def test_transformed_twice_is_compose(x, y):
    source = Array2D((2, 5), range(10))
    assert transformed(transformed(source, x), y) == transformed(source, compose(x, y))


@pytest.mark.parametrize("o", list(O))
def test_inverse_restores_source(o):
    source = Array2D((3, 5), range(15))
    assert transformed(transformed(source, o), invert(o)) == source


def test_copy_shape_mismatch(grid2x3):
    with pytest.raises(ShapeMismatch):
        copy(grid2x3, Array2D((2, 3)), O.COLUMNS)


def test_copy_into_read_only_view_raises(grid2x3):
    with pytest.raises(TypeError):
        copy(grid2x3, Array2D((2, 3)).view())


def test_copy_between_sub_views():
    source = Array2D((4, 4), range(16))
    target = Array2D((5, 5))
    src = source.sub_view(Extent2D((1, 1), (2, 3)))
    dst = target.mut_sub_view(Extent2D((2, 0), (3, 2)))
    copy(src, dst, O.REVERSED_COLUMNS)
    assert target.to_list() == [
        [0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0],
        [9, 5, 0, 0, 0],
        [10, 6, 0, 0, 0],
        [11, 7, 0, 0, 0],
    ]


def test_copy_onto_itself():
    square = Array2D((3, 3), range(9))
    copy(square.view(), square, O.COLUMNS)
    assert square.to_list() == [[0, 3, 6], [1, 4, 7], [2, 5, 8]]


def test_copy_empty():
    out = Array2D((0, 2))
    copy(Array2D((2, 0)), out, O.COLUMNS)
    assert out.empty


def test_transformed_keeps_dtype():
    source = Array2D((2, 2), [0.5, 1.5, 2.5, 3.5], dtype=np.float64)
    assert transformed(source, O.COLUMNS).dtype == np.float64


def test_copy_logs_at_debug(grid2x3, caplog):
    with caplog.at_level(logging.DEBUG, logger="gridview.algorithms"):
        transformed(grid2x3, O.COLUMNS)
    assert "COLUMNS" in caplog.text


# ─────────────────────────────────────────────────────────────────────────────
# Traversal
# ─────────────────────────────────────────────────────────────────────────────

def test_traversal_indices_columns():
    assert list(traversal_indices((2, 3), O.COLUMNS)) == [
        Index2D(0, 0), Index2D(1, 0),
        Index2D(0, 1), Index2D(1, 1),
        Index2D(0, 2), Index2D(1, 2),
    ]


def test_traversal_indices_reversed_rows():
    assert [tuple(i) for i in traversal_indices((2, 2), O.REVERSED_ROWS)] == [
        (0, 1), (0, 0), (1, 1), (1, 0),
    ]


@pytest.mark.parametrize("o", list(O))
def test_traverse_matches_transformed(grid2x3, o):
    assert list(traverse(grid2x3, o)) == transformed(grid2x3, o).data.tolist()


def test_for_each_visits_in_order(grid2x3):
    seen = []
    result = for_each(grid2x3, O.REVERSED_ROWS_REVERSED_ORDER, seen.append)
    assert seen == [6, 5, 4, 3, 2, 1]
    assert result == seen.append


def test_traverse_sub_view():
    source = Array2D((3, 3), range(9))
    sub = source.sub_view(Extent2D((0, 1), (2, 2)))
    assert list(traverse(sub, O.COLUMNS)) == [1, 4, 2, 5]


# ─────────────────────────────────────────────────────────────────────────────
# find_min_max
# ─────────────────────────────────────────────────────────────────────────────

def test_find_min_max():
    grid = Array2D.from_rows([[3, 9, 1], [1, 0, 9]])
    assert find_min_max(grid) == (Index2D(1, 1), Index2D(0, 1))


def test_find_min_max_first_occurrence():
    grid = Array2D.from_rows([[5, 5], [5, 5]])
    assert find_min_max(grid) == (Index2D(0, 0), Index2D(0, 0))


def test_find_min_max_of_sub_view():
    grid = Array2D.from_rows([[0, 0, 0], [0, 4, 2], [0, 7, 3]])
    sub = grid.sub_view(Extent2D((1, 1), (2, 2)))
    assert find_min_max(sub) == (Index2D(0, 1), Index2D(1, 0))


def test_find_min_max_empty():
    assert find_min_max(Array2D((0, 4))) is None


# ─────────────────────────────────────────────────────────────────────────────
# interpolate_value
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def ramp():
    return Array2D.from_rows([[0, 1, 2], [1, 2, 3], [2, 3, 4]], dtype=np.float64)


@pytest.mark.parametrize("row, column, expected", [
    (0, 0, 0.0),
    (2, 2, 4.0),
    (0, 2, 2.0),
    (2, 0, 2.0),
    (1, 1, 2.0),
    (0.5, 0, 0.5),
    (2, 1.5, 3.5),
    (0.2, 1.3, 1.5),
])
def test_interpolate_value(ramp, row, column, expected):
    assert interpolate_value(ramp, row, column) == Approx(expected)


def test_interpolate_integer_grid():
    grid = Array2D.from_rows([[0, 10], [20, 30]])
    assert interpolate_value(grid, 0.5, 0.5) == Approx(15.0)


@pytest.mark.parametrize("row, column", [(-0.1, 0), (1.1, 0), (0, 2.3), (0, -100)])
def test_interpolate_outside_raises(row, column):
    grid = Array2D((2, 3), range(6), dtype=np.float64)
    with pytest.raises(IndexError):
        interpolate_value(grid, row, column)
