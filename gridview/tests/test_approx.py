from __future__ import annotations

import numpy as np
import pytest

from gridview.approx import DEFAULT_MARGIN, Approx


def test_equal_within_default_margin():
    assert 0.1 + 0.2 == Approx(0.3)
    assert Approx(0.3) == 0.1 + 0.2
    assert 0.31 != Approx(0.3)


def test_explicit_margin():
    assert 1.05 == Approx(1.0, 0.1)
    assert 1.2 != Approx(1.0, 0.1)


def test_ordering_only_beyond_margin():
    a = Approx(1.0, 0.5)
    assert not a < 1.2
    assert a < 1.6
    assert not a > 0.8
    assert a > 0.4
    assert a <= 1.2
    assert a >= 1.2


def test_reflected_ordering():
    a = Approx(1.0, 0.5)
    assert 0.4 < a
    assert not 0.8 < a
    assert 1.6 > a
    assert 0.8 >= a
    assert 1.2 <= a


def test_two_approx_use_larger_margin():
    assert Approx(1.0, 0.01) == Approx(1.2, 0.5)
    assert Approx(1.2, 0.5) == Approx(1.0, 0.01)
    assert Approx(1.0, 0.01) != Approx(1.2, 0.1)


def test_numpy_scalars():
    assert Approx(2.0 + DEFAULT_MARGIN / 2) == np.float64(2.0)
    assert Approx(3.0) == np.int32(3)


def test_non_numbers_not_equal():
    assert Approx(1.0) != "1.0"
    with pytest.raises(TypeError):
        Approx(1.0) < "1.0"


def test_negative_margin_rejected():
    with pytest.raises(ValueError):
        Approx(1.0, -0.1)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Approx(1.0))
