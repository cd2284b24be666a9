# tests/test_ulp.py

import math

import numpy as np
import pytest

from trigulp.core.formats import DOUBLE, SINGLE
from trigulp.metrics.ulp import about, ulp_distance

from conftest import up

VALUES = [0.0, -0.0, 1.0, -1.0, 0.5, 3.5e-310, -2.0, 1e300, -1e-300, math.inf, -math.inf, 5e-324]


def test_distance_to_self_is_zero():
    for x in VALUES:
        assert ulp_distance(x, x) == 0


def test_signed_zeros_collapse():
    assert ulp_distance(0.0, -0.0) == 0
    assert ulp_distance(-0.0, 0.0) == 0


def test_adjacent_values():
    assert ulp_distance(1.0, up(1.0)) == -1
    assert ulp_distance(up(1.0), 1.0) == 1
    assert ulp_distance(1.0, up(1.0, -3)) == 3
    # across zero: two smallest subnormals of opposite sign
    assert ulp_distance(5e-324, -5e-324) == 2
    assert ulp_distance(-5e-324, 0.0) == -1


def test_anti_symmetry():
    for x in VALUES:
        for y in VALUES:
            assert ulp_distance(x, y) == -ulp_distance(y, x)


def test_nan_is_infinitely_far():
    big = 2**63 - 1
    assert ulp_distance(math.nan, 1.0) == big
    assert ulp_distance(1.0, math.nan) == big
    assert ulp_distance(math.nan, math.nan) == big
    assert ulp_distance(np.float32(math.nan), np.float32(1), SINGLE) == 2**31 - 1


def test_single_width():
    one = np.float32(1.0)
    nxt = np.nextafter(one, np.float32(2.0))
    assert ulp_distance(one, nxt, SINGLE) == -1
    assert ulp_distance(np.float32(-0.0), np.float32(0.0), SINGLE) == 0
    # a double step is far below one float step
    assert ulp_distance(1.0, up(1.0), DOUBLE) == -1
    assert ulp_distance(np.float32(2.0), one, SINGLE) == 1 << 23


def test_about():
    assert about(1.0, -1.0) == "Exponents or signs differ !"
    assert about(1.0, 2.0) == "Exponents or signs differ !"
    assert about(1.0, up(1.0)) == "Mantissas differ in  1 bits"
    assert about(1.0, up(1.0, 4)) == "Mantissas differ in  3 bits"
    assert about(1.5, up(1.5, -1000)) == "Mantissas differ in 10 bits"


def test_about_single():
    one = np.float32(1.0)
    nxt = np.nextafter(one, np.float32(2.0))
    assert about(one, nxt, SINGLE) == "Mantissas differ in  1 bits"
    assert about(one, np.float32(-1.0), SINGLE) == "Exponents or signs differ !"
