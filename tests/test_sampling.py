# tests/test_sampling.py

import math

import numpy as np

from trigulp.core.formats import SINGLE
from trigulp.sampling import iter_ranges, range_count, range_points, range_starts


def test_default_domain_size():
    assert range_count(4 * math.pi, 0.03125) == 837


def test_starts_are_step_spaced():
    starts = range_starts(4 * math.pi, 0.03125)
    assert starts[0] == -4 * math.pi
    assert starts[1] == -4 * math.pi + 0.03125
    assert len(starts) == 837
    assert all(a < b for a, b in zip(starts, starts[1:]))


def test_points_are_adjacent():
    pts = range_points(0.1, 32)
    assert len(pts) == 32
    assert pts[0] == 0.1
    for a, b in zip(pts, pts[1:]):
        assert b == math.nextafter(a, math.inf)


def test_points_cross_zero():
    pts = range_points(-5e-324, 3)
    assert pts[0] == -5e-324
    assert pts[1] == 0.0
    assert pts[2] == 5e-324


def test_single_points():
    pts = range_points(0.5, 4, SINGLE)
    assert all(isinstance(p, np.float32) for p in pts)
    assert pts[1] == np.nextafter(np.float32(0.5), np.float32(np.inf))


def test_deterministic():
    a = list(iter_ranges(1.0, 0.25, 8))
    b = list(iter_ranges(1.0, 0.25, 8))
    assert a == b
    assert [i for i, _ in a] == list(range(range_count(1.0, 0.25)))
