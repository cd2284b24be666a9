# tests/test_score.py

import math

import pytest

from trigulp.core.types import FunctionComparison
from trigulp.metrics.score import ieee_div, is_interesting, quietly_interesting, score

from conftest import up


def test_better():
    v = FunctionComparison(old=up(1.0, 6), new=up(1.0, 1), accurate=1.0)
    s = score(v)
    assert s.iscore == 5
    assert s.fscore == 5.0
    assert quietly_interesting(v) == "better"


def test_worse():
    v = FunctionComparison(old=1.0, new=up(1.0, -2), accurate=1.0)
    s = score(v)
    assert s.iscore == -2
    assert s.fscore == -1.0
    assert quietly_interesting(v) == "worse"


def test_exact_new_value_gives_infinite_fscore():
    v = FunctionComparison(old=up(0.5, 3), new=0.5, accurate=0.5)
    s = score(v)
    assert s.iscore == 3
    assert s.fscore == math.inf
    assert quietly_interesting(v) == "better"


def test_equal_errors_are_not_interesting():
    v = FunctionComparison(old=up(1.0, 3), new=up(1.0, -3), accurate=1.0)
    assert score(v).iscore == 0
    assert quietly_interesting(v) is None


def test_nan_accurate_is_tolerated():
    v = FunctionComparison(old=1.0, new=up(1.0), accurate=math.nan)
    s = score(v)
    assert s.iscore == 0
    assert s.fscore == 0.0
    assert quietly_interesting(v) is None


def test_threshold():
    # 101 vs 100 ulps: relative advantage 1e-2
    v = FunctionComparison(old=up(1.0, 101), new=up(1.0, 100), accurate=1.0)
    assert quietly_interesting(v, threshold=1e-3) == "better"
    assert quietly_interesting(v, threshold=0.1) is None


def test_missing_accurate_value():
    with pytest.raises(ValueError):
        score(FunctionComparison(old=1.0, new=2.0))


def test_interesting():
    assert not is_interesting(0.0, -0.0)
    assert not is_interesting(0.25, 0.25)
    assert is_interesting(0.25, up(0.25))


def test_ieee_div():
    assert ieee_div(3.0, 0.0) == math.inf
    assert ieee_div(-3.0, 0.0) == -math.inf
    assert math.isnan(ieee_div(0.0, 0.0))
    assert ieee_div(1.0, 4.0) == 0.25
