import math

import pytest

from trigulp.core.types import Function

mpmath = pytest.importorskip("mpmath")

from trigulp.oracles.mpmath_oracle import MpmathOracle  # noqa: E402


@pytest.fixture(scope="module")
def oracle():
    return MpmathOracle(bits=200)


def test_matches_libm_for_plain_values(oracle):
    for x in (0.1, 1.0, -2.5, 10.0):
        assert oracle.evaluate(Function.SIN, x) == pytest.approx(math.sin(x), rel=1e-15)
        assert oracle.evaluate(Function.COS, x) == pytest.approx(math.cos(x), rel=1e-15)


def test_omc_has_no_cancellation(oracle):
    x = 1e-8
    assert oracle.evaluate(Function.OMC, x) == pytest.approx(x * x / 2, rel=1e-15)
    assert oracle.evaluate(Function.OMC, 0.0) == 0.0


def test_non_finite_input(oracle):
    assert math.isnan(oracle.evaluate(Function.SIN, math.inf))
    assert math.isnan(oracle.evaluate(Function.COS, math.nan))
    assert oracle.close() == 0
