# tests/test_design.py

import math

import pytest

from trigulp.core.formats import DOUBLE, SINGLE
from trigulp.kernel.params import DOUBLE_PARAMS, SINGLE_PARAMS

pytest.importorskip("numpy")

from trigulp.design.minimax_polys import fit_correction, kernel_max_error  # noqa: E402
from trigulp.design.pi4_split import significant_bits, split_pi4, split_residual  # noqa: E402


def test_kernel_polynomials_are_accurate():
    assert kernel_max_error("sin", DOUBLE_PARAMS.sin_coeffs) < 1e-15
    assert kernel_max_error("omc", DOUBLE_PARAMS.omc_coeffs) < 1e-15
    assert kernel_max_error("sin", SINGLE_PARAMS.sin_coeffs) < 1e-6
    assert kernel_max_error("omc", SINGLE_PARAMS.omc_coeffs) < 1e-6


def test_least_squares_fit():
    coeffs, err = fit_correction("sin", 6, refine=False)
    assert len(coeffs) == 6
    assert err < 1e-12
    assert coeffs[-1] == pytest.approx(-1.0 / 6.0, rel=1e-6)

    coeffs, err = fit_correction("omc", 6, refine=False)
    assert err < 1e-12
    assert coeffs[-1] == pytest.approx(1.0 / 24.0, rel=1e-6)


def test_unknown_kind():
    with pytest.raises(ValueError):
        kernel_max_error("tan", [1.0])


@pytest.mark.parametrize(
    "x, fmt, expected",
    [
        (1.0, DOUBLE, 1),
        (1.5, DOUBLE, 2),
        (0.75, DOUBLE, 2),
        (0.0, DOUBLE, 0),
        (0.78515625, SINGLE, 8),
        (1.0 + 2.0**-52, DOUBLE, 53),
    ],
)
def test_significant_bits(x, fmt, expected):
    assert significant_bits(x, fmt) == expected


def test_kernel_split_is_close_to_pi_over_4():
    pytest.importorskip("mpmath")
    assert split_residual(DOUBLE_PARAMS.dp) < 1e-25
    assert split_residual(SINGLE_PARAMS.dp) < 1e-13


def test_generated_split():
    pytest.importorskip("mpmath")
    parts = split_pi4([26, 26, 53], DOUBLE)
    assert len(parts) == 3
    assert significant_bits(parts[0], DOUBLE) <= 26
    assert significant_bits(parts[1], DOUBLE) <= 26
    assert parts[0] < math.pi / 4
    assert split_residual(parts) < 1e-29
