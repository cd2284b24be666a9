# metrics/ulp.py

from __future__ import annotations

import math
from typing import Any

from ..core.formats import DOUBLE, FloatFormat


def _ordered(u: int, fmt: FloatFormat) -> int:
    """Signed position of a bit pattern on the number line; both zeros map to 0."""
    if u & fmt.sign_bit:
        return -(u & ~fmt.sign_bit)
    return u


def ulp_distance(x: Any, y: Any, fmt: FloatFormat = DOUBLE) -> int:
    """
    Signed ULP distance x - y, counted in representable values of `fmt`.

    Negative when y is the larger number; anti-symmetric; the distance
    between 0.0 and -0.0 is 0. If x or y is NaN the result is the greatest
    positive value of the signed type of the format's width.
    """
    if math.isnan(x) or math.isnan(y):
        return fmt.max_distance
    return _ordered(fmt.to_bits(x), fmt) - _ordered(fmt.to_bits(y), fmt)


def about(old: Any, new: Any, fmt: FloatFormat = DOUBLE) -> str:
    """Describe how two results differ: in sign/exponent, or in how many low mantissa bits."""
    a, b = fmt.to_bits(old), fmt.to_bits(new)
    if (a ^ b) & fmt.sign_exponent_mask:
        return "Exponents or signs differ !"
    # position of the MSB of the difference
    n = max(1, abs(a - b).bit_length())
    return f"Mantissas differ in {n:2d} bits"
