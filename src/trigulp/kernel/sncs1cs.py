# kernel/sncs1cs.py

"""
Joint sine, cosine and one-minus-cosine.

Derived from the Cephes Math Library sin/cos (Stephen L. Moshier), keeping
its polynomials, but producing all three values from one reduced angle so
that 1 - cos(x) does not suffer the cancellation of computing it from cos(x).

Accurate for moderate |x| only: once x * 4/pi no longer holds the octant
index exactly the reduction degrades. Huge arguments would need a
Payne-Hanek style reduction.
"""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np

from ..core.types import SinCosOmc
from .octant import reduce_angle, reduce_octant
from .params import DOUBLE_PARAMS, KernelParams


def _horner(coeffs: Sequence[Any], zz: Any) -> Any:
    acc = coeffs[0]
    for c in coeffs[1:]:
        acc = acc * zz + c
    return acc


def sncs1cs(x: Any, params: KernelParams = DOUBLE_PARAMS) -> SinCosOmc:
    """Return (sin, cos, 1 - cos) of x in the working format of `params`."""
    fmt = params.fmt
    x = fmt.cast(x)
    one = params.one

    # +-0: keep the sign of zero in the sine
    if x == 0:
        return SinCosOmc(x, one, fmt.cast(0.0))
    if math.isnan(x):
        return SinCosOmc(x, x, x)
    if math.isinf(x):
        # invalid operation, like the library functions
        with np.errstate(invalid="ignore"):
            nan = x - x
        return SinCosOmc(nan, nan, nan)

    ax = abs(x)
    octant = reduce_octant(ax, x < 0, params)
    z = reduce_angle(ax, octant.y, params)
    zz = z * z

    s = z + zz * z * _horner(params.sin_coeffs, zz)
    omc = params.half * zz - zz * zz * _horner(params.omc_coeffs, zz)

    if octant.swapped:
        c = s if octant.csign > 0 else -s
        s = one - omc
        omc = one - c
    elif octant.csign < 0:
        c = omc - one
        omc = one - c
    else:
        # omc is the polynomial value here, the accurate one
        c = one - omc

    if octant.sign < 0:
        s = -s
    return SinCosOmc(s, c, omc)
