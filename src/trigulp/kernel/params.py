# kernel/params.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from ..core.formats import DOUBLE, SINGLE, FloatFormat


@dataclass(frozen=True)
class KernelParams:
    """
    Constants of the joint sin/cos/1-cos kernel for one floating-point format.

    The polynomial coefficients and the three-part pi/4 split are Stephen
    Moshier's Cephes values (sin.c/cos.c for double, sinf.c/cosf.c for single).
    Coefficients are stored highest degree first, for Horner evaluation in z**2:

      sin(z) ~ z + z**3 * S(z**2)
      1 - cos(z) ~ z**2/2 - z**4 * C(z**2)

    All constants are pre-cast to the working type so single-precision
    evaluation never widens to double.
    """
    fmt: FloatFormat
    four_over_pi: Any
    dp: Tuple[Any, Any, Any]
    sin_coeffs: Tuple[Any, ...]
    omc_coeffs: Tuple[Any, ...]

    @property
    def one(self) -> Any:
        return self.fmt.cast(1.0)

    @property
    def half(self) -> Any:
        return self.fmt.cast(0.5)

    @classmethod
    def build(cls, fmt: FloatFormat, four_over_pi: float, dp, sin_coeffs, omc_coeffs) -> "KernelParams":
        c = fmt.cast
        return cls(
            fmt=fmt,
            four_over_pi=c(four_over_pi),
            dp=tuple(c(v) for v in dp),
            sin_coeffs=tuple(c(v) for v in sin_coeffs),
            omc_coeffs=tuple(c(v) for v in omc_coeffs),
        )


DOUBLE_PARAMS = KernelParams.build(
    DOUBLE,
    four_over_pi=1.27323954473516268615,
    dp=(
        7.85398125648498535156e-1,
        3.77489470793079817668e-8,
        2.69515142907905952645e-15,
    ),
    sin_coeffs=(
        1.58962301576546568060e-10,
        -2.50507477628578072866e-8,
        2.75573136213857245213e-6,
        -1.98412698295895385996e-4,
        8.33333333332211858878e-3,
        -1.66666666666666307295e-1,
    ),
    omc_coeffs=(
        -1.13585365213876817300e-11,
        2.08757008419747316778e-9,
        -2.75573141792967388112e-7,
        2.48015872888517045348e-5,
        -1.38888888888730564116e-3,
        4.16666666666665929218e-2,
    ),
)

SINGLE_PARAMS = KernelParams.build(
    SINGLE,
    four_over_pi=1.27323954473516,
    dp=(
        0.78515625,
        2.4187564849853515625e-4,
        3.77489497744594108e-8,
    ),
    sin_coeffs=(
        -1.9515295891e-4,
        8.3321608736e-3,
        -1.6666654611e-1,
    ),
    omc_coeffs=(
        2.443315711809948e-5,
        -1.388731625493765e-3,
        4.166664568298827e-2,
    ),
)


def params_for(fmt: FloatFormat) -> KernelParams:
    if fmt is SINGLE:
        return SINGLE_PARAMS
    return DOUBLE_PARAMS
