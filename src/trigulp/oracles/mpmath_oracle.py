from __future__ import annotations

import math

from ..core.errors import OracleUnavailableError
from ..core.types import Function


def _need_mpmath():
    try:
        import mpmath
        return mpmath
    except ImportError as e:
        raise OracleUnavailableError('Need mpmath. Install: pip install "trigulp[mpmath]"') from e


class MpmathOracle:
    """
    In-process oracle using mpmath at a fixed binary precision.

    1 - cos(x) is evaluated as 2*sin(x/2)**2, which has no cancellation.
    """

    def __init__(self, bits: int = 256):
        mpmath = _need_mpmath()
        self.ctx = mpmath.MPContext()
        self.ctx.prec = bits
        self.bits = bits

    def evaluate(self, fn: Function, x: float) -> float:
        if not math.isfinite(x):
            return math.nan
        ctx = self.ctx
        t = ctx.mpf(x)
        if fn is Function.SIN:
            v = ctx.sin(t)
        elif fn is Function.COS:
            v = ctx.cos(t)
        else:
            v = 2 * ctx.sin(t / 2) ** 2
        return float(v)

    def close(self) -> int:
        return 0
