from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .params import KernelParams


@dataclass(frozen=True)
class Octant:
    """
    Octant bookkeeping for one kernel call.

    j:     octant relative index in 0..3 (always even after rounding the odd octants up)
    y:     multiple of pi/4 subtracted from |x|, in the working type
    sign:  sign applied to the final sine
    csign: sign of the cosine
    """
    j: int
    y: Any
    sign: int
    csign: int

    @property
    def swapped(self) -> bool:
        """Sine and cosine trade polynomials (the angle sits near an odd multiple of pi/2)."""
        return self.j == 1 or self.j == 2


def reduce_octant(ax: Any, negative: bool, params: KernelParams) -> Octant:
    """Octant of the non-negative argument `ax`; `negative` is the sign of the original input."""
    n = int(ax * params.four_over_pi)
    # map zeros to origin
    if n & 1:
        n += 1
    y = params.fmt.cast(n)

    j = n & 7  # one full turn
    sign = -1 if negative else 1
    csign = 1
    # reflect in x axis
    if j > 3:
        sign, csign, j = -sign, -csign, j - 4
    if j > 1:
        csign = -csign
    return Octant(j=j, y=y, sign=sign, csign=csign)


def reduce_angle(ax: Any, y: Any, params: KernelParams) -> Any:
    """Extended precision modular arithmetic: ax - y*pi/4 with a three-part pi/4."""
    dp1, dp2, dp3 = params.dp
    return ((ax - y * dp1) - y * dp2) - y * dp3
