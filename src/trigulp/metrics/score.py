# metrics/score.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..core.formats import DOUBLE, FloatFormat
from ..core.types import FunctionComparison
from .ulp import ulp_distance

# Needs to be positive and close to zero.
QUIET_THRESHOLD = 1e-7


def ieee_div(num: float, den: float) -> float:
    """num / den with IEEE-754 semantics for a zero denominator (signed inf, or NaN for 0/0)."""
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


@dataclass(frozen=True)
class Score:
    """
    iscore: ULP improvement of new over old, measured against the accurate value
    fscore: iscore relative to the new value's own ULP error
    """
    iscore: int
    fscore: float


def _errors(v: FunctionComparison, fmt: FloatFormat):
    if v.accurate is None:
        raise ValueError("comparison has no accurate value")
    return abs(ulp_distance(v.old, v.accurate, fmt)), abs(ulp_distance(v.new, v.accurate, fmt))


def score(v: FunctionComparison, fmt: FloatFormat = DOUBLE) -> Score:
    ac, bc = _errors(v, fmt)
    iscore = ac - bc
    return Score(iscore=iscore, fscore=ieee_div(float(iscore), float(bc)))


def is_interesting(old, new, fmt: FloatFormat = DOUBLE) -> bool:
    """Old and new differ by at least one ULP (signed zeros do not count)."""
    return ulp_distance(old, new, fmt) != 0


def quietly_interesting(
    v: FunctionComparison,
    fmt: FloatFormat = DOUBLE,
    threshold: float = QUIET_THRESHOLD,
) -> Optional[str]:
    """'better' / 'worse' when one side's relative advantage exceeds `threshold`, else None."""
    ac, bc = _errors(v, fmt)
    if ieee_div(float(ac - bc), float(bc)) > threshold:
        return "better"
    if ieee_div(float(bc - ac), float(ac)) > threshold:
        return "worse"
    return None
