from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from .core.formats import DOUBLE, SINGLE, FloatFormat
from .core.types import SinCosOmc


@dataclass(frozen=True)
class ReferenceLibrary:
    """
    The general-purpose implementation the kernel is compared against.

    It has no native 1 - cos, so that value is derived from its cosine and
    carries the cancellation error of the subtraction.
    """
    name: str
    fmt: FloatFormat
    sin: Callable[[Any], Any]
    cos: Callable[[Any], Any]

    def triple(self, x: Any) -> SinCosOmc:
        s = self.sin(x)
        c = self.cos(x)
        return SinCosOmc(s, c, self.fmt.cast(1.0) - c)


LIBM = ReferenceLibrary("libm", DOUBLE, math.sin, math.cos)
NUMPY_SINGLE = ReferenceLibrary("numpy-float32", SINGLE, np.sin, np.cos)


def reference_for(fmt: FloatFormat) -> ReferenceLibrary:
    return NUMPY_SINGLE if fmt is SINGLE else LIBM
