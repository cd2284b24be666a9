# core/formats.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from .errors import ConfigError


@dataclass(frozen=True)
class FloatFormat:
    """
    IEEE-754 binary format the measurement works in.

    `dtype` / `uint_dtype` are the numpy types used to reinterpret values as
    same-width unsigned integers; `sign_exponent_mask` covers the sign bit and
    the whole exponent field.
    """
    name: str
    width: int
    dtype: Any
    uint_dtype: Any
    sign_exponent_mask: int

    @property
    def sign_bit(self) -> int:
        return 1 << (self.width - 1)

    @property
    def mantissa_bits(self) -> int:
        return 52 if self.width == 64 else 23

    @property
    def max_distance(self) -> int:
        """Sentinel distance for NaN operands: the largest signed value of the width."""
        return (1 << (self.width - 1)) - 1

    def cast(self, x) -> Any:
        if self.dtype is np.float64:
            return float(x)
        return self.dtype(x)

    def to_bits(self, x) -> int:
        return int(np.asarray(x, dtype=self.dtype).view(self.uint_dtype).item())

    def from_bits(self, u: int) -> Any:
        return self.cast(np.asarray(u, dtype=self.uint_dtype).view(self.dtype).item())

    def next_up(self, x) -> Any:
        """Adjacent representable value towards +inf."""
        return self.cast(np.nextafter(self.dtype(x), self.dtype(np.inf)))


DOUBLE = FloatFormat(
    name="double",
    width=64,
    dtype=np.float64,
    uint_dtype=np.uint64,
    sign_exponent_mask=0xFFF0000000000000,
)

SINGLE = FloatFormat(
    name="single",
    width=32,
    dtype=np.float32,
    uint_dtype=np.uint32,
    sign_exponent_mask=0xFF800000,
)

FORMATS: Dict[str, FloatFormat] = {f.name: f for f in (DOUBLE, SINGLE)}


def get_format(name: str) -> FloatFormat:
    if name not in FORMATS:
        raise ConfigError(f"Unknown precision '{name}'. Available: {sorted(FORMATS)}")
    return FORMATS[name]
