from __future__ import annotations

import math
from dataclasses import dataclass

from .core.errors import ConfigError
from .core.formats import FloatFormat, get_format
from .metrics.score import QUIET_THRESHOLD

POINTS_IN_ONE_RANGE = 32


@dataclass(frozen=True)
class RunConfig:
    """Sampling and scoring parameters of one measurement run."""
    bound: float = 4 * math.pi
    step: float = 0.03125
    points_per_range: int = POINTS_IN_ONE_RANGE
    precision: str = "double"
    quiet_threshold: float = QUIET_THRESHOLD

    def __post_init__(self) -> None:
        if not (math.isfinite(self.bound) and self.bound >= 0):
            raise ConfigError("bound must be finite and non-negative")
        if not (math.isfinite(self.step) and self.step > 0):
            raise ConfigError("step must be finite and positive")
        if self.points_per_range < 1:
            raise ConfigError("points_per_range must be at least 1")
        if not self.quiet_threshold > 0:
            raise ConfigError("quiet_threshold must be positive")
        get_format(self.precision)

    @property
    def fmt(self) -> FloatFormat:
        return get_format(self.precision)
