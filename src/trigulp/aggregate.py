# aggregate.py

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .core.formats import DOUBLE, FloatFormat
from .core.types import FUNCTIONS, Function, Range
from .metrics.score import Score, score


@dataclass(frozen=True)
class MicroSummary:
    count: int
    max: int
    max_fscore: float
    quadratic_mean: float


@dataclass(frozen=True)
class RangeSummary:
    """Finalized statistics of one range for one function."""
    limits: Tuple[Any, Any]
    improvements: MicroSummary
    worsenings: MicroSummary
    mean: float


@dataclass
class MicroReport:
    """Statistics over the improvements (or the worsenings) of one range."""
    count: int = 0
    max: int = 0            # iscore of largest magnitude, signed
    max_fscore: float = 0.0  # fscore of largest magnitude, signed
    sum_squares: float = 0.0

    def update(self, iscore: int, fscore: float) -> None:
        self.count += 1
        self.sum_squares += fscore * fscore
        if (0 <= iscore and self.max < iscore) or (iscore <= 0 and iscore <= self.max):
            self.max = iscore
        if abs(self.max_fscore) < abs(fscore):
            self.max_fscore = fscore

    @property
    def quadratic_mean(self) -> float:
        if self.count == 0:
            return math.nan
        return math.sqrt(self.sum_squares / self.count)

    def summary(self) -> "MicroSummary":
        return MicroSummary(self.count, self.max, self.max_fscore, self.quadratic_mean)


@dataclass
class RangeReport:
    """
    Per-function statistics of one range, kept only when at least one
    point of the range scored nonzero.
    """
    limits: Tuple[Any, Any]
    improvements: MicroReport = field(default_factory=MicroReport)
    worsenings: MicroReport = field(default_factory=MicroReport)
    fscore_sum: float = 0.0

    def add(self, s: Score) -> None:
        if s.iscore > 0:
            self.improvements.update(s.iscore, s.fscore)
        else:
            self.worsenings.update(s.iscore, s.fscore)
        self.fscore_sum += s.fscore

    @property
    def count(self) -> int:
        return self.improvements.count + self.worsenings.count

    @property
    def mean(self) -> float:
        """Arithmetic mean of fscore over all contributing points."""
        if self.count == 0:
            return math.nan
        return self.fscore_sum / self.count

    def summary(self) -> "RangeSummary":
        return RangeSummary(
            limits=self.limits,
            improvements=self.improvements.summary(),
            worsenings=self.worsenings.summary(),
            mean=self.mean,
        )


def range_report(r: Range, fn: Function, fmt: FloatFormat = DOUBLE) -> Optional[RangeReport]:
    """Fold one function's comparisons in a range; None when nothing scored."""
    rep: Optional[RangeReport] = None
    for point in r.comparisons:
        v = point[fn]
        # Skip points without a change.
        if v.is_null:
            continue
        s = score(v, fmt)
        # Skip points without a relevant change.
        if s.iscore == 0:
            continue
        if rep is None:
            rep = RangeReport(limits=r.limits)
        rep.add(s)
    return rep


class Aggregator:
    """Streams ranges in order and keeps an append-only list of reports per function."""

    def __init__(self, fmt: FloatFormat = DOUBLE):
        self.fmt = fmt
        self.by_function: Dict[Function, List[RangeReport]] = {fn: [] for fn in FUNCTIONS}

    def add_range(self, r: Range) -> None:
        for fn in FUNCTIONS:
            rep = range_report(r, fn, self.fmt)
            if rep is not None:
                self.by_function[fn].append(rep)

    def extend(self, ranges: Iterable[Range]) -> "Aggregator":
        for r in ranges:
            self.add_range(r)
        return self

    def reports(self, fn: Function) -> List[RangeReport]:
        return self.by_function[fn]

    def finalize(self) -> Dict[Function, List[RangeSummary]]:
        return {fn: [rep.summary() for rep in reps] for fn, reps in self.by_function.items()}
