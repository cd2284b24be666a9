from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, TextIO

from .aggregate import Aggregator, RangeSummary
from .config import RunConfig
from .core.oracle import Oracle
from .core.types import Function, Range
from .evaluator import Diagnostic, evaluator_for
from .report import write_diagnostic, write_report
from .sampling import iter_ranges


@dataclass
class MeasurementResult:
    config: RunConfig
    diagnostics: List[Diagnostic] = field(default_factory=list)
    summaries: Dict[Function, List[RangeSummary]] = field(default_factory=dict)
    ranges: List[Range] = field(default_factory=list)
    oracle_calls: int = 0

    def write(self, out: TextIO) -> None:
        for d in self.diagnostics:
            write_diagnostic(out, d)
        write_report(out, self.config.points_per_range, self.summaries)


def run_measurement(
    oracle: Oracle,
    config: RunConfig = RunConfig(),
    *,
    keep_ranges: bool = False,
    on_diagnostic: Optional[Callable[[Diagnostic], None]] = None,
) -> MeasurementResult:
    """
    Sample the domain range by range, compare reference and kernel, consult
    the oracle where they disagree and aggregate the scores.

    The oracle is not closed here.
    """
    fmt = config.fmt
    result = MeasurementResult(config=config)

    def emit(d: Diagnostic) -> None:
        result.diagnostics.append(d)
        if on_diagnostic is not None:
            on_diagnostic(d)

    ev = evaluator_for(oracle, fmt, quiet_threshold=config.quiet_threshold, on_diagnostic=emit)
    agg = Aggregator(fmt)
    for i, points in iter_ranges(config.bound, config.step, config.points_per_range, fmt):
        r = ev.check_range(i, points)
        agg.add_range(r)
        if keep_ranges:
            result.ranges.append(r)

    result.summaries = agg.finalize()
    result.oracle_calls = ev.oracle_calls
    return result
