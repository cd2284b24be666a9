# evaluator.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from .core.oracle import Oracle
from .core.types import FUNCTIONS, Function, FunctionComparison, PerFunction, Range
from .kernel.params import KernelParams, params_for
from .kernel.sncs1cs import sncs1cs
from .metrics.score import QUIET_THRESHOLD, is_interesting, quietly_interesting
from .metrics.ulp import about, ulp_distance
from .reference import ReferenceLibrary, reference_for


@dataclass(frozen=True)
class Diagnostic:
    """One point where old and new differ noticeably relative to the accurate value."""
    verdict: str
    x: Any
    fn: Function
    about: str
    distance: int
    old: Any
    new: Any
    accurate: Any


class Evaluator:
    """
    Fills the comparisons of each range: reference vs kernel for every point,
    and the oracle value for the functions where the two disagree.
    """

    def __init__(
        self,
        oracle: Oracle,
        params: KernelParams,
        *,
        reference: Optional[ReferenceLibrary] = None,
        quiet_threshold: float = QUIET_THRESHOLD,
        on_diagnostic: Optional[Callable[[Diagnostic], None]] = None,
    ):
        self.oracle = oracle
        self.params = params
        self.fmt = params.fmt
        self.reference = reference if reference is not None else reference_for(self.fmt)
        self.quiet_threshold = quiet_threshold
        self.on_diagnostic = on_diagnostic
        self.oracle_calls = 0

    def _accurate(self, fn: Function, x: Any) -> Any:
        self.oracle_calls += 1
        return self.fmt.cast(self.oracle.evaluate(fn, float(x)))

    def check_point(self, x: Any) -> PerFunction[FunctionComparison]:
        old = self.reference.triple(x)
        new = sncs1cs(x, self.params)

        out = {}
        for fn in FUNCTIONS:
            o, n = old[fn], new[fn]
            if not is_interesting(o, n, self.fmt):
                out[fn.value] = FunctionComparison(o, n)
                continue
            v = FunctionComparison(o, n, self._accurate(fn, x))
            out[fn.value] = v
            verdict = quietly_interesting(v, self.fmt, self.quiet_threshold)
            if verdict is not None and self.on_diagnostic is not None:
                self.on_diagnostic(
                    Diagnostic(
                        verdict=verdict,
                        x=x,
                        fn=fn,
                        about=about(o, n, self.fmt),
                        distance=abs(ulp_distance(o, n, self.fmt)),
                        old=o,
                        new=n,
                        accurate=v.accurate,
                    )
                )
        return PerFunction(**out)

    def check_range(self, index: int, points: Sequence[Any]) -> Range:
        r = Range(index=index, points=tuple(points))
        for x in r.points:
            r.comparisons.append(self.check_point(x))
        return r


def evaluator_for(oracle: Oracle, fmt, **kwargs) -> Evaluator:
    return Evaluator(oracle, params_for(fmt), **kwargs)
