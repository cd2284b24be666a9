from __future__ import annotations
from typing import Protocol

from .types import Function

class Oracle(Protocol):
    """
    High-precision evaluator used as ground truth.

    evaluate() never raises for a per-call problem: it returns NaN instead.
    close() returns 0 on a clean shutdown.
    """
    def evaluate(self, fn: Function, x: float) -> float: ...
    def close(self) -> int: ...
