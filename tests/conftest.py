import math
from typing import Callable, Dict, List, Tuple

import pytest

from trigulp.core.types import Function


def _exact(fn: Function, x: float) -> float:
    if fn is Function.SIN:
        return math.sin(x)
    if fn is Function.COS:
        return math.cos(x)
    return 2.0 * math.sin(x / 2.0) ** 2


class StubOracle:
    """Deterministic oracle for tests: answers with `answer(fn, x)` and records every call."""

    def __init__(self, answer: Callable[[Function, float], float] = _exact):
        self.answer = answer
        self.calls: List[Tuple[Function, float]] = []
        self.closed = False

    def evaluate(self, fn: Function, x: float) -> float:
        self.calls.append((fn, x))
        return self.answer(fn, x)

    def close(self) -> int:
        self.closed = True
        return 0

    def counts(self) -> Dict[Function, int]:
        out = {fn: 0 for fn in Function}
        for fn, _ in self.calls:
            out[fn] += 1
        return out


@pytest.fixture
def stub_oracle():
    return StubOracle()


def up(x: float, n: int = 1) -> float:
    """n representable doubles above (n < 0: below) x."""
    target = math.inf if n > 0 else -math.inf
    for _ in range(abs(n)):
        x = math.nextafter(x, target)
    return x
