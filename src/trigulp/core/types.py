from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class Function(Enum):
    """The three tracked functions, in report order."""
    SIN = "sin"
    COS = "cos"
    OMC = "omc"

    @property
    def label(self) -> str:
        return self.value


FUNCTIONS: Tuple[Function, ...] = (Function.SIN, Function.COS, Function.OMC)


@dataclass(frozen=True)
class PerFunction(Generic[T]):
    """One named slot per tracked function, indexed by `Function`."""
    sin: T
    cos: T
    omc: T

    def __getitem__(self, fn: Function) -> T:
        return getattr(self, fn.value)

    def items(self) -> Iterator[Tuple[Function, T]]:
        for fn in FUNCTIONS:
            yield fn, self[fn]


# Kernel and reference results share the per-function shape.
SinCosOmc = PerFunction


@dataclass(frozen=True)
class FunctionComparison:
    """
    old: reference-library value, new: kernel value,
    accurate: oracle value, fetched only when old and new differ.
    """
    old: float
    new: float
    accurate: Optional[float] = None

    @property
    def is_null(self) -> bool:
        return self.accurate is None or self.old == self.new


@dataclass
class Range:
    """Run of consecutive representable inputs sharing one report bucket."""
    index: int
    points: Tuple[float, ...]
    comparisons: List[PerFunction[FunctionComparison]] = field(default_factory=list)

    @property
    def limits(self) -> Tuple[float, float]:
        return (self.points[0], self.points[-1])

    def __len__(self) -> int:
        return len(self.points)
