# sampling.py

from __future__ import annotations

from typing import Any, Iterator, List, Tuple

from .core.formats import DOUBLE, FloatFormat


def range_count(bound: float, step: float) -> int:
    """Number of ranges covering [-bound, bound] (with half a unit of slack) at `step` spacing."""
    return 2 * int((bound + 0.5) / step + 0.5) + 1


def range_starts(bound: float, step: float, fmt: FloatFormat = DOUBLE) -> List[Any]:
    """Step-spaced first points of every range, ascending from -bound."""
    return [fmt.cast(-bound + step * i) for i in range(range_count(bound, step))]


def range_points(start: Any, n: int, fmt: FloatFormat = DOUBLE) -> Tuple[Any, ...]:
    """`n` consecutive representable values beginning at `start`."""
    pts = []
    x = fmt.cast(start)
    for _ in range(n):
        pts.append(x)
        x = fmt.next_up(x)
    return tuple(pts)


def iter_ranges(
    bound: float,
    step: float,
    points_per_range: int = 32,
    fmt: FloatFormat = DOUBLE,
) -> Iterator[Tuple[int, Tuple[Any, ...]]]:
    """Yield (index, points) for every range in order; identical inputs give identical output."""
    for i, start in enumerate(range_starts(bound, step, fmt)):
        yield i, range_points(start, points_per_range, fmt)
