# report.py

"""
Text output of a measurement.

First section: one line per noticeably different point,

  verdict  x  function: description  ulp(old,new)  old  new  accurate

then the number of points per range, then for every function the
statistics of each range where old and new disagreed:

  lo hi
  improvements: count  max iscore  max fscore  quadratic mean fscore
  worsenings:   count  max iscore  max fscore  quadratic mean fscore
  arithmetic mean fscore
"""

from __future__ import annotations

import re
from typing import Dict, List, TextIO, Tuple

from .aggregate import MicroSummary, RangeSummary
from .core.errors import ReportFormatError
from .core.types import FUNCTIONS, Function
from .evaluator import Diagnostic


def _f(x) -> str:
    return f"{float(x):27.20e}"


def format_diagnostic(d: Diagnostic) -> str:
    return (
        f"{d.verdict:<6} {_f(d.x)} {d.fn.label:>3}: {d.about:>30} {d.distance:22d} "
        f"{_f(d.old)} {_f(d.new)} {_f(d.accurate)}"
    )


def _micro(m: MicroSummary) -> str:
    return f"{m.count:7d} {m.max:22d} {_f(m.max_fscore)} {_f(m.quadratic_mean)}"


def format_range(s: RangeSummary) -> str:
    lo, hi = s.limits
    return "\n".join([f"{_f(lo)} {_f(hi)}", _micro(s.improvements), _micro(s.worsenings), _f(s.mean)])


def write_diagnostic(out: TextIO, d: Diagnostic) -> None:
    out.write(format_diagnostic(d) + "\n")


def write_report(out: TextIO, points_per_range: int, summaries: Dict[Function, List[RangeSummary]]) -> None:
    out.write(f"\n\nPointsInOneRange: {points_per_range:5d}\n\n\n")
    for fn in FUNCTIONS:
        out.write(f"{fn.label:>3}:\n")
        for s in summaries.get(fn, []):
            out.write(format_range(s) + "\n\n")
        out.write("\n\n")


# --------------------------
# reading a saved report back
# --------------------------

_HEADER_RE = re.compile(r"^PointsInOneRange:\s*(\d+)\s*$")
_FUNC_RE = re.compile(r"^\s*(sin|cos|omc):\s*$")


def _floats(line: str, n: int, lineno: int) -> List[float]:
    parts = line.split()
    if len(parts) != n:
        raise ReportFormatError(f"line {lineno}: expected {n} fields, got {len(parts)}")
    try:
        return [float(p) for p in parts]
    except ValueError as e:
        raise ReportFormatError(f"line {lineno}: {e}") from e


def _parse_micro(line: str, lineno: int) -> MicroSummary:
    parts = line.split()
    if len(parts) != 4:
        raise ReportFormatError(f"line {lineno}: expected 4 fields, got {len(parts)}")
    try:
        return MicroSummary(int(parts[0]), int(parts[1]), float(parts[2]), float(parts[3]))
    except ValueError as e:
        raise ReportFormatError(f"line {lineno}: {e}") from e


def read_report(text: str) -> Tuple[int, Dict[Function, List[RangeSummary]]]:
    """Parse the final-report section (diagnostic lines before it are skipped)."""
    lines = text.splitlines()
    start = None
    points = 0
    for i, line in enumerate(lines):
        m = _HEADER_RE.match(line.strip())
        if m:
            start, points = i + 1, int(m.group(1))
            break
    if start is None:
        raise ReportFormatError("no 'PointsInOneRange:' header found")

    out: Dict[Function, List[RangeSummary]] = {fn: [] for fn in FUNCTIONS}
    current = None
    # group non-blank lines into blocks
    block: List[Tuple[int, str]] = []

    def flush() -> None:
        if not block:
            return
        if current is None:
            raise ReportFormatError(f"line {block[0][0]}: range entry before any function name")
        if len(block) != 4:
            raise ReportFormatError(f"line {block[0][0]}: range entry has {len(block)} lines, expected 4")
        (n0, l0), (n1, l1), (n2, l2), (n3, l3) = block
        lo, hi = _floats(l0, 2, n0)
        out[current].append(
            RangeSummary(
                limits=(lo, hi),
                improvements=_parse_micro(l1, n1),
                worsenings=_parse_micro(l2, n2),
                mean=_floats(l3, 1, n3)[0],
            )
        )
        block.clear()

    for i in range(start, len(lines)):
        line = lines[i]
        m = _FUNC_RE.match(line)
        if m:
            flush()
            current = Function(m.group(1))
            continue
        if not line.strip():
            flush()
            continue
        block.append((i + 1, line))
    flush()
    return points, out
