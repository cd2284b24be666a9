#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
import sys
from typing import Dict, List, Optional, Tuple

from trigulp.aggregate import RangeSummary
from trigulp.core.errors import ReportFormatError
from trigulp.core.types import FUNCTIONS, Function
from trigulp.report import read_report


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install numpy') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "trigulp[diagnostics]"') from e


def build_series(np, reports: List[RangeSummary]) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray", "np.ndarray"]:
    """Range midpoints, improvement counts, worsening counts and mean fscore (non-finite means dropped to NaN)."""
    mid = np.array([0.5 * (r.limits[0] + r.limits[1]) for r in reports], dtype=float)
    better = np.array([r.improvements.count for r in reports], dtype=int)
    worse = np.array([r.worsenings.count for r in reports], dtype=int)
    mean = np.array([r.mean if math.isfinite(r.mean) else math.nan for r in reports], dtype=float)
    return mid, better, worse, mean


def totals(summaries: Dict[Function, List[RangeSummary]]) -> Dict[Function, Tuple[int, int]]:
    """Total (improvements, worsenings) per function."""
    return {
        fn: (sum(r.improvements.count for r in reps), sum(r.worsenings.count for r in reps))
        for fn, reps in summaries.items()
    }


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot per-range improvement/worsening counts and mean fscore from a saved report.")
    p.add_argument("report", help="Report file written by `trigulp run --out`")
    p.add_argument("--out", default="ranges.png")
    p.add_argument("--title", default="Kernel vs reference library, per range")
    p.add_argument("--dpi", type=int, default=150)
    args = p.parse_args(argv)

    try:
        with open(args.report, encoding="utf-8") as f:
            points, summaries = read_report(f.read())
    except (OSError, ReportFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for fn, (b, w) in totals(summaries).items():
        print(f"{fn.label}: {len(summaries[fn])} ranges, {b} better, {w} worse")

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, axes = plt.subplots(len(FUNCTIONS), 1, figsize=(11, 3.2 * len(FUNCTIONS)), sharex=True)
    for ax, fn in zip(axes, FUNCTIONS):
        reps = summaries[fn]
        ax.set_ylabel(f"{fn.label}\npoints")
        ax.grid(True, alpha=0.25)
        if not reps:
            ax.text(0.5, 0.5, "no differences", transform=ax.transAxes, ha="center", va="center")
            continue
        mid, better, worse, mean = build_series(np, reps)
        width = 0.8 * float(np.min(np.diff(mid))) if len(mid) > 1 else 0.02
        ax.bar(mid, better, width=width, color="tab:green", alpha=0.8, label="better")
        ax.bar(mid, -worse, width=width, color="tab:red", alpha=0.8, label="worse")
        ax.axhline(0, color="0.3", lw=0.8)

        ax2 = ax.twinx()
        ax2.plot(mid, mean, ".", ms=3, color="0.15", label="mean fscore")
        ax2.set_ylabel("mean fscore")
        ax.legend(loc="upper left", fontsize=8)

    axes[-1].set_xlabel(f"x (ranges of {points} points)")
    fig.suptitle(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=args.dpi)
    print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
