from __future__ import annotations

import argparse
import importlib
import inspect
import math
import sys
from typing import Optional, TextIO


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _make_oracle(args):
    from trigulp.oracles import FricasConfig, FricasOracle, MpmathOracle, RecordingOracle, TableOracle

    if args.oracle == "table":
        if not args.table:
            raise SystemExit("--oracle table needs --table PATH")
        oracle = TableOracle.load(args.table)
    elif args.oracle == "mpmath":
        oracle = MpmathOracle(bits=args.bits if args.bits is not None else 256)
    else:
        cfg = FricasConfig(
            executable=args.fricas,
            lib_dir=args.fricas_lib_dir,
            bits=args.bits if args.bits is not None else 32768,
            output_digits=args.digits,
            banner_lines=args.banner_lines,
        )
        oracle = FricasOracle(cfg)
    if args.record:
        oracle = RecordingOracle(oracle, args.record)
    return oracle


def cmd_run(argv: list[str]) -> int:
    from trigulp.api import run_measurement
    from trigulp.config import POINTS_IN_ONE_RANGE, RunConfig
    from trigulp.core.errors import TrigulpError
    from trigulp.report import write_diagnostic, write_report

    p = argparse.ArgumentParser(
        prog="trigulp run",
        description="Compare the sin/cos/1-cos kernel with the reference library against a high-precision oracle.",
    )
    p.add_argument("--precision", choices=["double", "single"], default="double")
    p.add_argument("--bound", type=float, default=4 * math.pi, help="Sample [-bound, bound] (default: 4*pi)")
    p.add_argument("--step", type=float, default=0.03125, help="Spacing of range starts (default: 1/32)")
    p.add_argument("--points-per-range", type=int, default=POINTS_IN_ONE_RANGE)
    p.add_argument("--threshold", type=float, default=1e-7, help="Relative advantage needed to print a point")
    p.add_argument("--oracle", choices=["fricas", "mpmath", "table"], default="fricas")
    p.add_argument("--fricas", default="fricas", help="FriCAS executable")
    p.add_argument("--fricas-lib-dir", default=None, help="Directory holding the CNF FriCAS package")
    p.add_argument("--bits", type=int, default=None, help="Oracle precision in bits (fricas: 32768, mpmath: 256)")
    p.add_argument("--digits", type=int, default=21, help="FriCAS outputGeneral digits")
    p.add_argument("--banner-lines", type=int, default=17, help="FriCAS start-up lines to discard")
    p.add_argument("--table", default="", help="CSV table to replay (--oracle table)")
    p.add_argument("--record", default="", help="Save every oracle answer to this CSV table")
    p.add_argument("--out", default="", help="Write the report here instead of stdout")
    args = p.parse_args(argv)

    try:
        config = RunConfig(
            bound=args.bound,
            step=args.step,
            points_per_range=args.points_per_range,
            precision=args.precision,
            quiet_threshold=args.threshold,
        )
        oracle = _make_oracle(args)
    except TrigulpError as e:
        print(f"trigulp: {e}", file=sys.stderr)
        return 1

    out: TextIO = open(args.out, "w", encoding="utf-8") if args.out else sys.stdout
    try:
        try:
            result = run_measurement(oracle, config, on_diagnostic=lambda d: write_diagnostic(out, d))
        finally:
            status = oracle.close()
            if status:
                print(f"trigulp: oracle exited with status {status}", file=sys.stderr)
        write_report(out, config.points_per_range, result.summaries)
    finally:
        if out is not sys.stdout:
            out.close()

    if args.out:
        print(f"Wrote {args.out}")
    return 0


def cmd_point(argv: list[str]) -> int:
    from trigulp.core.formats import get_format
    from trigulp.core.types import FUNCTIONS
    from trigulp.kernel import params_for, sncs1cs
    from trigulp.metrics.ulp import about, ulp_distance
    from trigulp.reference import reference_for

    p = argparse.ArgumentParser(prog="trigulp point", description="Kernel and reference values at one input.")
    p.add_argument("x", help="Input value (decimal or hex float)")
    p.add_argument("--precision", choices=["double", "single"], default="double")
    args = p.parse_args(argv)

    try:
        x = float.fromhex(args.x) if "0x" in args.x.lower() else float(args.x)
    except ValueError:
        raise SystemExit(f"not a number: {args.x}")

    fmt = get_format(args.precision)
    x = fmt.cast(x)
    new = sncs1cs(x, params_for(fmt))
    print(f"x = {float(x)!r}  ({float(x).hex()})  [{fmt.name}]")
    if not math.isfinite(x):
        for fn in FUNCTIONS:
            print(f"  {fn.label}: kernel {float(new[fn])!r}")
        return 0

    old = reference_for(fmt).triple(x)
    print(f"{'fn':<4} | {'reference':<25} | {'kernel':<25} | {'ulp':>6} | note")
    print("-" * 100)
    for fn in FUNCTIONS:
        o, n = old[fn], new[fn]
        d = ulp_distance(o, n, fmt)
        note = about(o, n, fmt) if d else ""
        print(f"{fn.label:<4} | {float(o)!r:<25} | {float(n)!r:<25} | {d:>6} | {note}")
    print()
    for fn in FUNCTIONS:
        print(f"{fn.label:<4} bits: reference {fmt.to_bits(old[fn]):#0{fmt.width // 4 + 2}x}  kernel {fmt.to_bits(new[fn]):#0{fmt.width // 4 + 2}x}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="trigulp", description="Accuracy checker for a joint sin/cos/1-cos kernel.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("run", help="Measure the kernel against the reference library over the sampled domain")
    sub.add_parser("point", help="Show kernel and reference values at one input")

    # design tools
    p_design = sub.add_parser("design", help="Kernel design tools")
    p_design.add_argument("tool", choices=["minimax", "pi4-split"], help="Which design tool to run")

    # diagnostics
    p_diag = sub.add_parser("diag", help="Plots from saved reports")
    p_diag.add_argument("tool", choices=["range-plot"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "run":
        return cmd_run(rest)

    if args.cmd == "point":
        return cmd_point(rest)

    if args.cmd == "design":
        tool_map = {
            "minimax": "trigulp.design.minimax_polys",
            "pi4-split": "trigulp.design.pi4_split",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "diag":
        tool_map = {
            "range-plot": "trigulp.diagnostics.range_plot",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
