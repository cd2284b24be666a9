# design/pi4_split.py

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from trigulp.core.formats import FloatFormat
from trigulp.kernel.params import DOUBLE_PARAMS, SINGLE_PARAMS, KernelParams


def _need_mpmath():
    try:
        import mpmath
        return mpmath
    except ImportError as e:
        raise RuntimeError('Need mpmath. Install: pip install "trigulp[design]"') from e


class SplitPart:
    def __init__(self, name: str, value: float, fmt: FloatFormat):
        self.name = name
        self.value = value
        self.hex_str = float(value).hex()
        self.bits = significant_bits(value, fmt)


def significant_bits(x: float, fmt: FloatFormat) -> int:
    """Number of significand bits up to the last set one (implicit bit included)."""
    u = fmt.to_bits(fmt.cast(x))
    m = u & ((1 << fmt.mantissa_bits) - 1)
    if (u & ~fmt.sign_bit) >> fmt.mantissa_bits:
        m |= 1 << fmt.mantissa_bits
    if m == 0:
        return 0
    tz = (m & -m).bit_length() - 1
    return fmt.mantissa_bits + 1 - tz


def split_pi4(parts: Sequence[int], fmt: FloatFormat, prec: int = 256) -> List[float]:
    """
    Split pi/4 into len(parts) floats: each but the last is truncated to
    parts[i] significant bits, so that y*part is exact for small integers y;
    the last part is the rounded remainder.
    """
    mpmath = _need_mpmath()
    ctx = mpmath.MPContext()
    ctx.prec = prec
    rest = ctx.pi / 4
    out: List[float] = []
    for i, nbits in enumerate(parts):
        if i == len(parts) - 1:
            out.append(float(fmt.cast(float(rest))))
            break
        m, e = ctx.frexp(rest)
        head = ctx.ldexp(ctx.floor(ctx.ldexp(m, nbits)), e - nbits)
        out.append(float(fmt.cast(float(head))))
        rest = rest - ctx.mpf(out[-1])
    return out


def split_residual(values: Sequence[float], prec: int = 256) -> float:
    """|pi/4 - sum(values)| evaluated exactly enough to see the error of the split."""
    mpmath = _need_mpmath()
    ctx = mpmath.MPContext()
    ctx.prec = prec
    s = ctx.mpf(0)
    for v in values:
        s += ctx.mpf(float(v))
    return float(abs(ctx.pi / 4 - s))


def describe(params: KernelParams) -> List[SplitPart]:
    return [SplitPart(f"DP{i + 1}", float(v), params.fmt) for i, v in enumerate(params.dp)]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Inspect or generate the extended-precision split of pi/4 used in range reduction.")
    p.add_argument("--precision", choices=["double", "single"], default="double")
    p.add_argument("--bits", type=str, default="", help="Generate a new split, e.g. '27,27' (head widths; a rounded tail is added).")
    p.add_argument("--out-txt", type=str, default="", help="Optional file to save the output table.")
    args = p.parse_args(argv)

    params = SINGLE_PARAMS if args.precision == "single" else DOUBLE_PARAMS
    fmt = params.fmt

    lines = []
    lines.append(f"pi/4 split for {fmt.name} range reduction")
    lines.append("=" * 90)

    tables = [("Kernel constants", describe(params))]
    if args.bits:
        try:
            widths = [int(b) for b in args.bits.split(",") if b.strip()]
        except ValueError:
            print(f"Error: bad --bits '{args.bits}'", file=sys.stderr)
            return 1
        if not widths or any(w < 1 or w > fmt.mantissa_bits + 1 for w in widths):
            print(f"Error: widths must be in 1..{fmt.mantissa_bits + 1}", file=sys.stderr)
            return 1
        values = split_pi4(widths + [fmt.mantissa_bits + 1], fmt)
        tables.append(("Generated split", [SplitPart(f"DP{i + 1}", v, fmt) for i, v in enumerate(values)]))

    for title, rows in tables:
        lines.append(f"\n--- {title} ---")
        lines.append(f"{'Part':<6} | {'Hex-Float (IEEE 754)':<25} | {'Bits':>4} | {'Decimal Value'}")
        lines.append("-" * 90)
        for r in rows:
            lines.append(f"{r.name:<6} | {r.hex_str:<25} | {r.bits:>4} | {r.value:.20e}")
        lines.append(f"Residual |pi/4 - sum| = {split_residual([r.value for r in rows]):.6e}")

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
