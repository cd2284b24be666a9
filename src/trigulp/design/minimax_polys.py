# design/minimax_polys.py

from __future__ import annotations

import argparse
import math
import sys
from typing import List, Optional, Sequence, Tuple

from trigulp.kernel.params import DOUBLE_PARAMS, SINGLE_PARAMS, KernelParams


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install numpy') from e


def _need_scipy():
    try:
        import scipy.optimize as opt
        return opt
    except ImportError as e:
        raise RuntimeError('Need scipy. Install: pip install "trigulp[design]"') from e


def _model(np, kind: str, z):
    """Exact function, its leading term, the first power of the correction and its sign."""
    if kind == "sin":
        return np.sin(z), z, 3, 1.0
    if kind == "omc":
        return 2.0 * np.sin(z / 2.0) ** 2, 0.5 * z * z, 4, -1.0
    raise ValueError(f"unknown kind '{kind}'")


def kernel_max_error(kind: str, coeffs: Sequence[float], interval: Tuple[float, float] = (0.0, math.pi / 4), num_points: int = 4001) -> float:
    """
    Maximum absolute error on `interval` of the kernel's approximation with
    correction coefficients `coeffs` (highest degree first, as in KernelParams).
    """
    np = _need_numpy()
    z = np.linspace(interval[0], interval[1], num_points)
    exact, lead, _, sgn = _model(np, kind, z)
    zz = z * z
    acc = np.full_like(z, float(coeffs[0]))
    for c in coeffs[1:]:
        acc = acc * zz + float(c)
    corr = zz * z * acc if kind == "sin" else zz * zz * acc
    return float(np.max(np.abs(exact - (lead + sgn * corr))))


def fit_correction(
    kind: str,
    n_terms: int,
    interval: Tuple[float, float] = (0.0, math.pi / 4),
    num_points: int = 4001,
    refine: bool = True,
) -> Tuple[List[float], float]:
    """
    Fit the correction polynomial of the kernel for `kind` ("sin" or "omc").

    Least squares gives the initial guess; with `refine`, Powell's method then
    minimizes the maximum absolute error. Returns (coefficients highest degree
    first, max_error).
    """
    np = _need_numpy()

    z = np.linspace(interval[0], interval[1], num_points)
    exact, lead, p0, sgn = _model(np, kind, z)
    target = exact - lead
    powers = [p0 + 2 * k for k in range(n_terms)]
    A = np.vstack([sgn * z**p for p in powers]).T

    # 1. Initial Guess: Least Squares Fit
    c_init, _, _, _ = np.linalg.lstsq(A, target, rcond=None)

    # 2. Objective Function: Maximum Absolute Error (L-infinity norm)
    def cost(c) -> float:
        return float(np.max(np.abs(target - A @ c)))

    c = c_init
    if refine:
        opt = _need_scipy()
        res = opt.minimize(
            cost,
            c_init,
            method='Powell',
            options={'xtol': 1e-18, 'ftol': 1e-20, 'maxiter': 5000},
        )
        if cost(res.x) < cost(c_init):
            c = res.x

    # ascending powers -> Horner order
    coeffs = [float(v) for v in reversed(list(c))]
    return coeffs, cost(c)


def _table(lines: List[str], fitted: Sequence[float], kernel: Sequence[float]) -> None:
    lines.append(f"{'Term':<6} | {'Fitted (hex)':<25} | {'Fitted':<24} | {'Kernel':<24}")
    lines.append("-" * 95)
    n = len(kernel)
    for i, (a, b) in enumerate(zip(fitted, kernel)):
        lines.append(f"c[{n - 1 - i}]  | {float(a).hex():<25} | {a:+.17e} | {float(b):+.17e}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Refit the kernel's sine and 1-cos correction polynomials on [0, pi/4].")
    p.add_argument("--precision", choices=["double", "single"], default="double")
    p.add_argument("--terms", type=int, default=0, help="Number of coefficients (default: as in the kernel).")
    p.add_argument("--no-refine", action="store_true", help="Stop at the least squares fit.")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    params: KernelParams = SINGLE_PARAMS if args.precision == "single" else DOUBLE_PARAMS
    if args.terms < 0:
        print("Error: --terms must be non-negative.", file=sys.stderr)
        return 1

    lines = []
    lines.append(f"Kernel correction polynomials ({args.precision}) on [0, pi/4]")
    lines.append("=" * 95)

    for kind, kernel_coeffs in (("sin", params.sin_coeffs), ("omc", params.omc_coeffs)):
        n = args.terms or len(kernel_coeffs)
        fitted, err = fit_correction(kind, n, refine=not args.no_refine)
        kerr = kernel_max_error(kind, kernel_coeffs)
        lines.append(f"\n--- {kind}: {n} terms ---")
        lines.append(f"Fitted max abs error : {err:.8e}")
        lines.append(f"Kernel max abs error : {kerr:.8e}  ({len(kernel_coeffs)} terms)")
        lines.append("-" * 95)
        if n == len(kernel_coeffs):
            _table(lines, fitted, kernel_coeffs)
        else:
            for i, c in enumerate(fitted):
                lines.append(f"c[{n - 1 - i}]  | {float(c).hex():<25} | {c:+.17e}")

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
