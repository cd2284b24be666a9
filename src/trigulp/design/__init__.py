"""Kernel design tools (optional numpy/scipy/mpmath extras)."""

__all__ = ["minimax_polys", "pi4_split"]
