"""Diagnostics package.

- range_plot: per-range statistics of a saved `trigulp run` report (needs matplotlib)
"""

__all__ = ["range_plot"]
