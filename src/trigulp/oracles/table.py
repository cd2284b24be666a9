# oracles/table.py

"""
Recorded oracle answers.

A table is a CSV file with one row per (function, input) pair, values written
as hex floats so that a replay reproduces every bit:

  function,x,value
  sin,0x1.921fb54442d18p+1,0x1.1a62633145c07p-53
"""

from __future__ import annotations

import csv
import math
from typing import Dict, Iterable, Tuple

from ..core.errors import OracleError
from ..core.oracle import Oracle
from ..core.types import Function

Key = Tuple[Function, float]

_FIELDS = ["function", "x", "value"]


def load_table(path: str) -> Dict[Key, float]:
    table: Dict[Key, float] = {}
    try:
        with open(path, newline="", encoding="utf-8") as f:
            for lineno, row in enumerate(csv.DictReader(f), start=2):
                try:
                    key = (Function(row["function"]), float.fromhex(row["x"]))
                    table[key] = float.fromhex(row["value"])
                except (KeyError, ValueError, TypeError) as e:
                    raise OracleError(f"{path}:{lineno}: bad oracle table row: {e}") from e
    except OSError as e:
        raise OracleError(f"cannot read oracle table {path}: {e}") from e
    return table


def save_table(path: str, rows: Iterable[Tuple[Key, float]]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(_FIELDS)
        for (fn, x), v in rows:
            w.writerow([fn.value, float(x).hex(), float(v).hex()])


class TableOracle:
    """Answers from a recorded table; inputs that were never recorded give NaN."""

    def __init__(self, table: Dict[Key, float]):
        self.table = dict(table)
        self.misses = 0

    @classmethod
    def load(cls, path: str) -> "TableOracle":
        return cls(load_table(path))

    def evaluate(self, fn: Function, x: float) -> float:
        v = self.table.get((fn, float(x)))
        if v is None:
            self.misses += 1
            return math.nan
        return v

    def close(self) -> int:
        return 0


class RecordingOracle:
    """Forwards to another oracle and writes every answer to `path` on close()."""

    def __init__(self, inner: Oracle, path: str):
        self.inner = inner
        self.path = path
        self.answers: Dict[Key, float] = {}

    def evaluate(self, fn: Function, x: float) -> float:
        v = self.inner.evaluate(fn, x)
        self.answers[(fn, float(x))] = v
        return v

    def close(self) -> int:
        status = self.inner.close()
        save_table(self.path, self.answers.items())
        return status
