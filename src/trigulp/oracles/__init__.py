"""Oracle backends.

- fricas: external FriCAS process (needs `fricas` on PATH)
- mpmath_oracle: in-process, needs the optional mpmath extra
- table: replay / record answers as CSV
"""

from .fricas import FricasConfig, FricasOracle
from .mpmath_oracle import MpmathOracle
from .table import RecordingOracle, TableOracle, load_table, save_table

__all__ = [
    "FricasConfig",
    "FricasOracle",
    "MpmathOracle",
    "RecordingOracle",
    "TableOracle",
    "load_table",
    "save_table",
]
