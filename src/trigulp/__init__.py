"""trigulp public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .api import MeasurementResult, run_measurement
from .config import RunConfig
from .core.errors import TrigulpError, OracleError, OracleUnavailableError
from .core.formats import DOUBLE, SINGLE
from .core.types import Function, FunctionComparison, PerFunction
from .kernel import DOUBLE_PARAMS, SINGLE_PARAMS, sncs1cs
from .metrics import about, score, ulp_distance

__version__ = "0.1.0"

__all__ = [
    "run_measurement",
    "MeasurementResult",
    "RunConfig",
    "TrigulpError",
    "OracleError",
    "OracleUnavailableError",
    "DOUBLE",
    "SINGLE",
    "Function",
    "FunctionComparison",
    "PerFunction",
    "DOUBLE_PARAMS",
    "SINGLE_PARAMS",
    "sncs1cs",
    "about",
    "score",
    "ulp_distance",
]
