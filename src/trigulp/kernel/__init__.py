from .params import KernelParams, DOUBLE_PARAMS, SINGLE_PARAMS, params_for
from .octant import Octant, reduce_octant
from .sncs1cs import sncs1cs

__all__ = ["KernelParams", "DOUBLE_PARAMS", "SINGLE_PARAMS", "params_for", "Octant", "reduce_octant", "sncs1cs"]
