"""
Shared compute infrastructure for PyMatrix.

Submodules:
    timing: Section timer for backend results
    precision: Machine epsilon and closeness checks
    tolerances: Tolerance tiers for numerical comparison
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.precision import (
    EPSILON_64,
    DEFAULT_ATOL,
    DEFAULT_RTOL,
    is_close,
    machine_epsilon,
    singularity_threshold,
)
from pymatrix.core.compute.tolerances import (
    CPU_FP32,
    CPU_FP64,
    INVERSION_FP64,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Precision
    "EPSILON_64",
    "DEFAULT_ATOL",
    "DEFAULT_RTOL",
    "is_close",
    "machine_epsilon",
    "singularity_threshold",
    # Tolerances
    "ToleranceTier",
    "CPU_FP32",
    "CPU_FP64",
    "INVERSION_FP64",
    "select_tolerance",
]
