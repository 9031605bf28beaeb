"""
Numerical precision constants and utilities.

Provides machine epsilon and tolerance-based comparison used by
Matrix.allclose and the inversion backend's near-singularity check.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16

# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float = DEFAULT_RTOL,
    atol: float = DEFAULT_ATOL
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Returns:
        Boolean or boolean array indicating closeness
    """
    return np.abs(a - b) <= atol + rtol * np.abs(b)


def singularity_threshold(array: NDArray[np.floating[Any]]) -> float:
    """
    Pivot magnitude below which a square grid is treated as nearly singular.

    n * eps * max|A|, with eps taken from the grid's own dtype.
    """
    if array.size == 0:
        return 0.0
    n = array.shape[0]
    return float(n * machine_epsilon(array.dtype) * np.max(np.abs(array)))
