"""
Tolerance tiers for numerical comparison.

Matrix.allclose picks its default tier from the grid's dtype through
select_tolerance. INVERSION_FP64 is the looser tier the test suite uses
to check A @ A^-1 against the identity, since Gauss-Jordan without
pivoting accumulates rounding over n^2 row updates.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Relative and absolute tolerance pair with a label."""
    rtol: float
    atol: float
    name: str


# Products and sums of float64 grids
CPU_FP64 = ToleranceTier(rtol=1e-12, atol=1e-14, name='cpu_fp64')

# Single precision grids; eps is ~1.2e-7
CPU_FP32 = ToleranceTier(rtol=1e-4, atol=1e-5, name='cpu_fp32')

# Gauss-Jordan inverse of a well-conditioned float64 grid
INVERSION_FP64 = ToleranceTier(rtol=1e-9, atol=1e-10, name='inversion_fp64')


def select_tolerance(dtype_name: str) -> ToleranceTier:
    """Default comparison tier for a grid of the given dtype."""
    if 'float32' in dtype_name:
        return CPU_FP32
    return CPU_FP64
