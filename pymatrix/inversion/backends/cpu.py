"""
CPU backend for matrix inversion.

Gauss-Jordan elimination on the augmented system [A | I]: every
off-diagonal entry of A is eliminated column by column, the same row
operations are applied to the identity, and a final pass divides each
row by its diagonal pivot, leaving [I | A^-1].

The default variant does no pivoting and visits rows in natural order,
so results are deterministic and match the textbook algorithm exactly.
Partial pivoting is available as an opt-in improvement for matrices
whose leading entries vanish.
"""

from typing import Any
import numpy as np

from pymatrix.core.compute.precision import singularity_threshold
from pymatrix.core.compute.timing import Timer
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.result import Result
from pymatrix.inversion.design import InversionDesign
from pymatrix.inversion.solution import InverseParams


class CPUGaussJordanBackend:
    """
    CPU backend using Gauss-Jordan elimination.

    Stateless: takes an InversionDesign and returns Result[InverseParams].
    """

    def __init__(self, pivoting: bool = False):
        self._pivoting = pivoting

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan_pivoted' if self._pivoting else 'cpu_gauss_jordan'

    def solve(self, design: InversionDesign) -> Result[InverseParams]:
        """
        Invert the design matrix.

        Algorithm:
            1. inverse = I
            2. For each row i, for every other row j:
               ratio = A[j][i] / A[i][i]; row_j -= ratio * row_i
               (in both A and inverse)
            3. Divide each row i of both grids by A[i][i]

        Args:
            design: Validated square design

        Returns:
            Result containing InverseParams

        Raises:
            SingularMatrixError: If a pivot is exactly zero when used
        """
        timer = Timer()
        timer.start()

        work = design.data.copy()
        n = design.n
        inverse = np.eye(n, dtype=work.dtype)
        threshold = singularity_threshold(work)
        row_swaps = 0

        # === Elimination ===
        with timer.section('elimination'):
            for i in range(n):
                if self._pivoting:
                    p = i + int(np.argmax(np.abs(work[i:, i])))
                    if p != i:
                        work[[i, p]] = work[[p, i]]
                        inverse[[i, p]] = inverse[[p, i]]
                        row_swaps += 1

                for j in range(n):
                    if j == i:
                        continue
                    pivot = work[i, i]
                    if pivot == 0.0:
                        raise _zero_pivot(i)
                    ratio = work[j, i] / pivot
                    work[j] -= ratio * work[i]
                    inverse[j] -= ratio * inverse[i]

        # === Normalization ===
        with timer.section('normalization'):
            pivots = np.diag(work).copy()
            for i in range(n):
                if pivots[i] == 0.0:
                    raise _zero_pivot(i)
                work[i] /= pivots[i]
                inverse[i] /= pivots[i]

        timer.stop()

        min_abs_pivot = float(np.min(np.abs(pivots))) if n > 0 else float('inf')

        warnings: tuple[str, ...] = ()
        if n > 0 and min_abs_pivot <= threshold:
            warnings = (
                f"matrix is nearly singular: smallest pivot {min_abs_pivot:.3g} "
                f"is below {threshold:.3g}",
            )

        params = InverseParams(
            inverse=inverse,
            row_swaps=row_swaps,
            min_abs_pivot=min_abs_pivot,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'pivoting': self._pivoting,
            'n': n,
            'row_swaps': row_swaps,
            'min_abs_pivot': min_abs_pivot,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )


def _zero_pivot(i: int) -> SingularMatrixError:
    return SingularMatrixError(
        f"matrix cannot be inverted: pivot {i} is zero",
        matrix_name='matrix',
        pivot_index=i,
        pivot_value=0.0,
    )
