"""
Inversion solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.matrix.matrix import Matrix

if TYPE_CHECKING:
    from pymatrix.inversion.design import InversionDesign


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for inversion.

    This is the immutable data computed by backends.
    """
    inverse: NDArray[np.floating[Any]]
    row_swaps: int
    min_abs_pivot: float


@dataclass
class InverseSolution:
    """
    User-facing inversion results.

    Wraps the backend Result and exposes the inverse as a Matrix along
    with elimination diagnostics.
    """
    _result: Result[InverseParams]
    _design: 'InversionDesign'

    @property
    def inverse(self) -> Matrix:
        """The inverse as a new, independently owned Matrix."""
        return Matrix(self._result.params.inverse)

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def pivoting(self) -> bool:
        return bool(self._result.info.get('pivoting', False))

    @property
    def row_swaps(self) -> int:
        return self._result.params.row_swaps

    @property
    def min_abs_pivot(self) -> float:
        """Smallest |pivot| met during elimination (inf for a 0 x 0 matrix)."""
        return self._result.params.min_abs_pivot

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable summary of the inversion."""
        lines = [
            "Matrix Inversion Results",
            "=" * 60,
            f"Order: {self.n}",
            f"Method: {self.info.get('method')}",
            f"Pivoting: {'partial' if self.pivoting else 'none'}",
            f"Row swaps: {self.row_swaps}",
            f"Smallest |pivot|: {self.min_abs_pivot:.6g}",
            f"Backend: {self.backend_name}",
        ]
        if self.timing is not None:
            lines.append(f"Time: {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"InverseSolution(n={self.n}, pivoting={self.pivoting}, "
            f"row_swaps={self.row_swaps})"
        )
