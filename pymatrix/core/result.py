"""
Generic result container for PyMatrix computations.

The Result class provides a standardized envelope for algorithmic
operations that carry diagnostics beyond their primary output (inversion
being the main one).

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivoting, row swaps)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The operation-specific parameter payload type

    Attributes:
        params: Operation-specific payload (e.g. the inverse grid)
        info: Structured metadata (method, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=InverseParams(inverse=inv, row_swaps=0, min_abs_pivot=2.0),
        ...     info={'method': 'gauss_jordan', 'pivoting': False},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
