"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned_square(rng):
    """Diagonally dominant 5x5 matrix: every natural-order pivot is nonzero."""
    n = 5
    A = rng.standard_normal((n, n))
    A += np.diag(np.abs(A).sum(axis=1) + 1.0)
    return Matrix(A)


@pytest.fixture
def rectangular_pair(rng):
    """Two matrices with matching column counts (4x3 and 6x3)."""
    return Matrix(rng.standard_normal((4, 3))), Matrix(rng.standard_normal((6, 3)))
