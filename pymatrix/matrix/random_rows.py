"""
Random row generators used by Matrix.random_init*.

Each generator returns a freshly allocated float64 vector of the
requested length. The distributions are implementation details; callers
rely only on the length.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.validation import check_size


RandomState = np.random.Generator | int | None


def resolve_rng(rng: RandomState) -> np.random.Generator:
    """Accept a Generator, an integer seed, or None (fresh entropy)."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def generate_random_row(
    dimension: int,
    rng: RandomState = None,
) -> NDArray[np.floating[Any]]:
    """Row of `dimension` values drawn uniformly from [-1, 1)."""
    n = check_size(dimension, 'dimension')
    return resolve_rng(rng).uniform(-1.0, 1.0, size=n)


def generate_random_row_zero_biased(
    dimension: int,
    rng: RandomState = None,
) -> NDArray[np.floating[Any]]:
    """
    Row of `dimension` values in [0, 1) skewed toward zero.

    Squaring a uniform draw gives density 1 / (2 sqrt(x)), so most of the
    mass sits near zero while staying non-negative.
    """
    n = check_size(dimension, 'dimension')
    return resolve_rng(rng).random(size=n) ** 2
