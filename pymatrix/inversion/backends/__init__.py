"""Inversion backends."""

from pymatrix.inversion.backends.cpu import CPUGaussJordanBackend

__all__ = ["CPUGaussJordanBackend"]
