"""
Matrix inversion module.

Public API:
    invert(matrix)  - Gauss-Jordan inverse with diagnostics
"""

from pymatrix.inversion.design import InversionDesign
from pymatrix.inversion.solution import InverseParams, InverseSolution
from pymatrix.inversion.solvers import invert

__all__ = [
    "invert",
    "InversionDesign",
    "InverseParams",
    "InverseSolution",
]
