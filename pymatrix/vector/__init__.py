"""
Vector operations module.

Public API:
    inner_product(v1, v2)    - Sum of elementwise products
    outer_product(v1, v2)    - Outer product as a Matrix
    square_dist(v1, v2)      - Squared Euclidean distance
    euclidean_dist(v1, v2)   - Euclidean distance
    norm(v, p)               - p-norm, p >= 1
    make_vector_set(v)       - Sorted, duplicate-free form
    scale_vector, divide_vector, add_vector, subtract_vector
                             - In-place elementwise operators
    format_vector(v)         - Diagnostic text rendering
"""

from pymatrix.vector.operations import (
    add_vector,
    as_vector,
    divide_vector,
    euclidean_dist,
    format_vector,
    inner_product,
    make_vector_set,
    norm,
    outer_product,
    scale_vector,
    square_dist,
    subtract_vector,
)

__all__ = [
    "inner_product",
    "outer_product",
    "square_dist",
    "euclidean_dist",
    "norm",
    "make_vector_set",
    "scale_vector",
    "divide_vector",
    "add_vector",
    "subtract_vector",
    "format_vector",
    "as_vector",
]
