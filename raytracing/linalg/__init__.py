"""
Fixed-dimension linear algebra for raytracing.

Public API:
    Matrix          - immutable R x C float64 matrix
    stack_columns   - join N x 1 columns into an N x K matrix
    invert_in_place - Gauss-Jordan kernel behind Matrix.inverse
"""

from raytracing.linalg.matrix import Matrix, stack_columns
from raytracing.linalg._gauss_jordan import invert_in_place

__all__ = [
    "Matrix",
    "stack_columns",
    "invert_in_place",
]
