"""
Core infrastructure for raytracing.

This module provides shared abstractions and utilities used by all
subpackages (geometry, linalg, transform, output).

Key components:
    protocols: Homogeneous, ApproxEq protocols
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Per-type epsilon defaults and abs_diff_eq
    logging_config: Opt-in logging setup for scripts
"""

from raytracing.core.protocols import Homogeneous, ApproxEq
from raytracing.core.tolerances import (
    ToleranceTier,
    VECTOR_TOLERANCE,
    MATRIX_TOLERANCE,
    abs_diff_eq,
    select_tolerance,
)
from raytracing.core.exceptions import (
    RaytracingError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    ImageWriteError,
)

__all__ = [
    # Protocols
    "Homogeneous",
    "ApproxEq",
    # Tolerances
    "ToleranceTier",
    "VECTOR_TOLERANCE",
    "MATRIX_TOLERANCE",
    "abs_diff_eq",
    "select_tolerance",
    # Exceptions
    "RaytracingError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "ImageWriteError",
]
