"""
Exception hierarchy for raytracing.

All exceptions inherit from RaytracingError to allow catching any
library-specific error. Subsystem-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class RaytracingError(Exception):
    """Base exception for all raytracing errors."""
    pass


class ValidationError(RaytracingError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. a
    non-numeric matrix entry or a non-finite transform parameter.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when operand shapes are incompatible: multiplying matrices whose
    inner dimensions differ, inverting a non-square matrix, or lowering a
    column that is not 4x1 back into a geometric entity.
    """
    pass


class NumericalError(RaytracingError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix inversion met a zero (or non-finite) pivot.

    Only raised by ``Matrix.inverse(strict=True)``. The default inversion
    path lets the non-finite values propagate instead.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Diagonal index at which elimination failed
        pivot_value: The offending pivot, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value


class ImageWriteError(RaytracingError):
    """
    Encoding or writing a canvas to an image file failed.

    The underlying Pillow/OS exception is chained as ``__cause__``.
    Not retryable: the same call will fail the same way.

    Attributes:
        filename: Target path of the failed write
    """

    def __init__(self, message: str, filename: str | None = None):
        super().__init__(message)
        self.filename = filename
