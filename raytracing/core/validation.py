"""
Input validation utilities for raytracing.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Real

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from raytracing.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (ragged rows, mixed types or non-numeric
    data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    # Reject non-numeric dtypes (bool, strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real numbers")

    return result.astype(np.float64)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional with no empty axis.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D or has a zero-length axis
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )
    if 0 in array.shape:
        raise DimensionError(f"{name}: empty dimension in shape {array.shape}")


def check_shape(shape: tuple[int, int], expected: tuple[int, int], name: str) -> None:
    """
    Verify a matrix shape equals the expected one.

    Args:
        shape: Actual (rows, cols)
        expected: Required (rows, cols)
        name: Parameter name for error messages

    Raises:
        DimensionError: If shapes differ
    """
    if tuple(shape) != tuple(expected):
        raise DimensionError(
            f"{name}: expected {expected[0]}x{expected[1]} matrix, "
            f"got {shape[0]}x{shape[1]}"
        )


def check_scalar(value: Any, name: str, *, finite: bool = True) -> float:
    """
    Validate a real scalar and return it as float.

    Args:
        value: Input to validate
        name: Parameter name for error messages
        finite: Also reject NaN and Inf

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number, or is NaN/Inf
            while ``finite`` is set
    """
    if isinstance(value, bool) or not isinstance(value, (Real, np.integer, np.floating)):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    result = float(value)
    if finite and not math.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result
