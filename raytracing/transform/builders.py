"""
Builders for canonical 4x4 affine transformation matrices.

Each function starts from the 4x4 identity and overwrites a few entries.
Combine results with ``@``; the rightmost matrix acts first.
"""

from __future__ import annotations

import math
import numpy as np

from raytracing.core.validation import check_scalar
from raytracing.linalg.matrix import Matrix


def translate(x: float, y: float, z: float) -> Matrix:
    """
    Creates a 4x4 transformation matrix for translating by x, y and z.

    Args:
        x: Translation along the x-axis
        y: Translation along the y-axis
        z: Translation along the z-axis

    Returns:
        New 4x4 translation matrix (entries (0,3), (1,3), (2,3))
    """
    m = np.eye(4)
    m[0, 3] = check_scalar(x, 'x')
    m[1, 3] = check_scalar(y, 'y')
    m[2, 3] = check_scalar(z, 'z')
    return Matrix(m)


def scale(x: float, y: float, z: float) -> Matrix:
    """
    Creates a 4x4 transformation matrix for scaling by x, y and z.

    A negative factor reflects across the corresponding plane.

    Args:
        x: Scaling factor along the x-axis
        y: Scaling factor along the y-axis
        z: Scaling factor along the z-axis

    Returns:
        New 4x4 scaling matrix
    """
    m = np.eye(4)
    m[0, 0] = check_scalar(x, 'x')
    m[1, 1] = check_scalar(y, 'y')
    m[2, 2] = check_scalar(z, 'z')
    return Matrix(m)


def rotate_x(radians: float) -> Matrix:
    """Right-handed rotation about the x-axis."""
    theta = check_scalar(radians, 'radians')
    c, s = math.cos(theta), math.sin(theta)
    m = np.eye(4)
    m[1, 1] = c
    m[1, 2] = -s
    m[2, 1] = s
    m[2, 2] = c
    return Matrix(m)


def rotate_y(radians: float) -> Matrix:
    """Right-handed rotation about the y-axis."""
    theta = check_scalar(radians, 'radians')
    c, s = math.cos(theta), math.sin(theta)
    m = np.eye(4)
    m[0, 0] = c
    m[0, 2] = s
    m[2, 0] = -s
    m[2, 2] = c
    return Matrix(m)


def rotate_z(radians: float) -> Matrix:
    """Right-handed rotation about the z-axis."""
    theta = check_scalar(radians, 'radians')
    c, s = math.cos(theta), math.sin(theta)
    m = np.eye(4)
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return Matrix(m)


def rotate(radians_x: float, radians_y: float, radians_z: float) -> Matrix:
    """
    Composite rotation ``rotate_x(rx) @ rotate_y(ry) @ rotate_z(rz)``.

    Rotations do not commute: applied to a column this rotates about z
    first, then y, then x. Keep this order.

    Args:
        radians_x: Angle about the x-axis
        radians_y: Angle about the y-axis
        radians_z: Angle about the z-axis

    Returns:
        4x4 rotation matrix
    """
    return rotate_x(radians_x) @ rotate_y(radians_y) @ rotate_z(radians_z)
