"""
Applying 4x4 transforms to Homogeneous entities.

    transform(entity, M) = type(entity).from_homogeneous(M @ entity.to_homogeneous())

No perspective divide is performed: the w row of the product is dropped.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from raytracing.core.exceptions import ValidationError
from raytracing.core.protocols import Homogeneous
from raytracing.core.validation import check_shape
from raytracing.linalg.matrix import Matrix, stack_columns

H = TypeVar('H', bound=Homogeneous)


def _check_transform_matrix(matrix: Matrix) -> None:
    if not isinstance(matrix, Matrix):
        raise ValidationError(
            f"matrix: expected Matrix, got {type(matrix).__name__}"
        )
    check_shape(matrix.shape, (4, 4), 'matrix')


def transform(entity: H, matrix: Matrix) -> H:
    """
    Carry an entity through a 4x4 transformation matrix.

    Args:
        entity: Any Homogeneous value (Point, Vec3)
        matrix: 4x4 transform, e.g. from raytracing.transform.builders

    Returns:
        New entity of the same type

    Raises:
        ValidationError: If entity does not implement Homogeneous
        DimensionError: If matrix is not 4x4

    Examples:
        >>> from raytracing.geometry import Point
        >>> from raytracing.transform.builders import translate
        >>> transform(Point(-3.0, 4.0, 5.0), translate(5.0, -3.0, 2.0))
        Point(x=2.0, y=1.0, z=7.0)
    """
    if not isinstance(entity, Homogeneous):
        raise ValidationError(
            f"entity: {type(entity).__name__} cannot be lifted to "
            f"homogeneous coordinates"
        )
    _check_transform_matrix(matrix)
    return type(entity).from_homogeneous(matrix @ entity.to_homogeneous())


def transform_all(entities: Sequence[H], matrix: Matrix) -> list[H]:
    """
    Transform many entities of one type with a single 4 x N product.

    Each result equals ``transform(entity, matrix)``; calls are independent
    and the inputs are not modified.

    Raises:
        ValidationError: If entities mix types or are not Homogeneous
        DimensionError: If matrix is not 4x4
    """
    if not entities:
        return []
    kind = type(entities[0])
    for i, entity in enumerate(entities):
        if type(entity) is not kind:
            raise ValidationError(
                f"entities[{i}]: expected {kind.__name__}, got {type(entity).__name__}"
            )
    if not isinstance(entities[0], Homogeneous):
        raise ValidationError(
            f"entities: {kind.__name__} cannot be lifted to homogeneous coordinates"
        )
    _check_transform_matrix(matrix)

    product = matrix @ stack_columns([e.to_homogeneous() for e in entities])
    return [kind.from_homogeneous(Matrix.column(col)) for col in product.cols()]
