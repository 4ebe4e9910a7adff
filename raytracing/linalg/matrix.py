"""
Fixed-dimension matrix value type.

Matrix wraps a read-only float64 numpy array whose shape is fixed at
construction. Shape compatibility is checked on every product and
inversion; a mismatch raises DimensionError before any arithmetic happens.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from raytracing.core.exceptions import DimensionError, ValidationError
from raytracing.core.tolerances import scalar_abs_diff_eq, select_tolerance
from raytracing.core.validation import check_2d, check_array, check_scalar
from raytracing.linalg._gauss_jordan import invert_in_place


class Matrix:
    """
    Immutable R x C matrix of float64 entries.

    Construction:
        Matrix([[1, 2], [3, 4]])        explicit rows
        Matrix.identity(4)              square identity
        Matrix.filled(3, 3, 4.0)        every entry the same scalar
        Matrix.column([x, y, z, w])     N x 1 column

    Operators:
        a @ b     matrix product (inner dimensions must match)
        a == b    exact element-wise equality
        m[r, c]   element access

    Examples:
        >>> m = Matrix([[1.0, 2.0], [4.0, 3.0]])
        >>> m @ Matrix.identity(2) == m
        True
    """

    __slots__ = ('_data',)

    default_epsilon: float = select_tolerance('matrix').atol

    def __init__(self, rows: ArrayLike):
        data = check_array(rows, 'rows')
        check_2d(data, 'rows')
        data.setflags(write=False)
        self._data = data

    @classmethod
    def _wrap(cls, data: NDArray[np.floating[Any]]) -> Matrix:
        """Adopt an already-validated 2D float64 array without copying."""
        obj = cls.__new__(cls)
        data.setflags(write=False)
        obj._data = data
        return obj

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n matrix with 1 on the diagonal and 0 elsewhere."""
        _check_size(n, 'n')
        return cls._wrap(np.eye(n, dtype=np.float64))

    @classmethod
    def filled(cls, nrows: int, ncols: int, value: float) -> Matrix:
        """nrows x ncols matrix with every entry equal to value."""
        _check_size(nrows, 'nrows')
        _check_size(ncols, 'ncols')
        fill = check_scalar(value, 'value', finite=False)
        return cls._wrap(np.full((nrows, ncols), fill, dtype=np.float64))

    @classmethod
    def column(cls, values: Iterable[float]) -> Matrix:
        """N x 1 column matrix."""
        data = check_array(list(values), 'values')
        if data.ndim != 1:
            raise DimensionError(
                f"values: expected a flat sequence, got shape {data.shape}"
            )
        return cls(data.reshape(-1, 1))

    # --- Shape -----------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return self._data.shape

    @property
    def nrows(self) -> int:
        return self._data.shape[0]

    @property
    def ncols(self) -> int:
        return self._data.shape[1]

    @property
    def is_square(self) -> bool:
        return self.nrows == self.ncols

    # --- Access and iteration ----------------------------------------------

    def __getitem__(self, index: tuple[int, int]) -> float:
        r, c = index
        return float(self._data[r, c])

    def rows(self) -> Iterator[tuple[float, ...]]:
        """Yield each row as a tuple of length ncols, top to bottom."""
        for row in self._data:
            yield tuple(float(v) for v in row)

    def cols(self) -> Iterator[tuple[float, ...]]:
        """Yield each column as a tuple of length nrows, left to right."""
        for col in self._data.T:
            yield tuple(float(v) for v in col)

    def elements(self) -> Iterator[float]:
        """Yield every entry in row-major order."""
        for row in self.rows():
            yield from row

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Writable copy of the entries as a 2D float64 array."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        return [list(row) for row in self.rows()]

    # --- Algebra -------------------------------------------------------------

    def transpose(self) -> Matrix:
        """C x R matrix with rows and columns swapped."""
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self x other.

        Cell (r, c) of the result is the dot product of row r of self and
        column c of other.

        Raises:
            DimensionError: If self.ncols != other.nrows
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected Matrix, got {type(other).__name__}"
            )
        if self.ncols != other.nrows:
            raise DimensionError(
                f"Cannot multiply {self.nrows}x{self.ncols} by "
                f"{other.nrows}x{other.ncols}: inner dimensions "
                f"{self.ncols} and {other.nrows} differ"
            )
        return Matrix._wrap(self._data @ other._data)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def inverse(self, *, strict: bool = False, name: str = 'matrix') -> Matrix:
        """
        Inverse by in-place Gauss-Jordan elimination without pivoting.

        Every diagonal pivot met during elimination is assumed nonzero. With
        the default ``strict=False`` a zero pivot is not detected: the result
        silently contains inf/nan entries. ``strict=True`` raises instead.

        Args:
            strict: Raise SingularMatrixError on a zero or non-finite pivot
            name: Matrix description used in error messages

        Returns:
            New matrix; self is left unchanged

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If strict and a pivot is zero or non-finite

        Examples:
            >>> m = Matrix([[4.0, 7.0], [2.0, 6.0]])
            >>> (m @ m.inverse()).abs_diff_eq(Matrix.identity(2))
            True
        """
        if not self.is_square:
            raise DimensionError(
                f"{name}: inverse requires a square matrix, "
                f"got {self.nrows}x{self.ncols}"
            )
        work = self._data.copy()
        invert_in_place(work, strict=strict, name=name)
        return Matrix._wrap(work)

    # --- Equality ------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((self.shape, tuple(self.elements())))

    def abs_diff_eq(self, other: Matrix, epsilon: float | None = None) -> bool:
        """
        Element-wise |a - b| <= epsilon over the flattened entries.

        Args:
            other: Matrix of the same shape
            epsilon: Absolute tolerance, default MATRIX_TOLERANCE (1e-4)

        Returns:
            False if other is not a Matrix or shapes differ, else whether
            every pair is within epsilon
        """
        eps = self.default_epsilon if epsilon is None else epsilon
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return all(
            scalar_abs_diff_eq(a, b, eps)
            for a, b in zip(self.elements(), other.elements())
        )

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"


def _check_size(n: Any, name: str) -> None:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValidationError(f"{name}: expected int, got {type(n).__name__}")
    if n < 1:
        raise DimensionError(f"{name}: must be at least 1, got {n}")


def stack_columns(columns: Sequence[Matrix]) -> Matrix:
    """
    Join N x 1 columns side by side into an N x K matrix.

    Raises:
        DimensionError: If any input is not a column or heights differ
    """
    if not columns:
        raise DimensionError("columns: need at least one column")
    height = columns[0].nrows
    for i, col in enumerate(columns):
        if col.shape != (height, 1):
            raise DimensionError(
                f"columns[{i}]: expected {height}x1, got {col.nrows}x{col.ncols}"
            )
    return Matrix._wrap(np.hstack([col._data for col in columns]))
