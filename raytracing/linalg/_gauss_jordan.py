"""
In-place Gauss-Jordan inversion without row exchanges.

The inverse overwrites the input array; no augmented identity is built.
For each pivot index p, in order:

    pivot   = M[p, p]
    M[j, p] = -M[j, p] / pivot                  for j != p
    M[i, j] += M[p, j] * M[i, p]                for i != p, j != p
    M[p, j] = M[p, j] / pivot                   for j != p
    M[p, p] = 1 / pivot

The rank-one update in the third step uses the freshly negated column p
and the pivot row as it was before the fourth step scales it.

There is no partial pivoting. A zero pivot (or one that becomes zero during
elimination) yields inf/nan entries unless strict checking is requested.
"""

from __future__ import annotations

import logging
import math
from typing import Any
import numpy as np
from numpy.typing import NDArray

from raytracing.core.exceptions import SingularMatrixError

logger = logging.getLogger(__name__)


def invert_in_place(
    m: NDArray[np.floating[Any]],
    *,
    strict: bool = False,
    name: str = 'matrix',
) -> None:
    """
    Replace a square float64 array with its inverse.

    Args:
        m: Writable (T, T) array, overwritten with the inverse
        strict: Raise on a zero or non-finite pivot instead of letting
            inf/nan propagate
        name: Matrix description used in error messages

    Raises:
        SingularMatrixError: If strict and a pivot is zero or non-finite.
            The array is left partially eliminated in that case.
    """
    n = m.shape[0]
    others = np.ones(n, dtype=bool)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for p in range(n):
            pivot = float(m[p, p])

            if pivot == 0.0 or not math.isfinite(pivot):
                if strict:
                    raise SingularMatrixError(
                        f"{name}: pivot {p} is {pivot}; the matrix is singular "
                        f"or needs row exchanges",
                        matrix_name=name,
                        pivot_index=p,
                        pivot_value=pivot,
                    )
                logger.debug("%s: pivot %d is %r, result will be non-finite", name, p, pivot)

            others[p] = False

            m[others, p] = -m[others, p] / pivot
            m[np.ix_(others, others)] += np.outer(m[others, p], m[p, others])
            m[p, others] = m[p, others] / pivot
            m[p, p] = np.float64(1.0) / m[p, p]

            others[p] = True
