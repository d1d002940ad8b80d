"""
Numeric kernels over Matrix.

Every kernel is pure: inputs are never modified, and matrix results are
freshly allocated and owned by the caller.

Failure reporting follows the operation's return type:
    add, mult  -> None when an operand has no storage or shapes don't fit
    l1         -> Result with the 0.0 sentinel and INVALID_ARGUMENT
    l2         -> 0.0 for a missing matrix, never an error

Reductions accumulate with plain float addition in row-major order (and
i, j, k order for mult), so a given input always yields the same bits.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from pylinalg.core.precision import SENTINEL, is_close
from pylinalg.core.result import Result
from pylinalg.core.tolerances import DEFAULT, ToleranceTier
from pylinalg.matrix.storage import Matrix

logger = logging.getLogger(__name__)


def _shape_str(M: Matrix | None) -> str:
    if M is None:
        return "None"
    if M.vals is None:
        return f"{M.nrows}x{M.ncols} (no storage)"
    return f"{M.nrows}x{M.ncols}"


def _has_storage(*matrices: Matrix | None) -> bool:
    return all(M is not None and M.vals is not None for M in matrices)


def add(A: Matrix | None, B: Matrix | None) -> Matrix | None:
    """
    Entry-wise sum A + B.

    Args:
        A: Left operand
        B: Right operand

    Returns:
        New matrix with entries A[i][j] + B[i][j], or None if either
        operand is None, has no storage, or the shapes differ.
    """
    if not _has_storage(A, B):
        logger.debug("add: operand without storage (%s, %s)", _shape_str(A), _shape_str(B))
        return None
    if not (A.nrows == B.nrows and A.ncols == B.ncols):
        logger.debug("add: shape mismatch %s vs %s", _shape_str(A), _shape_str(B))
        return None

    ret = Matrix(A.nrows, A.ncols)
    np.add(A.vals, B.vals, out=ret.vals)
    return ret


def l1(A: Matrix | None) -> Result[float]:
    """
    Entry-wise L1 norm: the sum of |A[i][j]| over all entries.

    Returns:
        Result holding the norm. If A is None, has no storage, or has a
        zero dimension, the value is 0.0 and error is INVALID_ARGUMENT.
    """
    if A is None or A.vals is None or A.nrows <= 0 or A.ncols <= 0:
        message = f"l1 undefined for matrix {_shape_str(A)}"
        logger.debug("l1: %s", message)
        return Result.invalid(SENTINEL, message, operation="l1")

    result = 0.0
    for row in A.vals.tolist():
        for value in row:
            result += abs(value)
    return Result.success(result, operation="l1")


def l2(A: Matrix | None) -> float:
    """
    Entry-wise L2 (Frobenius) norm: sqrt of the sum of squares.

    Lenient by contract: None and empty matrices give 0.0 without any
    error indication. This differs from l1 on purpose.
    """
    if A is None or A.vals is None:
        return 0.0

    total = 0.0
    for row in A.vals.tolist():
        for value in row:
            total += value * value
    return math.sqrt(total)


def mult(A: Matrix | None, B: Matrix | None) -> Matrix | None:
    """
    Matrix product AB.

    The product is only computed when A.nrows == B.ncols and
    A.ncols == B.nrows, i.e. A is n x m and B is m x n. Shapes that satisfy
    only the usual A.ncols == B.rows rule are rejected.

    Args:
        A: Left operand
        B: Right operand

    Returns:
        New A.nrows x B.ncols matrix, or None if either operand is None,
        has no storage, or the shapes are incompatible.
    """
    if not _has_storage(A, B):
        logger.debug("mult: operand without storage (%s, %s)", _shape_str(A), _shape_str(B))
        return None
    if not (A.nrows == B.ncols and A.ncols == B.nrows):
        logger.debug("mult: incompatible shapes %s and %s", _shape_str(A), _shape_str(B))
        return None

    a = A.vals.tolist()
    b = B.vals.tolist()
    ret = Matrix(A.nrows, B.ncols)
    for i in range(ret.nrows):
        a_row = a[i]
        for j in range(ret.ncols):
            acc = 0.0
            for k in range(A.ncols):
                acc += a_row[k] * b[k][j]
            ret.vals[i, j] = acc
    return ret


def allclose(
    A: Matrix | None,
    B: Matrix | None,
    tolerance: ToleranceTier = DEFAULT,
) -> bool:
    """
    True if A and B have storage, equal shapes, and entry-wise close values.

    Closeness is |a - b| <= tolerance.atol + tolerance.rtol * |b|.
    """
    if not _has_storage(A, B):
        return False
    if A.shape != B.shape:
        return False
    return bool(np.all(is_close(A.vals, B.vals, rtol=tolerance.rtol, atol=tolerance.atol)))
