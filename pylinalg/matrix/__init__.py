"""
Dense matrix module.

Public API:
    Matrix(nrows, ncols)   - zero-filled float64 matrix
    new_matrix(n, m)       - functional constructor
    init_matrix(M, n, m)   - reinitialize M in place
    destroy(M)             - release storage, reset to 0x0
    identity(n)            - n x n identity
    get(M, i, j)           - bounds-checked read, returns Result[float]
    put(M, i, j, v)        - bounds-checked write, returns bool
    add(A, B)              - entry-wise sum, None on failure
    l1(A)                  - entry-wise L1 norm, returns Result[float]
    l2(A)                  - Frobenius norm, 0.0 for a missing matrix
    mult(A, B)             - matrix product, None on failure
    allclose(A, B)         - entry-wise comparison within a ToleranceTier
"""

from pylinalg.matrix.storage import (
    Matrix,
    new_matrix,
    init_matrix,
    destroy,
    identity,
    get,
    put,
)
from pylinalg.matrix.kernels import add, l1, l2, mult, allclose

__all__ = [
    "Matrix",
    "new_matrix",
    "init_matrix",
    "destroy",
    "identity",
    "get",
    "put",
    "add",
    "l1",
    "l2",
    "mult",
    "allclose",
]
