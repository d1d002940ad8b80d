"""
Dense matrix storage.

A Matrix owns a rectangular grid of float64 values held in a single
C-contiguous numpy array of shape (nrows, ncols). A matrix with a zero
dimension holds no grid at all: ``vals is None``. That empty state is
distinct from a populated matrix and every accessor treats it exactly
like an out-of-range index.

Access goes through the bounds-checked functions in this module:
    get(M, i, j)       -> Result[float]   (sentinel 0.0 + error kind on failure)
    put(M, i, j, val)  -> bool            (False on failure, nothing written)
    destroy(M)         -> None            (never fails)
"""

from __future__ import annotations

import logging
import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.precision import DTYPE, SENTINEL
from pylinalg.core.result import Result
from pylinalg.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    warn_nonfinite,
)

logger = logging.getLogger(__name__)


class Matrix:
    """
    Rectangular grid of double-precision reals.

    Attributes:
        nrows: Number of rows (also available as ``rows``)
        ncols: Number of columns (also available as ``cols``)
        vals: float64 ndarray of shape (nrows, ncols), or None when either
            dimension is zero or the matrix has been destroyed

    All entries start at 0.0. Outside of kernels building a fresh result,
    entries should only be changed through put().

    Example:
        >>> M = Matrix(2, 3)
        >>> put(M, 1, 2, 4.5)
        True
        >>> get(M, 1, 2).value
        4.5
        >>> get(M, 2, 0).ok
        False
    """

    def __init__(self, nrows: int, ncols: int):
        self.nrows = 0
        self.ncols = 0
        self.vals: NDArray[np.float64] | None = None
        init_matrix(self, nrows, ncols)

    @classmethod
    def from_array(cls, data: ArrayLike, name: str = "data") -> Matrix:
        """
        Build a matrix holding a copy of a 2-D array-like.

        Args:
            data: Nested sequence or ndarray of real numbers
            name: Parameter name for error messages

        Returns:
            A new Matrix of the same shape. Zero-sized input gives an
            empty-storage matrix.

        Raises:
            ValidationError: If data is ragged or non-numeric
            DimensionError: If data is not 2-D
        """
        return cls._from_checked(data, name)

    @classmethod
    def from_rows(cls, rows: list[list[float]]) -> Matrix:
        """Build a matrix from a list of equally long rows."""
        return cls._from_checked(rows, "rows")

    @classmethod
    def _from_checked(cls, data: ArrayLike, name: str) -> Matrix:
        # Called directly by each public factory: the factory's caller is
        # four frames up from warnings.warn
        array = check_array(data, name)
        check_2d(array, name)
        warn_nonfinite(array, name, stacklevel=4)
        matrix = cls(*array.shape)
        if matrix.vals is not None:
            matrix.vals[...] = array
        return matrix

    @property
    def rows(self) -> int:
        return self.nrows

    @property
    def cols(self) -> int:
        return self.ncols

    @property
    def shape(self) -> tuple[int, int]:
        return (self.nrows, self.ncols)

    @property
    def is_empty(self) -> bool:
        """True if the matrix holds no grid storage."""
        return self.vals is None

    def get(self, i: int, j: int) -> Result[float]:
        return get(self, i, j)

    def put(self, i: int, j: int, val: float) -> bool:
        return put(self, i, j, val)

    def destroy(self) -> None:
        destroy(self)

    def copy(self) -> Matrix:
        """Return an independent matrix with the same shape and entries."""
        other = type(self)(self.nrows, self.ncols)
        if self.vals is not None:
            other.vals[...] = self.vals
        return other

    def to_numpy(self) -> NDArray[np.float64]:
        """Return a copy of the entries as an (nrows, ncols) ndarray."""
        if self.vals is None:
            return np.zeros((self.nrows, self.ncols), dtype=DTYPE)
        return self.vals.copy()

    def __repr__(self) -> str:
        vals = None if self.vals is None else self.vals.tolist()
        return f"Matrix(nrows={self.nrows}, ncols={self.ncols}, vals={vals})"


def new_matrix(nrows: int, ncols: int) -> Matrix:
    """Create a zero-filled nrows x ncols matrix."""
    return Matrix(nrows, ncols)


def init_matrix(M: Matrix | None, nrows: int, ncols: int) -> None:
    """
    (Re)initialize M in place as a zero-filled nrows x ncols matrix.

    Any previous grid is dropped. If either dimension is zero the shape is
    recorded and vals is set to None.

    Args:
        M: Matrix to initialize. None is ignored.
        nrows: Number of rows, >= 0
        ncols: Number of columns, >= 0

    Raises:
        ValidationError: If a dimension is negative or not an integer
    """
    if M is None:
        return

    nrows = check_dimension(nrows, "nrows")
    ncols = check_dimension(ncols, "ncols")

    M.nrows = nrows
    M.ncols = ncols
    if nrows == 0 or ncols == 0:
        M.vals = None
        return
    M.vals = np.zeros((nrows, ncols), dtype=DTYPE)


def destroy(M: Matrix | None) -> None:
    """
    Release the grid of M and reset its shape to 0x0.

    Safe on None, on an empty matrix and on an already destroyed matrix.
    """
    if M is None:
        return
    M.vals = None
    M.nrows = 0
    M.ncols = 0


def identity(n: int) -> Matrix:
    """Return the n x n identity matrix."""
    matrix = Matrix(n, n)
    for i in range(matrix.nrows):
        put(matrix, i, i, 1.0)
    return matrix


def _as_index(value: Any) -> int | None:
    # bools are ints in Python but never valid indices here
    if isinstance(value, (bool, np.bool_)):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def _locate(M: Matrix | None, i: Any, j: Any) -> tuple[int, int] | None:
    """Return (i, j) as ints if they address an entry of M, else None."""
    if M is None or M.vals is None:
        return None
    row = _as_index(i)
    col = _as_index(j)
    if row is None or col is None:
        return None
    # Negative indices are out of range; no wraparound
    if not (0 <= row < M.nrows and 0 <= col < M.ncols):
        return None
    return row, col


def _describe_miss(M: Matrix | None, i: Any, j: Any) -> str:
    if M is None:
        return "matrix is None"
    if M.vals is None:
        return f"matrix {M.nrows}x{M.ncols} has no storage"
    return f"index ({i!r}, {j!r}) out of range for {M.nrows}x{M.ncols} matrix"


def get(M: Matrix | None, i: int, j: int) -> Result[float]:
    """
    Read entry (i, j) of M.

    Args:
        M: Matrix to read
        i: Row index, 0 <= i < M.nrows
        j: Column index, 0 <= j < M.ncols

    Returns:
        Result whose value is the entry. If M is None, has no storage, or
        the index is out of range, the value is 0.0 and error is
        ErrorKind.INVALID_ARGUMENT.
    """
    position = _locate(M, i, j)
    if position is None:
        message = _describe_miss(M, i, j)
        logger.debug("get: %s", message)
        return Result.invalid(SENTINEL, message, operation="get")
    return Result.success(float(M.vals[position]), operation="get")


def put(M: Matrix | None, i: int, j: int, val: float) -> bool:
    """
    Store val at entry (i, j) of M.

    Args:
        M: Matrix to modify
        i: Row index, 0 <= i < M.nrows
        j: Column index, 0 <= j < M.ncols
        val: Real value to store

    Returns:
        True if the value was stored. False if M is None, has no storage,
        the index is out of range or val is not a real number; M is left
        unchanged in that case.
    """
    position = _locate(M, i, j)
    if position is None:
        logger.debug("put: %s", _describe_miss(M, i, j))
        return False

    # float() would silently drop the imaginary part of numpy complex scalars
    if isinstance(val, (str, bytes, complex, np.complexfloating)):
        logger.debug("put: value %r is not a real number", val)
        return False
    try:
        value = float(val)
    except (TypeError, ValueError):
        logger.debug("put: value %r is not a real number", val)
        return False

    M.vals[position] = value
    return True
