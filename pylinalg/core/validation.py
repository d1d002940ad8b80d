"""
Input validation utilities for pylinalg constructors.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

They are used when building a Matrix, never inside get/put or the kernels,
which report bad arguments through their return value instead.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinalg.core.exceptions import ValidationError, DimensionError


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a matrix dimension and return it as a plain int.

    Accepts Python ints and numpy integer scalars. Rejects bool, floats
    and negative values.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as an int >= 0

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected a non-negative integer, got bool {value!r}")
    try:
        result = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        ) from e
    if result < 0:
        raise ValidationError(f"{name}: must be >= 0, got {result}")
    return result


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (ragged nesting, mixed types) or a
    non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real data")

    return result.astype(np.float64)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            shape=array.shape,
        )


def warn_nonfinite(
    array: NDArray[np.floating[Any]],
    name: str,
    stacklevel: int = 2,
) -> bool:
    """
    Warn if an array contains NaN or Inf.

    Non-finite entries are legal matrix values, but they propagate through
    every kernel, so the caller is told once at construction.

    Args:
        array: Array to check
        name: Parameter name for the warning message
        stacklevel: Passed to warnings.warn; wrappers raise it so the
            warning points at user code

    Returns:
        True if a warning was issued
    """
    if array.size == 0 or np.all(np.isfinite(array)):
        return False
    n_nan = int(np.sum(np.isnan(array)))
    n_inf = int(np.sum(np.isinf(array)))
    warnings.warn(
        f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
        stacklevel=stacklevel,
    )
    return True
