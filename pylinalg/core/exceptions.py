"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error.

Design principles:
    - Exceptions are for programming errors (bad constructor input) and for
      callers who explicitly opt in via Result.unwrap()
    - Kernels and element accessors report failure through their return
      value, never by raising
    - Error messages are actionable with actual vs expected values
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an array-like passed to a constructor is not 2-D, or when
    a requested shape is not a pair of non-negative integers.

    Attributes:
        shape: The offending shape, if known
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class InvalidArgumentError(ValidationError):
    """
    An operation was called with an argument outside its contract.

    Raised only by Result.unwrap() when the wrapped operation failed.
    The accessor or kernel that produced the Result did not raise.

    Attributes:
        operation: Name of the operation that failed (e.g. 'get', 'l1')
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
