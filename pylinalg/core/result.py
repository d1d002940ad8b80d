"""
Value-or-error envelope for scalar-returning matrix operations.

get() and l1() must distinguish a valid 0.0 from an invalid call without
changing their return type. Instead of a process-wide error flag, they
return a Result carrying both the value (the 0.0 sentinel on failure) and
the error kind.

Design decisions:
    - Generic over the value type T
    - Immutable (frozen=True) so a Result can be passed around safely
    - The sentinel value is always populated, so code that ignores the
      error still gets a defined number
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

from pylinalg.core.exceptions import InvalidArgumentError

T = TypeVar('T')


class ErrorKind(enum.Enum):
    """Kinds of recoverable failure reported through a Result."""
    INVALID_ARGUMENT = 'invalid_argument'


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Immutable value-or-error envelope.

    Attributes:
        value: The computed value, or the operation's sentinel on failure
        error: None on success, otherwise the ErrorKind that occurred
        message: Human-readable description of the failure ('' on success)
        operation: Name of the producing operation, for diagnostics

    Examples:
        >>> r = get(M, 0, 0)
        >>> if r.ok:
        ...     use(r.value)
        >>> get(M, 9, 9).unwrap()  # raises InvalidArgumentError
    """
    value: T
    error: ErrorKind | None = None
    message: str = ''
    operation: str = ''

    @classmethod
    def success(cls, value: T, operation: str = '') -> Result[T]:
        return cls(value=value, operation=operation)

    @classmethod
    def invalid(cls, sentinel: T, message: str, operation: str = '') -> Result[T]:
        return cls(
            value=sentinel,
            error=ErrorKind.INVALID_ARGUMENT,
            message=message,
            operation=operation,
        )

    @property
    def ok(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """
        Return the value, raising if the operation failed.

        Raises:
            InvalidArgumentError: If error is ErrorKind.INVALID_ARGUMENT
        """
        if self.error is ErrorKind.INVALID_ARGUMENT:
            raise InvalidArgumentError(
                f"{self.operation or 'operation'}: {self.message}",
                operation=self.operation or None,
            )
        return self.value
