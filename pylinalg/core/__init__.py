"""
Core infrastructure for pylinalg.

This module provides shared abstractions used by the matrix subpackage.

Key components:
    result: Result[T] value-or-error envelope
    exceptions: Exception hierarchy
    validation: Constructor input validators
    precision: Element type, sentinel and default tolerances
    tolerances: Tolerance tiers for entry-wise comparison
    logging_config: Opt-in logging setup
"""

from pylinalg.core.result import ErrorKind, Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    InvalidArgumentError,
)
from pylinalg.core.logging_config import setup_logging

__all__ = [
    # Result
    "Result",
    "ErrorKind",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "InvalidArgumentError",
    # Logging
    "setup_logging",
]
