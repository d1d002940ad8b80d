"""
pylinalg: a minimal dense-matrix library.

Allocates 2-D grids of double-precision reals, reads and writes single
entries with bounds checking, and computes entry-wise addition, L1/L2
norms and the matrix product.

Submodules:
    core: Result envelope, exceptions, validation, precision, logging
    matrix: Matrix storage and numeric kernels
"""

import logging

__version__ = "0.1.0"

from pylinalg.core import (
    ErrorKind,
    Result,
    PyLinalgError,
    ValidationError,
    DimensionError,
    InvalidArgumentError,
    setup_logging,
)
from pylinalg.matrix import (
    Matrix,
    new_matrix,
    init_matrix,
    destroy,
    identity,
    get,
    put,
    add,
    l1,
    l2,
    mult,
    allclose,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
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
    "Result",
    "ErrorKind",
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "InvalidArgumentError",
    "setup_logging",
]
