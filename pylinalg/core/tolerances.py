"""
Tolerance tiers for entry-wise matrix comparison.

- EXACT: bit-for-bit equality (e.g. put/get round trips, add commutativity)
- FP64: a handful of rounding steps
- FP64_ACCUMULATED: long reductions (large inner dimensions, norms)

Used by kernels.allclose() and by the test suite.
"""

from dataclasses import dataclass

from pylinalg.core.precision import DEFAULT_ATOL, DEFAULT_RTOL, EPSILON_64


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bitwise-equal float64 values',
)

FP64 = ToleranceTier(
    rtol=DEFAULT_RTOL,
    atol=DEFAULT_ATOL,
    name='fp64',
    description='Double precision, a few rounding steps apart',
)

FP64_ACCUMULATED = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='fp64_accumulated',
    description='Double precision after a long plain-summation reduction',
)

DEFAULT = FP64

# Above this many accumulated terms the worst-case plain-summation error
# bound (n * eps) exceeds FP64's rtol.
ACCUMULATION_THRESHOLD = int(DEFAULT_RTOL / EPSILON_64)


def select_tolerance(n_terms: int) -> ToleranceTier:
    """Select a tolerance tier for a reduction over n_terms values."""
    if n_terms <= 1:
        return EXACT
    if n_terms > ACCUMULATION_THRESHOLD:
        return FP64_ACCUMULATED
    return FP64
