"""
Tests for precision constants and tolerance tiers.
"""

import numpy as np
import pytest

from pylinalg.core.precision import (
    DEFAULT_ATOL,
    DEFAULT_RTOL,
    DTYPE,
    EPSILON_64,
    SENTINEL,
    is_close,
)
from pylinalg.core.tolerances import (
    ACCUMULATION_THRESHOLD,
    DEFAULT,
    EXACT,
    FP64,
    FP64_ACCUMULATED,
    select_tolerance,
)


class TestConstants:
    """Element type, sentinel and epsilon constants."""

    def test_dtype_is_float64(self):
        assert DTYPE is np.float64

    def test_sentinel_is_zero(self):
        assert SENTINEL == 0.0

    def test_epsilon(self):
        assert EPSILON_64 == np.finfo(np.float64).eps


class TestIsClose:
    """is_close() applies |a - b| <= atol + rtol * |b|."""

    def test_equal_values(self):
        assert is_close(1.0, 1.0)

    def test_within_rtol(self):
        assert is_close(1.0 + 1e-13, 1.0)

    def test_outside_rtol(self):
        assert not is_close(1.0 + 1e-9, 1.0)

    def test_near_zero_uses_atol(self):
        assert is_close(DEFAULT_ATOL / 2, 0.0)
        assert not is_close(DEFAULT_ATOL * 10, 0.0)

    def test_array_input(self):
        result = is_close(np.array([1.0, 2.0]), np.array([1.0, 2.5]))
        np.testing.assert_array_equal(result, [True, False])


class TestToleranceTiers:
    """Tier presets and select_tolerance() thresholds."""

    def test_exact_is_zero(self):
        assert EXACT.rtol == 0.0 and EXACT.atol == 0.0

    def test_default_is_fp64(self):
        assert DEFAULT is FP64
        assert FP64.rtol == DEFAULT_RTOL

    def test_accumulated_is_looser(self):
        assert FP64_ACCUMULATED.rtol > FP64.rtol

    @pytest.mark.parametrize("n_terms,expected", [
        (0, EXACT),
        (1, EXACT),
        (2, FP64),
        (ACCUMULATION_THRESHOLD, FP64),
        (ACCUMULATION_THRESHOLD + 1, FP64_ACCUMULATED),
    ])
    def test_select_tolerance(self, n_terms, expected):
        assert select_tolerance(n_terms) is expected
