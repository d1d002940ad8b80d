"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_dimension: integer coercion, bool/float/negative rejection
    - check_array: conversion, dtype coercion, ragged/non-numeric rejection
    - check_2d: dimensionality check
    - warn_nonfinite: NaN/Inf warning
"""

import warnings

import numpy as np
import pytest

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    warn_nonfinite,
)


# ═══════════════════════════════════════════════════════════════════════
# check_dimension
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:
    """check_dimension accepts only non-negative integers."""

    @pytest.mark.parametrize("value", [0, 1, 7, np.int64(3), np.uint8(2)])
    def test_accepts_non_negative_integers(self, value):
        result = check_dimension(value, "nrows")
        assert result == int(value)
        assert type(result) is int

    def test_rejects_negative(self):
        with pytest.raises(ValidationError, match="nrows: must be >= 0, got -1"):
            check_dimension(-1, "nrows")

    @pytest.mark.parametrize("value", [True, False, np.bool_(True)])
    def test_rejects_bool(self, value):
        with pytest.raises(ValidationError, match="bool"):
            check_dimension(value, "ncols")

    @pytest.mark.parametrize("value", [2.0, "3", None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValidationError, match="ncols: expected a non-negative integer"):
            check_dimension(value, "ncols")


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-real data."""

    def test_nested_list_to_float64(self):
        result = check_array([[1, 2], [3, 4]], "data")
        assert result.shape == (2, 2)
        assert result.dtype == np.float64

    def test_float32_promoted(self):
        result = check_array(np.ones((2, 2), dtype=np.float32), "data")
        assert result.dtype == np.float64

    def test_returns_copy_for_float64_input(self):
        arr = np.zeros((2, 2))
        result = check_array(arr, "data")
        result[0, 0] = 1.0
        assert arr[0, 0] == 0.0

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError, match="data"):
            check_array([[1.0, 2.0], [3.0]], "data")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"]], "data")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([[True, False]], "data")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex dtype"):
            check_array([[1 + 2j]], "data")


# ═══════════════════════════════════════════════════════════════════════
# check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheck2D:
    """check_2d rejects anything but 2-D arrays."""

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "data")

    @pytest.mark.parametrize("shape", [(3,), (2, 2, 2)])
    def test_other_ndim_fails(self, shape):
        with pytest.raises(DimensionError, match="expected 2D") as excinfo:
            check_2d(np.zeros(shape), "data")
        assert excinfo.value.shape == shape


# ═══════════════════════════════════════════════════════════════════════
# warn_nonfinite
# ═══════════════════════════════════════════════════════════════════════


class TestWarnNonfinite:
    """warn_nonfinite warns once with NaN and Inf counts."""

    def test_finite_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert warn_nonfinite(np.ones((2, 2)), "data") is False

    def test_empty_is_silent(self):
        assert warn_nonfinite(np.zeros((0, 2)), "data") is False

    def test_nan_and_inf_counted(self):
        arr = np.array([[np.nan, 1.0], [np.inf, -np.inf]])
        with pytest.warns(UserWarning, match=r"1 NaN, 2 Inf"):
            assert warn_nonfinite(arr, "data") is True
