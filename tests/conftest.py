"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_matrix():
    """2x2 matrix with mixed-sign entries [[-1, 2], [3, -4]]."""
    return Matrix.from_rows([[-1.0, 2.0], [3.0, -4.0]])


@pytest.fixture
def random_square(rng):
    """5x5 matrix of standard normal entries."""
    return Matrix.from_array(rng.standard_normal((5, 5)))


@pytest.fixture
def empty_matrix():
    """Matrix with a zero dimension and therefore no storage."""
    return Matrix(0, 3)
