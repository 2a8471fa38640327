"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def matrix_2x3():
    """The 2x3 matrix used throughout the examples."""
    return [[5, 6, 5], [7, 8, -1]]


@pytest.fixture
def returns_x():
    """Ten periodic returns."""
    return [0.003, 0.026, 0.015, -0.009, 0.014, 0.024, 0.015, 0.066, -0.014, 0.039]


@pytest.fixture
def returns_y():
    """Ten periodic returns of a second asset."""
    return [-0.005, 0.081, 0.04, -0.037, -0.061, 0.058, -0.049, -0.021, 0.062, 0.058]
