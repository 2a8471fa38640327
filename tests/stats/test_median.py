"""
Tests for median.
"""

import numpy as np
import pytest

from pyubique.core.exceptions import ArgumentError
from pyubique.stats import median


class TestMedian:

    def test_odd_length(self):
        assert median([5, 6, 3]) == 5

    def test_even_length(self):
        assert median([4, 1, 3, 2]) == 2.5

    def test_single_element(self):
        assert median([7]) == 7

    def test_matrix_rows(self, matrix_2x3):
        result = median(matrix_2x3)
        assert result.shape == (2, 1)
        np.testing.assert_array_equal(result, [[5], [7]])

    def test_matrix_columns(self, matrix_2x3):
        np.testing.assert_array_equal(median(matrix_2x3, dim=1), [[6, 7, 2]])

    def test_scalar_is_own_median(self):
        assert median(4.5) == 4.5

    def test_input_not_reordered(self):
        values = np.array([3.0, 1.0, 2.0])
        median(values)
        np.testing.assert_array_equal(values, [3.0, 1.0, 2.0])

    def test_matches_numpy(self, rng):
        for size in (9, 10):
            values = rng.normal(size=size)
            np.testing.assert_allclose(median(values), np.median(values))

    def test_empty(self):
        with pytest.raises(ArgumentError):
            median([])
