"""
Tests for central moments, skewness and kurtosis.

Bias-corrected values are checked against scipy.stats, which uses the same
sample corrections.
"""

import warnings

import numpy as np
import pytest
from scipy import stats as sps

from pyubique.core.exceptions import ArgumentError
from pyubique.stats import kurtosis, mean, moment, skewness


# ═══════════════════════════════════════════════════════════════════════
# mean / moment
# ═══════════════════════════════════════════════════════════════════════


class TestMean:

    def test_vector(self):
        np.testing.assert_allclose(mean([5, 6, 3]), 14 / 3)

    def test_matrix_rows(self, matrix_2x3):
        result = mean(matrix_2x3)
        assert result.shape == (2, 1)
        np.testing.assert_allclose(result, [[16 / 3], [14 / 3]])

    def test_matrix_columns(self, matrix_2x3):
        np.testing.assert_allclose(mean(matrix_2x3, dim=1), [[6, 7, 2]])


class TestMoment:

    def test_fourth(self):
        np.testing.assert_allclose(moment([1, 2, 3, 4, 5], 4), 6.8)

    def test_columns(self):
        result = moment([[0.003, 0.026], [0.015, -0.009]], 2, dim=1)
        np.testing.assert_allclose(result, [[3.6e-05, 0.00030625]], rtol=1e-10)

    def test_first_is_zero(self, returns_x):
        np.testing.assert_allclose(moment(returns_x, 1), 0.0, atol=1e-15)

    def test_second_is_biased_variance(self, rng):
        values = rng.normal(size=25)
        np.testing.assert_allclose(moment(values, 2), np.var(values))

    def test_scalar_is_nan(self):
        assert np.isnan(moment(3, 2))

    def test_missing_order(self, returns_x):
        with pytest.raises(ArgumentError):
            moment(returns_x, None)


# ═══════════════════════════════════════════════════════════════════════
# kurtosis
# ═══════════════════════════════════════════════════════════════════════


class TestKurtosis:

    def test_vector(self, returns_x):
        np.testing.assert_allclose(kurtosis(returns_x), 3.037581, rtol=1e-6)

    def test_matches_scipy(self, returns_y):
        expected = sps.kurtosis(returns_y, fisher=False, bias=True)
        np.testing.assert_allclose(kurtosis(returns_y), expected, rtol=1e-12)

    def test_bias_corrected(self, returns_x):
        expected = sps.kurtosis(returns_x, fisher=False, bias=False)
        np.testing.assert_allclose(kurtosis(returns_x, flag=0), expected, rtol=1e-12)

    def test_matrix_rows(self, returns_x, returns_y):
        result = kurtosis([returns_x, returns_y])
        assert result.shape == (2, 1)
        np.testing.assert_allclose(result[0, 0], 3.037581, rtol=1e-6)
        np.testing.assert_allclose(
            result[1, 0], sps.kurtosis(returns_y, fisher=False), rtol=1e-12
        )

    def test_matrix_columns(self):
        result = kurtosis([[0.003, 0.026], [0.015, -0.009]], 1, 1)
        assert result.shape == (1, 2)
        # two observations always give a kurtosis of exactly one
        np.testing.assert_allclose(result, [[1.0, 1.0]])

    def test_constant_is_nan(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            assert np.isnan(kurtosis([1, 1, 1, 1, 1]))

    def test_scalar_is_nan(self):
        assert np.isnan(kurtosis(2.5))

    def test_small_sample_correction_warns(self):
        with pytest.warns(RuntimeWarning, match="at least 4"):
            kurtosis([1, 2, 3], flag=0)

    def test_small_sample_warning_points_at_caller(self):
        with pytest.warns(RuntimeWarning) as record:
            kurtosis([[1, 2, 3], [4, 5, 7]], flag=0)
        assert len(record) == 1
        assert record[0].filename == __file__

    def test_small_columns_warn(self):
        with pytest.warns(RuntimeWarning, match="got 2"):
            kurtosis([[1, 2, 3, 4, 5], [2, 3, 5, 7, 11]], flag=0, dim=1)

    def test_long_rows_do_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            kurtosis([[1, 2, 3, 4, 5], [2, 3, 5, 7, 11]], flag=0)

    def test_default_flag_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            kurtosis([1, 2, 4])


# ═══════════════════════════════════════════════════════════════════════
# skewness
# ═══════════════════════════════════════════════════════════════════════


class TestSkewness:

    def test_matches_scipy(self, returns_x):
        np.testing.assert_allclose(skewness(returns_x), sps.skew(returns_x), rtol=1e-12)

    def test_bias_corrected(self, returns_y):
        expected = sps.skew(returns_y, bias=False)
        np.testing.assert_allclose(skewness(returns_y, flag=0), expected, rtol=1e-12)

    def test_symmetric_is_zero(self):
        np.testing.assert_allclose(skewness([1, 2, 3, 4, 5]), 0.0, atol=1e-15)

    def test_sign(self):
        assert skewness([1, 1, 1, 10]) > 0
        assert skewness([-10, 1, 1, 1]) < 0

    def test_matrix_columns(self, rng):
        data = rng.normal(size=(8, 3))
        result = skewness(data, dim=1)
        assert result.shape == (1, 3)
        np.testing.assert_allclose(result[0], sps.skew(data, axis=0), rtol=1e-10)

    def test_constant_is_nan(self):
        assert np.isnan(skewness([2, 2, 2]))

    def test_small_sample_correction_warns(self):
        with pytest.warns(RuntimeWarning, match="at least 3"):
            skewness([1, 2], flag=0)

    def test_small_sample_warning_points_at_caller(self):
        with pytest.warns(RuntimeWarning) as record:
            skewness([[1, 2], [3, 5]], flag=0)
        assert len(record) == 1
        assert record[0].filename == __file__
