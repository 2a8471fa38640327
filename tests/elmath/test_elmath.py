"""
Tests for exp, erf and erfc.
"""

import math

import numpy as np
import pytest

from pyubique.core.exceptions import FormatError
from pyubique.elmath import erf, erfc, exp


class TestExp:

    def test_scalar(self):
        np.testing.assert_allclose(exp(6), 403.4287934927351, rtol=1e-15)

    def test_vector(self):
        np.testing.assert_allclose(exp([5, 6, 3]), np.exp([5.0, 6.0, 3.0]))

    def test_matrix_shape(self, matrix_2x3):
        assert exp(matrix_2x3).shape == (2, 3)

    def test_zero(self):
        assert exp(0) == 1.0


class TestErf:

    def test_zero(self):
        assert erf(0) == 0.0

    @pytest.mark.parametrize("value", [-2.0, -0.3, 0.5, 1.0, 3.0])
    def test_matches_math(self, value):
        np.testing.assert_allclose(erf(value), math.erf(value), rtol=1e-12, atol=1e-15)

    def test_odd(self):
        values = [0.1, 0.7, 1.9]
        np.testing.assert_allclose(erf([-v for v in values]), -np.asarray(erf(values)))

    def test_matrix(self):
        result = erf([[0.5, -2], [1, 0]])
        assert result.shape == (2, 2)
        np.testing.assert_allclose(result[0, 0], 0.5204998778130465, rtol=1e-12)

    def test_bounded(self, rng):
        result = erf(rng.normal(scale=5.0, size=40))
        assert np.all(np.abs(result) <= 1.0)


class TestErfc:

    def test_complement(self):
        values = [-1.5, 0.0, 0.25, 2.0]
        np.testing.assert_allclose(np.asarray(erfc(values)) + erf(values), 1.0)

    def test_tail(self):
        np.testing.assert_allclose(erfc(10), math.erfc(10), rtol=1e-12)

    def test_string_rejected(self):
        with pytest.raises(FormatError):
            erfc("1")
