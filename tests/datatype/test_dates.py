"""
Tests for datenum, datestr, datevec and now.
"""

import time

import numpy as np
import pytest

from pyubique.core.exceptions import ArgumentError, FormatError, ShapeError
from pyubique.datatype import datenum, datestr, datevec, now


# ═══════════════════════════════════════════════════════════════════════
# datenum
# ═══════════════════════════════════════════════════════════════════════


class TestDatenum:

    def test_string(self):
        assert datenum('31-12-2014', '%d-%m-%Y') == 1419984000

    def test_string_list(self):
        result = datenum(['31-12-2014', '31-01-2015'], '%d-%m-%Y')
        assert result == [1419984000, 1422662400]

    def test_components(self):
        assert datenum([2015, 4, 5, 12, 20, 30, 0]) == 1428236430

    def test_component_matrix(self):
        result = datenum([[2013, 1, 31], [2014, 2, 28], [2015, 4, 30]])
        assert result == [1359590400, 1393545600, 1430352000]

    def test_component_array(self):
        assert datenum(np.array([2015, 4, 5, 12, 20, 30])) == 1428236430

    def test_trailing_components_default(self):
        assert datenum([2015]) == datenum([2015, 1, 1, 0, 0, 0, 0])

    def test_month_rollover(self):
        assert datenum([2014, 13, 1]) == datenum([2015, 1, 1])

    def test_day_rollover(self):
        assert datenum([2015, 1, 32]) == datenum([2015, 2, 1])

    def test_utc_offset(self):
        result = datenum('2015-04-05 14:20:30+0200', '%Y-%m-%d %H:%M:%S%z')
        assert result == 1428236430

    def test_string_without_format(self):
        with pytest.raises(FormatError, match="format required"):
            datenum('31-12-2014')

    def test_unparseable_string(self):
        with pytest.raises(FormatError):
            datenum('2014/12/31', '%d-%m-%Y')

    def test_too_many_components(self):
        with pytest.raises(ShapeError):
            datenum([2015, 4, 5, 12, 20, 30, 0, 1])

    def test_ragged_matrix(self):
        with pytest.raises(ShapeError):
            datenum([[2013, 1, 31], [2014, 2]])

    def test_missing(self):
        with pytest.raises(ArgumentError):
            datenum(None)

    def test_unsupported(self):
        with pytest.raises(FormatError):
            datenum({'year': 2015})


# ═══════════════════════════════════════════════════════════════════════
# datestr
# ═══════════════════════════════════════════════════════════════════════


class TestDatestr:

    def test_default_format(self):
        assert datestr(1419984000) == '2014-12-31'

    def test_vector_with_format(self):
        result = datestr([1419984000, 1422662400], '%d-%b-%y')
        assert result == ['31-Dec-14', '31-Jan-15']

    def test_matrix_layout(self):
        result = datestr([[1419984000], [1422662400]])
        assert result == [['2014-12-31'], ['2015-01-31']]

    def test_time_of_day(self):
        assert datestr(1428236430, '%H:%M:%S') == '12:20:30'

    def test_string_rejected(self):
        with pytest.raises(FormatError):
            datestr('2014-12-31')


# ═══════════════════════════════════════════════════════════════════════
# datevec
# ═══════════════════════════════════════════════════════════════════════


class TestDatevec:

    def test_seconds(self):
        assert datevec(1428236430) == [2015, 4, 5, 12, 20, 30, 0]

    def test_milliseconds(self):
        assert datevec(1428236430579) == [2015, 4, 5, 12, 20, 30, 579]

    def test_string(self):
        result = datevec('2015-04-05 12:20', '%Y-%m-%d %H:%M')
        assert result == [2015, 4, 5, 12, 20, 0, 0]

    def test_utc_offset_converted(self):
        result = datevec('2023-08-25T14:45:00+02:00', '%Y-%m-%dT%H:%M:%S%z')
        assert result == [2023, 8, 25, 12, 45, 0, 0]

    def test_list(self):
        result = datevec([1428236430, '2014-12-31'], '%Y-%m-%d')
        assert result == [[2015, 4, 5, 12, 20, 30, 0], [2014, 12, 31, 0, 0, 0, 0]]

    def test_string_without_format(self):
        with pytest.raises(FormatError):
            datevec('2015-04-05')

    def test_unsupported(self):
        with pytest.raises(FormatError):
            datevec(object())


class TestRoundTrip:

    @pytest.mark.parametrize("components", [
        [2015, 4, 5, 12, 20, 30, 0],
        [2001, 9, 10, 0, 0, 0, 0],
        [2099, 12, 31, 23, 59, 59, 0],
    ])
    def test_components(self, components):
        assert datevec(datenum(components)) == components

    def test_string(self):
        seconds = datenum('2020-02-29', '%Y-%m-%d')
        assert datestr(seconds) == '2020-02-29'


class TestNow:

    def test_close_to_clock(self):
        assert isinstance(now(), int)
        assert abs(now() - time.time()) < 5
