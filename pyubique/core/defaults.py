"""
Default option values for pyubique.

This module is the SINGLE SOURCE OF TRUTH for the documented defaults of
optional trailing parameters (date patterns, reduction dimensions,
timestamp resolution). Import from here, never repeat raw literals.

Usage:
    from pyubique.core.defaults import DEFAULT_DATE_FORMAT, DIM_ROWS

    datestr(ts, fmt=DEFAULT_DATE_FORMAT)
"""

from dataclasses import dataclass


# Reduction axes: 0 operates per row, 1 operates per column
DIM_ROWS = 0
DIM_COLUMNS = 1
VALID_DIMS = frozenset({DIM_ROWS, DIM_COLUMNS})

# Statistics reduce each row by default
DEFAULT_REDUCE_DIM = DIM_ROWS

# Cumulative operations and differences walk down columns by default
DEFAULT_CUMULATIVE_DIM = DIM_COLUMNS

# Bias flag for skewness/kurtosis: 1 = plain ratio, 0 = bias corrected
DEFAULT_BIAS_FLAG = 1

# Number of points produced by linspace/logspace when none is given
DEFAULT_LINSPACE_POINTS = 100
DEFAULT_LOGSPACE_POINTS = 10


@dataclass(frozen=True)
class DateDefaults:
    """Defaults used by the date conversion routines."""
    format: str
    utc_offset_directive: str
    second_resolution_digits: int
    component_defaults: tuple[int, ...]


# Plain calendar date, e.g. '2014-12-31'
DEFAULT_DATE_FORMAT = '%Y-%m-%d'

DATE_DEFAULTS = DateDefaults(
    format=DEFAULT_DATE_FORMAT,
    # A pattern carrying this directive resolves parsed strings to UTC
    utc_offset_directive='%z',
    # Epoch values with exactly this many digits are in seconds, not ms
    second_resolution_digits=10,
    # [year, month, day, hour, minute, second, millisecond]; year is required
    component_defaults=(1, 1, 0, 0, 0, 0),
)

__all__ = [
    'DIM_ROWS',
    'DIM_COLUMNS',
    'VALID_DIMS',
    'DEFAULT_REDUCE_DIM',
    'DEFAULT_CUMULATIVE_DIM',
    'DEFAULT_BIAS_FLAG',
    'DEFAULT_LINSPACE_POINTS',
    'DEFAULT_LOGSPACE_POINTS',
    'DEFAULT_DATE_FORMAT',
    'DateDefaults',
    'DATE_DEFAULTS',
]
