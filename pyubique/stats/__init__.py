"""
Descriptive statistics.

Public API:
    mean(x, dim)            - Arithmetic mean
    median(x, dim)          - Median
    moment(x, k, dim)       - k-th central moment
    skewness(x, flag, dim)  - Skewness (optionally bias corrected)
    kurtosis(x, flag, dim)  - Kurtosis (optionally bias corrected)
"""

from pyubique.stats.moments import mean, moment, skewness, kurtosis
from pyubique.stats.location import median

__all__ = [
    "mean",
    "median",
    "moment",
    "skewness",
    "kurtosis",
]
