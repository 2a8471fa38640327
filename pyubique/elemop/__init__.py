"""
Element-wise operations.

Public API:
    round(x, n)    - Round to n decimals, ties away from zero
    ceil(x, n)     - Round toward +inf at n decimals
    floor(x, n)    - Round toward -inf at n decimals
    cummax(x, dim) - Cumulative maximum
    cummin(x, dim) - Cumulative minimum
    cumsum(x, dim) - Cumulative sum
    diff(x, dim)   - Adjacent differences
    eq, ne, ge, gt, le, lt - Element-wise comparisons
    plus, minus, times, rdivide - Element-wise arithmetic
"""

from pyubique.elemop.rounding import round, ceil, floor
from pyubique.elemop.cumulative import cummax, cummin, cumsum, diff
from pyubique.elemop.relational import eq, ne, ge, gt, le, lt
from pyubique.elemop.arithmetic import plus, minus, times, rdivide

__all__ = [
    "round",
    "ceil",
    "floor",
    "cummax",
    "cummin",
    "cumsum",
    "diff",
    "eq",
    "ne",
    "ge",
    "gt",
    "le",
    "lt",
    "plus",
    "minus",
    "times",
    "rdivide",
]
