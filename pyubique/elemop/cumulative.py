"""
Cumulative operations and adjacent differences.

All routines walk along columns by default (dim=1) and along rows with
dim=0. Vector input is processed as a whole regardless of dim.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pyubique.core.defaults import DEFAULT_CUMULATIVE_DIM
from pyubique.core.kernel import vectorfun


def cummax(x: Any, dim: int = DEFAULT_CUMULATIVE_DIM) -> Any:
    """
    Cumulative maximum.

    Parameters
    ----------
    x : vector or matrix
    dim : int
        1 (default) works down each column, 0 along each row.

    Examples
    --------
        cummax([5, 6, 3])                       # [5, 6, 6]
        cummax([[5, 6, 5], [7, 8, -1]])         # [[5, 7], [6, 8], [5, 5]]
        cummax([[5, 6, 5], [7, 8, -1]], dim=0)  # [[5, 6, 6], [7, 8, 8]]
    """
    return vectorfun(dim, x, np.maximum.accumulate)


def cummin(x: Any, dim: int = DEFAULT_CUMULATIVE_DIM) -> Any:
    """Cumulative minimum. Same layout rules as cummax()."""
    return vectorfun(dim, x, np.minimum.accumulate)


def cumsum(x: Any, dim: int = DEFAULT_CUMULATIVE_DIM) -> Any:
    """Cumulative sum. Same layout rules as cummax()."""
    return vectorfun(dim, x, np.cumsum)


def diff(x: Any, dim: int = DEFAULT_CUMULATIVE_DIM) -> Any:
    """
    Differences between adjacent elements.

    Examples
    --------
        diff([5, 6, 3])                       # [1, -3]
        diff([[5, 6, 5], [7, 8, -1]])         # [[2], [2], [-6]]
        diff([[5, 6, 5], [7, 8, -1]], dim=0)  # [[1, -1], [1, -9]]
    """
    return vectorfun(dim, x, np.diff)
