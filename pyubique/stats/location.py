"""
Median.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyubique.core.defaults import DEFAULT_REDUCE_DIM
from pyubique.core.kernel import vectorfun


def _median(a: NDArray) -> np.floating:
    ordered = np.sort(a)
    n = ordered.shape[0]
    mid = n // 2
    if n % 2 == 1:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def median(x: Any, dim: int = DEFAULT_REDUCE_DIM) -> Any:
    """
    Median value.

    Sorts a copy of each vector; odd lengths take the middle element, even
    lengths average the two middle elements. The input is never reordered.

    Parameters
    ----------
    x : scalar, vector or matrix
        A scalar is its own median.
    dim : int
        0 (default) per row, giving a column; 1 per column, giving a row.

    Examples
    --------
        median([5, 6, 3])                          # 5
        median([[5, 6, 5], [7, 8, -1]])            # [[5], [7]]
        median([[5, 6, 5], [7, 8, -1]], dim=1)     # [[6, 7, 2]]
    """
    return vectorfun(dim, x, _median)
