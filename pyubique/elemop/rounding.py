"""
Rounding to a number of decimal places.

All three routines scale by 10**n, round the scaled value, scale back and
normalize negative zero to positive zero, so ``round(-0.2) == 0.0`` rather
than ``-0.0``.
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np

from pyubique.core.kernel import arrayfun
from pyubique.core.validation import check_required


def _half_away_from_zero(value: Any) -> Any:
    """Round to the nearest integer, ties away from zero."""
    magnitude = np.abs(value)
    whole = np.floor(magnitude)
    # magnitude - whole is exact for doubles, so ties are detected exactly
    whole = whole + (magnitude - whole >= 0.5)
    return np.copysign(whole, value)


def _scaled(rounder: Callable[[Any], Any], n: int) -> Callable[[Any], Any]:
    scale = 10.0 ** n

    def apply(value: Any) -> Any:
        result = rounder(value * scale) / scale
        return result + 0.0

    return apply


def round(x: Any, n: int = 0) -> Any:
    """
    Round to the nearest value with ``n`` decimals, ties away from zero.

    Parameters
    ----------
    x : scalar, vector or matrix
    n : int
        Number of decimal places. Default 0.

    Examples
    --------
        round(-2.34567, 2)                  # -2.35
        round([-1.9, -0.2, 3.4, 5.6, 7.0])  # [-2, 0, 3, 6, 7]
    """
    check_required(x, 'x')
    return arrayfun(x, _scaled(_half_away_from_zero, n))


def ceil(x: Any, n: int = 0) -> Any:
    """
    Round toward positive infinity with ``n`` decimals.

        ceil([[4.5134, -1.4345], [3.7809, 0.0134]], 2)
        # [[4.52, -1.43], [3.79, 0.02]]
    """
    check_required(x, 'x')
    return arrayfun(x, _scaled(np.ceil, n))


def floor(x: Any, n: int = 0) -> Any:
    """Round toward negative infinity with ``n`` decimals."""
    check_required(x, 'x')
    return arrayfun(x, _scaled(np.floor, n))
