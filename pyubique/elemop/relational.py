"""
Element-wise relational operators.

Each operator pairs its operands with core.kernel.broadcast(), so a
scalar compares against every element, a vector compares against every
row of a matrix, and equal-shaped operands compare element by element.
Scalar comparisons return a bool; everything else returns a bool array.
"""

from __future__ import annotations

import operator
from typing import Any

from pyubique.core.kernel import broadcast


def eq(x: Any, y: Any) -> Any:
    """Equality, x == y."""
    return broadcast(x, y, operator.eq, otype=bool)


def ne(x: Any, y: Any) -> Any:
    """Inequality, x != y."""
    return broadcast(x, y, operator.ne, otype=bool)


def ge(x: Any, y: Any) -> Any:
    """
    Greater than or equal, x >= y.

    Examples
    --------
        ge(5, 5)                                  # True
        ge(5, [5, 6, 3])                          # [True, False, True]
        ge([[5, 6], [-1, 2]], [[5, 6], [3, 5]])   # [[True, True], [False, False]]

    Raises
    ------
    ShapeError
        If both operands are non-scalar and their shapes disagree.
    """
    return broadcast(x, y, operator.ge, otype=bool)


def gt(x: Any, y: Any) -> Any:
    """Greater than, x > y."""
    return broadcast(x, y, operator.gt, otype=bool)


def le(x: Any, y: Any) -> Any:
    """Less than or equal, x <= y."""
    return broadcast(x, y, operator.le, otype=bool)


def lt(x: Any, y: Any) -> Any:
    """
    Less than, x < y.

        lt(5, [5, 6, 3])   # [False, True, False]
    """
    return broadcast(x, y, operator.lt, otype=bool)
