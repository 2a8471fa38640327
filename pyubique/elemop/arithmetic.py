"""
Element-wise arithmetic under the kernel broadcasting rules.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pyubique.core.kernel import broadcast


def plus(x: Any, y: Any) -> Any:
    """Addition, x + y."""
    return broadcast(x, y, np.add)


def minus(x: Any, y: Any) -> Any:
    """
    Subtraction, x - y.

        minus([5, 6, 3], 1)                     # [4, 5, 2]
        minus([1, 2], [[5, 6], [7, 8]])         # [[-4, -4], [-6, -6]]
    """
    return broadcast(x, y, np.subtract)


def times(x: Any, y: Any) -> Any:
    """Element-wise multiplication, x * y."""
    return broadcast(x, y, np.multiply)


def rdivide(x: Any, y: Any) -> Any:
    """
    Element-wise right division, x / y.

    Division by zero yields inf or NaN, never an exception.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return broadcast(x, y, np.true_divide)
