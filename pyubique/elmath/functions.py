"""
Elementary math functions applied element-wise.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from scipy import special

from pyubique.core.kernel import arrayfun
from pyubique.elemop.arithmetic import minus


def exp(x: Any) -> Any:
    """
    Exponential of every element.

        exp(6)            # 403.4287934927351
        exp([5, 6, 3])    # [148.413..., 403.428..., 20.085...]
    """
    return arrayfun(x, np.exp)


def erfc(x: Any) -> Any:
    """
    Complementary error function, 1 - erf(x), of every element.

    Evaluated with scipy.special.erfc, which stays accurate in the tail
    where computing 1 - erf(x) directly would cancel.
    """
    return arrayfun(x, special.erfc)


def erf(x: Any) -> Any:
    r"""
    Error function of every element.

    .. math::

        \operatorname{erf}(x) = \frac{2}{\sqrt{\pi}} \int_0^x e^{-t^2}\,dt

    Computed as ``1 - erfc(x)``.

        erf(0.5)   # 0.5204998778130465
        erf(-2)    # -0.9953222650189527
    """
    return minus(1.0, erfc(x))
