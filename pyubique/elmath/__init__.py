"""
Elementary math functions.

Public API:
    exp(x)   - Exponential
    erf(x)   - Error function
    erfc(x)  - Complementary error function
"""

from pyubique.elmath.functions import exp, erf, erfc

__all__ = [
    "exp",
    "erf",
    "erfc",
]
