"""
Matrices and arrays.

Public API:
    size, nrows, ncols, numel          - Size queries
    iscolumn, isrow, issquare          - Orientation queries
    tomat, transpose, flatten          - Reshaping
    flipud, fliplr                     - Reordering
    cat, horzcat, vertcat              - Concatenation
    getcol, setcol, sub2ind, squeeze   - Indexing
    linspace, logspace                 - Spaced sequences
"""

from pyubique.matarrs.shape import (
    size,
    nrows,
    ncols,
    numel,
    iscolumn,
    isrow,
    issquare,
)
from pyubique.matarrs.construct import (
    tomat,
    transpose,
    flatten,
    flipud,
    fliplr,
    cat,
    horzcat,
    vertcat,
    getcol,
    setcol,
    sub2ind,
    squeeze,
    linspace,
    logspace,
)

__all__ = [
    "size",
    "nrows",
    "ncols",
    "numel",
    "iscolumn",
    "isrow",
    "issquare",
    "tomat",
    "transpose",
    "flatten",
    "flipud",
    "fliplr",
    "cat",
    "horzcat",
    "vertcat",
    "getcol",
    "setcol",
    "sub2ind",
    "squeeze",
    "linspace",
    "logspace",
]
