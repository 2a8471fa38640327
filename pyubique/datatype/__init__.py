"""
Data types and date conversions.

Public API:
    datenum(d, fmt)  - Date string or components -> epoch seconds
    datestr(d, fmt)  - Epoch seconds -> formatted UTC string
    datevec(d, fmt)  - Epoch or date string -> component vector
    now()            - Current epoch seconds
    isnumber, islogical, isstring, isvector, isarray, ismatrix, isempty
"""

from pyubique.datatype.dates import datenum, datestr, datevec, now
from pyubique.datatype.predicates import (
    isnumber,
    islogical,
    isstring,
    isvector,
    isarray,
    ismatrix,
    isempty,
)

__all__ = [
    "datenum",
    "datestr",
    "datevec",
    "now",
    "isnumber",
    "islogical",
    "isstring",
    "isvector",
    "isarray",
    "ismatrix",
    "isempty",
]
