"""
Date and time conversions between epoch timestamps, component vectors
and formatted strings.

Patterns use Python strftime/strptime directives ('%Y-%m-%d', '%H:%M:%S',
'%z', ...). All arithmetic is done in UTC on aware datetime objects.

Component vectors are [year, month, day, hour, minute, second, millisecond]
with a 1-based month. Conversions round-trip:

    datevec(datenum([2015, 4, 5, 12, 20, 30, 0])) == [2015, 4, 5, 12, 20, 30, 0]
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any
import numpy as np

from pyubique.core.defaults import DATE_DEFAULTS, DEFAULT_DATE_FORMAT
from pyubique.core.exceptions import ArgumentError, FormatError, ShapeError
from pyubique.core.kernel import arrayfun
from pyubique.core.operand import Operand, is_scalar_value
from pyubique.core.validation import check_rectangular, check_required


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_N_COMPONENTS = 7
_SEQUENCE_TYPES = (list, tuple, np.ndarray)


def _is_timestamp(value: Any) -> bool:
    return is_scalar_value(value) and not isinstance(value, (bool, np.bool_))


def _epoch_seconds(moment: datetime) -> int:
    """Whole seconds since the epoch, floored."""
    delta = moment - EPOCH
    return delta.days * 86400 + delta.seconds


def _parse(text: str, fmt: str | None) -> datetime:
    if not fmt:
        raise FormatError(
            f"format required to parse date string {text!r}",
            value_type='str',
        )
    try:
        return datetime.strptime(text, fmt)
    except ValueError as e:
        raise FormatError(
            f"cannot parse {text!r} with format {fmt!r}: {e}",
            value_type='str',
        ) from e


# ---------------------------------------------------------------------------
# datenum
# ---------------------------------------------------------------------------


def _components_to_epoch(components: list[Any]) -> int:
    n = len(components)
    if n == 0:
        raise ArgumentError("d: not enough input arguments")
    if n > _N_COMPONENTS:
        raise ShapeError(
            f"d: expected at most {_N_COMPONENTS} date components, got {n}",
            expected=_N_COMPONENTS,
            actual=n,
        )

    fields = list(components) + list(DATE_DEFAULTS.component_defaults[n - 1:])
    year, month, day, hour, minute, second, millisecond = fields

    # Out-of-range months and days roll over into the next unit
    year_offset, month_index = divmod(int(month) - 1, 12)
    start = datetime(int(year) + year_offset, month_index + 1, 1, tzinfo=timezone.utc)
    moment = start + timedelta(
        days=float(day) - 1,
        hours=float(hour),
        minutes=float(minute),
        seconds=float(second),
        milliseconds=float(millisecond),
    )
    return _epoch_seconds(moment)


def _string_to_epoch(text: str, fmt: str | None) -> int:
    parsed = _parse(text, fmt)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return _epoch_seconds(parsed)


def _to_epoch(value: Any, fmt: str | None) -> int | list[int]:
    if isinstance(value, str):
        return _string_to_epoch(value, fmt)

    if isinstance(value, np.ndarray):
        value = value.tolist()

    if isinstance(value, (list, tuple)) and value:
        if all(_is_timestamp(el) for el in value):
            return _components_to_epoch(list(value))
        if all(isinstance(el, _SEQUENCE_TYPES) for el in value):
            check_rectangular(value, 'd')
            return [_to_epoch(row, fmt) for row in value]

    raise FormatError(
        "d: expected a date string, a component vector or a matrix of component vectors",
        value_type=type(value).__name__,
    )


def datenum(d: Any, fmt: str | None = None) -> int | list[int]:
    """
    Convert a date to seconds since the Unix epoch (UTC).

    Parameters
    ----------
    d : str, list of str, component vector or matrix of component vectors
        Components are [year, month, day, hour, minute, second, millisecond];
        trailing components may be omitted (month and day default to 1,
        the rest to 0). Components are interpreted in UTC.
    fmt : str, optional
        strptime pattern, required for string input. Strings without a
        '%z' offset are read as UTC.

    Returns
    -------
    int for a single date, list of int for several.

    Raises
    ------
    ArgumentError
        If d is missing.
    FormatError
        If a string is given without fmt, or d has an unsupported type.

    Examples
    --------
        datenum('31-12-2014', '%d-%m-%Y')                     # 1419984000
        datenum(['31-12-2014', '31-01-2015'], '%d-%m-%Y')     # [1419984000, 1422662400]
        datenum([2015, 4, 5, 12, 20, 30, 0])                  # 1428236430
    """
    check_required(d, 'd')

    if isinstance(d, (list, tuple)) and all(isinstance(el, str) for el in d):
        return [_string_to_epoch(el, fmt) for el in d]

    return _to_epoch(d, fmt)


# ---------------------------------------------------------------------------
# datestr
# ---------------------------------------------------------------------------


def _format(timestamp: Any, fmt: str) -> str:
    moment = EPOCH + timedelta(seconds=float(timestamp))
    return moment.strftime(fmt)


def datestr(d: Any, fmt: str = DEFAULT_DATE_FORMAT) -> str | list[Any]:
    """
    Format epoch seconds as UTC text.

    Parameters
    ----------
    d : number, vector or matrix of epoch seconds
    fmt : str
        strftime pattern. Default '%Y-%m-%d'.

    Returns
    -------
    str for a number; a (nested) list of str otherwise, same layout as d.

    Examples
    --------
        datestr(1419984000)                                  # '2014-12-31'
        datestr([1419984000, 1422662400], '%d-%b-%y')        # ['31-Dec-14', '31-Jan-15']
    """
    check_required(d, 'd')

    if _is_timestamp(d):
        return _format(d, fmt)

    if not isinstance(d, _SEQUENCE_TYPES):
        raise FormatError(
            "d: input must be a Unix timestamp or an array of timestamps",
            value_type=type(d).__name__,
        )

    op = Operand.from_value(d, 'd')
    return arrayfun(op, _format, fmt, otype=object).tolist()


# ---------------------------------------------------------------------------
# datevec
# ---------------------------------------------------------------------------


def _to_components(value: Any, fmt: str | None) -> list[int]:
    if isinstance(value, str):
        parsed = _parse(value, fmt)
        if DATE_DEFAULTS.utc_offset_directive in fmt:
            parsed = parsed.astimezone(timezone.utc)
        moment = parsed
    elif _is_timestamp(value):
        milliseconds = float(value)
        if len(str(abs(int(value)))) == DATE_DEFAULTS.second_resolution_digits:
            milliseconds *= 1000
        moment = EPOCH + timedelta(milliseconds=milliseconds)
    else:
        raise FormatError(
            "d: input must be a string or Unix timestamp",
            value_type=type(value).__name__,
        )

    return [
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        moment.microsecond // 1000,
    ]


def datevec(d: Any, fmt: str | None = None) -> list[int] | list[list[int]]:
    """
    Split a date into [year, month, day, hour, minute, second, millisecond].

    Parameters
    ----------
    d : str, number, or list of str/number
        Numbers are epoch timestamps: 10-digit values are seconds, anything
        else is milliseconds. Lists may mix numbers and strings.
    fmt : str, optional
        strptime pattern, required for string input. When it contains
        '%z' the parsed time is converted to UTC; otherwise the wall-clock
        fields are taken as written (local time).

    Returns
    -------
    One component vector, or a list of them for list input.

    Examples
    --------
        datevec(1428236430)                                      # [2015, 4, 5, 12, 20, 30, 0]
        datevec(1428236430579)                                   # [2015, 4, 5, 12, 20, 30, 579]
        datevec('2023-08-25T14:45:00+02:00', '%Y-%m-%dT%H:%M:%S%z')
        # [2023, 8, 25, 12, 45, 0, 0]
    """
    check_required(d, 'd')

    if isinstance(d, _SEQUENCE_TYPES):
        return [_to_components(item, fmt) for item in d]

    return _to_components(d, fmt)


def now() -> int:
    """Current time as whole seconds since the Unix epoch."""
    return _epoch_seconds(datetime.now(timezone.utc))
