"""Ordering checks over calendar dates and timestamps.

Values and bounds may each be a `date` or a `datetime`, in any combination:

- a date bound checked against a datetime value counts as midnight of that
  date (in the value's timezone, if any)
- a datetime bound checked against a date value is truncated to its date

Both checks are INCLUSIVE: a value equal to the bound passes.

Bounds are always quoted as short dates. The value is quoted as a short date
too, except when a timestamp fails ensure_before: then the full timestamp is
shown (datetime_format), since the time of day is what made it too late.

Example:
    from datetime import date
    from guardclauses import ensure_date_in_range

    def schedule(start: date) -> None:
        ensure_date_in_range(start, date.today(), date.today() + timedelta(days=365))
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import NoReturn, TypeVar

from guardclauses._callsite import capture
from guardclauses._format import format_short_date, format_value
from guardclauses._guard import build_message, reject
from guardclauses.exceptions import OutOfRangeError

D = TypeVar("D", date, datetime)

_RANGE_NAMES = ("ensure_in_range", "ensure_date_in_range")


def _comparable(value: date, bound: date) -> date:
    """Bring bound into the same family as value."""
    if not isinstance(value, date) or not isinstance(bound, date):
        raise TypeError(
            f"Date guards compare date or datetime values, "
            f"got {type(value).__name__} and {type(bound).__name__}"
        )
    if isinstance(value, datetime):
        if isinstance(bound, datetime):
            return bound
        return datetime.combine(bound, time.min, tzinfo=value.tzinfo)
    if isinstance(bound, datetime):
        return bound.date()
    return bound


def _reject(
    guard: str,
    callee: tuple[str, ...],
    value: date,
    bound: date,
    rendered: str,
    requirement: str,
    message: str | None,
    parameter: str | None,
    method: str | None,
) -> NoReturn:
    site = capture(parameter, method, callee=callee)
    error = OutOfRangeError(
        build_message(
            message,
            site,
            f"waarde {rendered}",
            f"{requirement} {format_short_date(bound)} zijn.",
        ),
        parameter=site.parameter,
        method=site.method,
        actual_value=value,
        bounds=(bound,),
    )
    reject(error, guard)


def _check_after(value, bound, guard, callee, message, parameter, method) -> None:
    if value < _comparable(value, bound):
        _reject(
            guard, callee, value, bound,
            format_short_date(value), "Datum moet na",
            message, parameter, method,
        )


def _check_before(value, bound, guard, callee, message, parameter, method) -> None:
    if value > _comparable(value, bound):
        _reject(
            guard, callee, value, bound,
            format_value(value), "Datum moet voor",
            message, parameter, method,
        )


def ensure_after(
    value: D,
    bound: date | datetime,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> D:
    """Ensure that value is on or after bound.

    Raises:
        OutOfRangeError: If value < bound.
        TypeError: If value or bound is not a date/datetime.
    """
    _check_after(value, bound, "ensure_after", ("ensure_after",), message, parameter, method)
    return value


def ensure_before(
    value: D,
    bound: date | datetime,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> D:
    """Ensure that value is on or before bound.

    Raises:
        OutOfRangeError: If value > bound.
        TypeError: If value or bound is not a date/datetime.
    """
    _check_before(value, bound, "ensure_before", ("ensure_before",), message, parameter, method)
    return value


def ensure_in_range(
    value: D,
    after: date | datetime,
    before: date | datetime,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> D:
    """Ensure that after <= value <= before.

    The upper bound is checked first: when value violates both bounds, the
    error reports `before`.

    Raises:
        OutOfRangeError: For the first violated bound.
    """
    _check_before(value, before, "ensure_in_range", _RANGE_NAMES, message, parameter, method)
    _check_after(value, after, "ensure_in_range", _RANGE_NAMES, message, parameter, method)
    return value


__all__ = [
    "ensure_after",
    "ensure_before",
    "ensure_in_range",
]
