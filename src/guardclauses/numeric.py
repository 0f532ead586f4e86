"""Bounds checks over ordered numeric values.

Works with any type that orders against its own kind and against 0: int,
float, Decimal, Fraction, numpy scalars, ...

Note that ensure_greater_than and ensure_smaller_than are INCLUSIVE: a value
equal to the bound passes. The names are kept for compatibility with existing
callers.

Example:
    from guardclauses import ensure_in_range, ensure_positive

    def book(nights: int, discount: Decimal) -> Booking:
        ensure_positive(nights)
        ensure_in_range(discount, Decimal("0"), Decimal("0.5"))
        ...
"""

from __future__ import annotations

from typing import Any, NoReturn, Protocol, TypeVar

from guardclauses._callsite import capture
from guardclauses._format import format_value
from guardclauses._guard import build_message, reject
from guardclauses.exceptions import OutOfRangeError


class SupportsOrdering(Protocol):
    """Protocol for values usable with the numeric guards."""

    def __lt__(self, other: Any, /) -> bool: ...
    def __le__(self, other: Any, /) -> bool: ...
    def __gt__(self, other: Any, /) -> bool: ...
    def __ge__(self, other: Any, /) -> bool: ...


N = TypeVar("N", bound=SupportsOrdering)


def _reject(
    guard: str,
    value: Any,
    bounds: tuple[Any, ...],
    requirement: str,
    message: str | None,
    parameter: str | None,
    method: str | None,
) -> NoReturn:
    site = capture(parameter, method, callee=guard)
    error = OutOfRangeError(
        build_message(message, site, f"waarde {format_value(value)}", requirement),
        parameter=site.parameter,
        method=site.method,
        actual_value=value,
        bounds=bounds,
    )
    reject(error, guard)


def ensure_positive(
    value: N,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> N:
    """Ensure that value is strictly greater than zero.

    Returns:
        The value itself.

    Raises:
        OutOfRangeError: If value <= 0.
    """
    if value > 0:
        return value
    _reject(
        "ensure_positive", value, (0,),
        "Waarde moet strikt positief zijn.",
        message, parameter, method,
    )


def ensure_not_negative(
    value: N,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> N:
    """Ensure that value is zero or greater.

    Raises:
        OutOfRangeError: If value < 0.
    """
    if value >= 0:
        return value
    _reject(
        "ensure_not_negative", value, (0,),
        "Waarde mag niet negatief zijn.",
        message, parameter, method,
    )


def ensure_greater_than(
    value: N,
    min_value: N,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> N:
    """Ensure that value >= min_value (inclusive).

    Raises:
        OutOfRangeError: If value < min_value.
    """
    if value >= min_value:
        return value
    _reject(
        "ensure_greater_than", value, (min_value,),
        f"Waarde moet groter of gelijk zijn aan {format_value(min_value)}.",
        message, parameter, method,
    )


def ensure_smaller_than(
    value: N,
    max_value: N,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> N:
    """Ensure that value <= max_value (inclusive).

    Raises:
        OutOfRangeError: If value > max_value.
    """
    if value <= max_value:
        return value
    _reject(
        "ensure_smaller_than", value, (max_value,),
        f"Waarde moet kleiner of gelijk zijn aan {format_value(max_value)}.",
        message, parameter, method,
    )


def ensure_in_range(
    value: N,
    min_value: N,
    max_value: N,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> N:
    """Ensure that min_value <= value <= max_value.

    Raises:
        OutOfRangeError: If value lies outside the closed interval.
    """
    if min_value <= value <= max_value:
        return value
    _reject(
        "ensure_in_range", value, (min_value, max_value),
        f"Waarde moet tussen {format_value(min_value)} en {format_value(max_value)} liggen.",
        message, parameter, method,
    )


__all__ = [
    "SupportsOrdering",
    "ensure_positive",
    "ensure_not_negative",
    "ensure_greater_than",
    "ensure_smaller_than",
    "ensure_in_range",
]
