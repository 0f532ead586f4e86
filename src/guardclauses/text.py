"""Presence, emptiness and length checks over text.

None is never treated as an empty string: every check below fails for None,
whatever the threshold (ensure_minimum_string_length(None, 0) fails too).
"""

from __future__ import annotations

from typing import NoReturn

from guardclauses._callsite import capture
from guardclauses._format import format_value
from guardclauses._guard import build_message, reject
from guardclauses.exceptions import ValidationError


def _invalid(
    guard: str,
    value: str | None,
    requirement: str,
    expected: str,
    message: str | None,
    parameter: str | None,
    method: str | None,
) -> NoReturn:
    site = capture(parameter, method, callee=guard)
    reject(
        ValidationError(
            build_message(message, site, f"waarde '{format_value(value)}'", requirement),
            parameter=site.parameter,
            method=site.method,
            actual_value=value,
            expected=expected,
        ),
        guard,
    )


def _length(value: str | None) -> int:
    return len(value) if value is not None else 0


def ensure_not_null_text(
    value: str | None,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> str:
    """Ensure that a string is not None. Empty strings pass."""
    if value is not None:
        return value
    _invalid(
        "ensure_not_null_text", value,
        "String mag niet null zijn.", "not None",
        message, parameter, method,
    )


def ensure_not_empty(
    value: str | None,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> str:
    """Ensure that a string is not None, empty or whitespace only."""
    if value is not None and value.strip():
        return value
    _invalid(
        "ensure_not_empty", value,
        "String mag niet leeg zijn.", "non-blank text",
        message, parameter, method,
    )


def ensure_minimum_string_length(
    value: str | None,
    min_length: int,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> str:
    """Ensure that a string is not None and has at least min_length characters."""
    if value is not None and len(value) >= min_length:
        return value
    _invalid(
        "ensure_minimum_string_length", value,
        f"Lengte is {_length(value)} en moet minimaal {min_length} zijn.",
        f"length >= {min_length}",
        message, parameter, method,
    )


def ensure_exact_string_length(
    value: str | None,
    length: int,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> str:
    """Ensure that a string is not None and has exactly `length` characters."""
    if value is not None and len(value) == length:
        return value
    _invalid(
        "ensure_exact_string_length", value,
        f"Lengte is {_length(value)} en moet exact {length} zijn.",
        f"length == {length}",
        message, parameter, method,
    )


def ensure_maximum_string_length(
    value: str | None,
    max_length: int,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> str:
    """Ensure that a string is not None and has at most max_length characters."""
    if value is not None and len(value) <= max_length:
        return value
    _invalid(
        "ensure_maximum_string_length", value,
        f"Lengte is {_length(value)} en mag maximaal {max_length} zijn.",
        f"length <= {max_length}",
        message, parameter, method,
    )


__all__ = [
    "ensure_not_null_text",
    "ensure_not_empty",
    "ensure_minimum_string_length",
    "ensure_exact_string_length",
    "ensure_maximum_string_length",
]
