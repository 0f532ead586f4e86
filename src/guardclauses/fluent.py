"""Fluent chaining of guards over one value.

    from guardclauses import ensure

    def reserve(seats: int, starts_at: datetime) -> None:
        seats = ensure(seats).positive().smaller_than(10).value
        ensure(starts_at).after(now()).before(now() + timedelta(days=90))

ensure() captures the parameter and method once; every guard in the chain
reports them. Each method returns the same Guarded wrapper, so failures
surface at the first violated guard.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from guardclauses import dates, identifiers, numeric, predicates, presence, text
from guardclauses._callsite import CallSite, capture
from guardclauses.predicates import AsyncPredicate, Predicate
from guardclauses.presence import _UNSET

T = TypeVar("T")


class Guarded(Generic[T]):
    """A value plus its captured call site, with one method per guard."""

    __slots__ = ("_value", "_site")

    def __init__(self, value: T, site: CallSite) -> None:
        self._value = value
        self._site = site

    @property
    def value(self) -> T:
        """The guarded value, unchanged."""
        return self._value

    @property
    def call_site(self) -> CallSite:
        return self._site

    def __repr__(self) -> str:
        return f"Guarded({self._value!r}, parameter={self._site.parameter!r})"

    def _context(self) -> dict[str, str]:
        return {"parameter": self._site.parameter, "method": self._site.method}

    # Numbers

    def positive(self, message: str | None = None) -> Guarded[T]:
        numeric.ensure_positive(self._value, message, **self._context())
        return self

    def not_negative(self, message: str | None = None) -> Guarded[T]:
        numeric.ensure_not_negative(self._value, message, **self._context())
        return self

    def greater_than(self, min_value: Any, message: str | None = None) -> Guarded[T]:
        numeric.ensure_greater_than(self._value, min_value, message, **self._context())
        return self

    def smaller_than(self, max_value: Any, message: str | None = None) -> Guarded[T]:
        numeric.ensure_smaller_than(self._value, max_value, message, **self._context())
        return self

    def in_range(self, lower: Any, upper: Any, message: str | None = None) -> Guarded[T]:
        """Numeric range for numbers, (after, before) range for dates."""
        if isinstance(self._value, date):
            dates.ensure_in_range(self._value, lower, upper, message, **self._context())
        else:
            numeric.ensure_in_range(self._value, lower, upper, message, **self._context())
        return self

    # Dates

    def after(self, bound: date | datetime, message: str | None = None) -> Guarded[T]:
        dates.ensure_after(self._value, bound, message, **self._context())
        return self

    def before(self, bound: date | datetime, message: str | None = None) -> Guarded[T]:
        dates.ensure_before(self._value, bound, message, **self._context())
        return self

    # Identifiers and text

    def not_empty(self, message: str | None = None) -> Guarded[T]:
        """Non-nil for UUIDs, non-blank (and not None) for text.

        Raises:
            TypeError: If the value is neither a UUID, a str nor None.
        """
        if isinstance(self._value, UUID):
            identifiers.ensure_not_empty_uuid(self._value, message, **self._context())
        elif isinstance(self._value, str | None):
            text.ensure_not_empty(self._value, message, **self._context())
        else:
            raise TypeError(
                f"not_empty() checks UUID or str values, got {type(self._value).__name__}"
            )
        return self

    def version7(self, message: str | None = None) -> Guarded[T]:
        identifiers.ensure_version7(self._value, message, **self._context())
        return self

    def not_null_text(self, message: str | None = None) -> Guarded[T]:
        text.ensure_not_null_text(self._value, message, **self._context())
        return self

    def min_length(self, min_length: int, message: str | None = None) -> Guarded[T]:
        text.ensure_minimum_string_length(self._value, min_length, message, **self._context())
        return self

    def exact_length(self, length: int, message: str | None = None) -> Guarded[T]:
        text.ensure_exact_string_length(self._value, length, message, **self._context())
        return self

    def max_length(self, max_length: int, message: str | None = None) -> Guarded[T]:
        text.ensure_maximum_string_length(self._value, max_length, message, **self._context())
        return self

    # Presence

    def not_none(self, message: str | None = None, *, type_: type | str | None = None) -> Guarded[T]:
        if self._value is None:
            declared = type_ if type_ is not None else self._site.declared_type
            presence.ensure_not_none(self._value, message, type_=declared or "object", **self._context())
        return self

    def not_default(self, message: str | None = None, *, default: Any = _UNSET) -> Guarded[T]:
        presence.ensure_not_default(self._value, message, default=default, **self._context())
        return self

    # Predicates

    def true(self, predicate: Predicate[T], message: str | None = None) -> Guarded[T]:
        predicates.ensure_true(self._value, predicate, message, **self._context())
        return self

    async def true_async(self, predicate: AsyncPredicate[T], message: str | None = None) -> Guarded[T]:
        await predicates.ensure_true_async(self._value, predicate, message, **self._context())
        return self


def ensure(value: T, *, parameter: str | None = None, method: str | None = None) -> Guarded[T]:
    """Start a guard chain on value.

    Args:
        value: The value to guard.
        parameter: Name to report; defaults to the expression passed here.
        method: Operation to report; defaults to the calling function.
    """
    return Guarded(value, capture(parameter, method, callee="ensure", with_type=value is None))


__all__ = ["Guarded", "ensure"]
