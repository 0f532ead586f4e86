"""User-supplied condition checks.

Predicates can be either sync or async functions. ensure_true requires a
synchronous predicate; ensure_true_async awaits the predicate's result when
it is awaitable, so plain sync predicates work there too.

    async def customer_exists(customer_id: UUID) -> bool:
        return await repository.exists(customer_id)

    async def handle(command: PlaceOrder) -> None:
        await ensure_true_async(command.customer_id, customer_exists)

No timeout or cancellation policy is applied: cancelling the awaiting task
cancels the predicate, and exceptions raised by a predicate propagate
unchanged.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable
from typing import Any, Callable, TypeVar

from guardclauses._callsite import capture
from guardclauses._format import format_value, type_name
from guardclauses._guard import build_message, reject
from guardclauses.exceptions import ValidationError

T = TypeVar("T")

Predicate = Callable[[T], bool]
"""Synchronous predicate: returns a truthy value when the value is acceptable."""

AsyncPredicate = Callable[[T], Awaitable[bool] | bool]
"""Predicate for ensure_true_async: may return an awaitable or a plain bool."""

_REQUIREMENT = "voldoet niet aan de gestelde voorwaarde."


def _unsatisfied(
    guard: str,
    value: Any,
    subject: str,
    message: str | None,
    parameter: str | None,
    method: str | None,
) -> ValidationError:
    site = capture(parameter, method, callee=guard)
    return ValidationError(
        build_message(message, site, subject, f"{type_name(value)} {_REQUIREMENT}"),
        parameter=site.parameter,
        method=site.method,
        actual_value=value,
        expected=f"{guard} predicate to hold",
    )


def ensure_true(
    value: T,
    predicate: Predicate[T],
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> T:
    """Ensure that predicate(value) is truthy.

    Raises:
        ValidationError: If the predicate returns a falsy value.
    """
    if predicate(value):
        return value
    reject(
        _unsatisfied("ensure_true", value, "waarde", message, parameter, method),
        "ensure_true",
    )


async def ensure_true_async(
    value: T,
    predicate: AsyncPredicate[T],
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> T:
    """Ensure that the (possibly async) predicate holds for value.

    Suspends until the predicate resolves, then applies the same semantics
    as ensure_true.

    Raises:
        ValidationError: If the predicate resolves to a falsy value.
    """
    result = predicate(value)
    if inspect.isawaitable(result):
        result = await result
    if result:
        return value
    reject(
        _unsatisfied(
            "ensure_true_async", value, f"waarde '{format_value(value)}'", message, parameter, method
        ),
        "ensure_true_async",
    )


__all__ = [
    "Predicate",
    "AsyncPredicate",
    "ensure_true",
    "ensure_true_async",
]
