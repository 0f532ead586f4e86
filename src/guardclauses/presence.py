"""None and default-value checks over arbitrary values.

Python has a single notion of absence (None), so ensure_not_none covers both
plain objects and Optional[...] values. The error names the declared type of
the checked expression, read from its annotation when it is a function
parameter or an attribute of an annotated class (dataclass, pydantic model):

    @dataclass
    class Order:
        customer: Customer | None = None

    ensure_not_none(order.customer)
    # NullReferenceError: Ongeldige waarde voor order.customer in methode
    # place_order. Customer mag niet null zijn.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, TypeVar
from uuid import UUID

from guardclauses._callsite import capture
from guardclauses._format import format_value, type_name
from guardclauses._guard import build_message, reject
from guardclauses.exceptions import NullReferenceError, ValidationError

T = TypeVar("T")

# Types whose default cannot be produced by calling the type without arguments
_KNOWN_DEFAULTS: dict[type, Any] = {
    UUID: UUID(int=0),
    datetime: datetime.min,
    date: date.min,
    time: time(),
    timedelta: timedelta(),
}

_UNSET: Any = object()


def default_for(cls: type) -> Any:
    """Return the default ("zero") value of a type.

    Raises:
        TypeError: If the type has no known default and cannot be
            constructed without arguments.
    """
    if cls in _KNOWN_DEFAULTS:
        return _KNOWN_DEFAULTS[cls]
    try:
        return cls()
    except TypeError as e:
        raise TypeError(
            f"No default value known for {cls.__name__}; pass default= explicitly"
        ) from e


def _declared_name(declared: Any) -> str:
    return getattr(declared, "__name__", None) or str(declared)


def ensure_not_none(
    value: T | None,
    message: str | None = None,
    *,
    type_: type | str | None = None,
    parameter: str | None = None,
    method: str | None = None,
) -> T:
    """Ensure that value is not None.

    Args:
        value: The value to check.
        message: Replaces the generated error message.
        type_: Declared type to name in the error. Defaults to the annotation
            of the checked expression, or "object" when there is none.

    Returns:
        The value itself.

    Raises:
        NullReferenceError: If value is None.
    """
    if value is not None:
        return value
    site = capture(
        parameter, method, callee=("ensure_not_none", "ensure_not_null"), with_type=type_ is None
    )
    declared = type_ if type_ is not None else site.declared_type
    name = _declared_name(declared) if declared is not None else "object"
    reject(
        NullReferenceError(
            build_message(message, site, "waarde", f"{name} mag niet null zijn."),
            parameter=site.parameter,
            method=site.method,
            type_name=name,
        ),
        "ensure_not_none",
    )


ensure_not_null = ensure_not_none


def ensure_not_default(
    value: T,
    message: str | None = None,
    *,
    default: Any = _UNSET,
    parameter: str | None = None,
    method: str | None = None,
) -> T:
    """Ensure that value differs from its type's default value.

    The default is type(value)() for types constructible without arguments
    (0, 0.0, "", Decimal("0"), ...), the nil UUID for UUID, and the minimum
    value for date/datetime. Equality is structural (==).

    Args:
        default: Explicit default to compare against.

    Raises:
        ValidationError: If value == default.
        TypeError: If no default is known for the value's type.
    """
    if default is _UNSET:
        default = default_for(type(value))
    if value != default:
        return value
    site = capture(parameter, method, callee="ensure_not_default")
    reject(
        ValidationError(
            build_message(
                message,
                site,
                "waarde",
                f"{type_name(value)} mag niet de default waarde '{format_value(default)}' zijn.",
            ),
            parameter=site.parameter,
            method=site.method,
            actual_value=value,
            expected=f"not {default!r}",
        ),
        "ensure_not_default",
    )


__all__ = [
    "default_for",
    "ensure_not_none",
    "ensure_not_null",
    "ensure_not_default",
]
