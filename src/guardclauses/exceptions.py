"""Exception hierarchy for guardclauses.

All guard failures inherit from GuardClauseError, allowing callers to catch
every library error with a single except clause:

    from guardclauses import GuardClauseError, ensure_positive

    try:
        ensure_positive(amount)
    except GuardClauseError as e:
        log.warning("Rejected request: %s", e)

For more specific handling, catch the individual exception types:

    from guardclauses import OutOfRangeError, ValidationError, NullReferenceError

    try:
        ...
    except OutOfRangeError:
        # Value violated a bound (numbers, dates)
        ...
    except NullReferenceError:
        # Value was None where presence was required
        ...
    except ValidationError:
        # Categorical check failed (text, identifiers, predicates, defaults)
        ...

Guard failures also derive from ValueError, so code that already handles
ValueError for bad arguments keeps working.

Every guard error carries the parameter and method it was raised for, and
str(error) is exactly the message: a caller-supplied message replaces the
generated one completely.
"""

from __future__ import annotations

from typing import Any


class GuardClauseError(Exception):
    """Base exception for all guardclauses errors.

    Attributes:
        message: Human-readable error message (generated or caller-supplied)
        parameter: Source expression of the guarded value
        method: Name of the operation that invoked the guard
    """

    def __init__(self, message: str, *, parameter: str = "", method: str = ""):
        super().__init__(message)
        self.message = message
        self.parameter = parameter
        self.method = method

    def __str__(self) -> str:
        return self.message


class GuardClausesConfigError(GuardClauseError):
    """Raised when formatting configuration is invalid.

    Examples:
        - Empty date format in [tool.guardclauses]
        - Decimal separator longer than one character
    """

    pass


class OutOfRangeError(GuardClauseError, ValueError):
    """Raised when a value violates an ordering or bound constraint.

    Attributes:
        actual_value: The value that failed the check
        bounds: The bound(s) the value was compared against
    """

    def __init__(
        self,
        message: str,
        *,
        parameter: str = "",
        method: str = "",
        actual_value: Any = None,
        bounds: tuple[Any, ...] = (),
    ):
        super().__init__(message, parameter=parameter, method=method)
        self.actual_value = actual_value
        self.bounds = bounds


class ValidationError(GuardClauseError, ValueError):
    """Raised when a value fails a categorical check.

    Covers text emptiness and length, predicate results and default-value
    checks.

    Attributes:
        actual_value: The value that failed the check
        expected: Short description of the condition that was required
    """

    def __init__(
        self,
        message: str,
        *,
        parameter: str = "",
        method: str = "",
        actual_value: Any = None,
        expected: str = "",
    ):
        super().__init__(message, parameter=parameter, method=method)
        self.actual_value = actual_value
        self.expected = expected


class InvalidFormatError(ValidationError):
    """Raised when a value has the wrong structure, such as a UUID version."""

    pass


class NullReferenceError(GuardClauseError, ValueError):
    """Raised when a value is None where presence was required.

    Attributes:
        type_name: Declared type of the missing value
    """

    def __init__(
        self,
        message: str,
        *,
        parameter: str = "",
        method: str = "",
        type_name: str = "object",
    ):
        super().__init__(message, parameter=parameter, method=method)
        self.type_name = type_name


__all__ = [
    "GuardClauseError",
    "GuardClausesConfigError",
    "OutOfRangeError",
    "ValidationError",
    "InvalidFormatError",
    "NullReferenceError",
]
