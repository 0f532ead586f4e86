"""Validity checks over UUIDs."""

from __future__ import annotations

from uuid import UUID

from guardclauses._callsite import capture
from guardclauses._guard import build_message, reject
from guardclauses.exceptions import InvalidFormatError

NIL_UUID = UUID(int=0)


def uuid_version(value: UUID) -> int:
    """Return the version nibble of a UUID.

    Unlike UUID.version this also reports non-RFC 4122 variants, so the nil
    UUID yields 0 instead of None.
    """
    return (value.int >> 76) & 0xF


def ensure_not_empty_uuid(
    value: UUID,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> UUID:
    """Ensure that value is not the nil UUID (all zeros).

    Raises:
        InvalidFormatError: If value is the nil UUID.
    """
    if value != NIL_UUID:
        return value
    site = capture(parameter, method, callee="ensure_not_empty_uuid")
    reject(
        InvalidFormatError(
            build_message(message, site, "waarde", "Guid mag niet Empty zijn.", kind="Guid "),
            parameter=site.parameter,
            method=site.method,
            actual_value=value,
            expected="non-empty UUID",
        ),
        "ensure_not_empty_uuid",
    )


def ensure_version7(
    value: UUID,
    message: str | None = None,
    *,
    parameter: str | None = None,
    method: str | None = None,
) -> UUID:
    """Ensure that value is a time-ordered version 7 UUID.

    Raises:
        InvalidFormatError: If the embedded version is not 7. The message
            reports the version that was found.
    """
    version = uuid_version(value)
    if version == 7:
        return value
    site = capture(parameter, method, callee="ensure_version7")
    reject(
        InvalidFormatError(
            build_message(message, site, f"Guid 'version {version}'", "Guid moet versie 7 zijn."),
            parameter=site.parameter,
            method=site.method,
            actual_value=value,
            expected="UUID version 7",
        ),
        "ensure_version7",
    )


__all__ = [
    "NIL_UUID",
    "uuid_version",
    "ensure_not_empty_uuid",
    "ensure_version7",
]
