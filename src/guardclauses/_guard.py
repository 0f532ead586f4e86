"""Shared plumbing for guard failures."""

from __future__ import annotations

import logging
from typing import NoReturn

from guardclauses._callsite import CallSite
from guardclauses.exceptions import GuardClauseError

_logger = logging.getLogger(__name__)


def build_message(
    message: str | None,
    site: CallSite,
    subject: str,
    requirement: str,
    *,
    kind: str = "",
) -> str:
    """Return the caller's message, or the standard one for this failure.

    Standard messages read "Ongeldige <subject> voor <parameter> in methode
    <method>. <requirement>". `kind` names the parameter type where the
    message calls for it, e.g. "Guid ".
    """
    if message is not None:
        return message
    return f"Ongeldige {subject} voor {kind}{site.parameter} in methode {site.method}. {requirement}"


def reject(error: GuardClauseError, guard: str) -> NoReturn:
    """Log and raise a guard failure."""
    _logger.debug(
        "%s rejected %s in %s: %s", guard, error.parameter, error.method, error.message
    )
    raise error
