"""Rendering of values quoted in guard messages."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from numbers import Number
from typing import Any

from guardclauses.config import GuardSettings, current_settings


def format_value(value: Any, settings: GuardSettings | None = None) -> str:
    """Render a value for a guard message using the active settings.

    Numbers use the configured decimal separator, timestamps the configured
    datetime format, dates the short date format and None the null
    placeholder. Anything else renders with str().
    """
    settings = settings or current_settings()
    if value is None:
        return settings.null_text
    if isinstance(value, datetime):
        return value.strftime(settings.datetime_format)
    if isinstance(value, date):
        return value.strftime(settings.date_format)
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (float, Decimal)) or (isinstance(value, Number) and not isinstance(value, int)):
        return str(value).replace(".", settings.decimal_separator)
    return str(value)


def format_short_date(value: date, settings: GuardSettings | None = None) -> str:
    """Render a date or datetime as a short date (the time part is dropped)."""
    settings = settings or current_settings()
    return value.strftime(settings.date_format)


def type_name(value: Any) -> str:
    return type(value).__name__
