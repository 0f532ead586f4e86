"""Configuration of how guard messages render values.

Guard messages quote the offending value and its bounds. How dates, numbers
and missing values look in those messages is culture-dependent, so it is
configurable instead of hard-coded. The defaults follow Dutch (nl-NL)
conventions, matching the wording of the messages.

Design Note: Pydantic vs Dataclass Usage
----------------------------------------
GuardSettings is a Pydantic BaseModel because it validates user-provided
values from pyproject.toml and environment variables, with readable errors.
The call-site context (see _callsite.py) is a plain dataclass: it is internal
bookkeeping built by the library itself.

Example pyproject.toml:
    [tool.guardclauses]
    date_format = "%Y-%m-%d"
    decimal_separator = "."

Example scoped override:
    from guardclauses import Config, ensure_positive

    with Config(decimal_separator="."):
        ensure_positive(-0.5)  # message renders -0.5 instead of -0,5
"""

from __future__ import annotations

import os
import threading
import warnings
from contextvars import ContextVar
from datetime import date
from pathlib import Path
from types import TracebackType
from typing import Any, Self

import tomllib
from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError, field_validator

from guardclauses._pyproject import TOOL_SECTION, find_pyproject, load_tool_section
from guardclauses.exceptions import GuardClausesConfigError


# Environment variable names for configuration
ENV_DATE_FORMAT = "GUARDCLAUSES_DATE_FORMAT"
ENV_DATETIME_FORMAT = "GUARDCLAUSES_DATETIME_FORMAT"
ENV_DECIMAL_SEPARATOR = "GUARDCLAUSES_DECIMAL_SEPARATOR"
ENV_NULL_TEXT = "GUARDCLAUSES_NULL_TEXT"

_ENV_FIELDS = {
    ENV_DATE_FORMAT: "date_format",
    ENV_DATETIME_FORMAT: "datetime_format",
    ENV_DECIMAL_SEPARATOR: "decimal_separator",
    ENV_NULL_TEXT: "null_text",
}

# nl-NL short date and general date/time patterns
DEFAULT_DATE_FORMAT = "%d-%m-%Y"
DEFAULT_DATETIME_FORMAT = "%d-%m-%Y %H:%M:%S"
DEFAULT_DECIMAL_SEPARATOR = ","
DEFAULT_NULL_TEXT = "null"


# Thread Safety Notes:
# --------------------
# _config_context: Thread-safe via ContextVar (each thread/async context gets its own value)
#
# _process_default: NOT thread-safe. set_as_default() should be called during application
# startup before spawning threads.
#
# _file_config_cache, _env_config_cache: Protected by _config_cache_lock. Cached Config
# objects are immutable and safe to read concurrently.

_config_context: ContextVar[Config | None] = ContextVar("guardclauses_config", default=None)
_process_default: Config | None = None
_file_config_cache: Config | None = None
_env_config_cache: Config | None = None
_config_cache_lock = threading.Lock()


class GuardSettings(BaseModel):
    """Effective rendering settings for guard messages.

    Example:
        GuardSettings(date_format="%Y-%m-%d", decimal_separator=".")
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    date_format: str = DEFAULT_DATE_FORMAT
    """strftime pattern for short dates in date guard messages."""

    datetime_format: str = DEFAULT_DATETIME_FORMAT
    """strftime pattern for timestamps quoted as plain values."""

    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    """Character placed between the integer and fractional digits."""

    null_text: str = DEFAULT_NULL_TEXT
    """Placeholder quoted in messages when the value is None."""

    @field_validator("date_format", "datetime_format")
    @classmethod
    def validate_strftime_pattern(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Format cannot be empty")
        try:
            date(2000, 1, 1).strftime(v)
        except ValueError as e:
            raise ValueError(f"Invalid strftime pattern {v!r}: {e}") from e
        return v

    @field_validator("decimal_separator")
    @classmethod
    def validate_decimal_separator(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"Decimal separator must be a single character, got {v!r}")
        return v


_KNOWN_FIELDS = frozenset(GuardSettings.model_fields)


def _validate_overrides(overrides: dict[str, Any], source: str) -> dict[str, Any]:
    """Validate overrides against GuardSettings, keeping only explicit keys."""
    try:
        validated = GuardSettings.model_validate(overrides)
    except PydanticValidationError as e:
        error_details = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"]) if error["loc"] else "root"
            error_details.append(f"  - {loc}: {error['msg']}")
        raise GuardClausesConfigError(
            f"Invalid guardclauses config in {source}:\n" + "\n".join(error_details)
        ) from e
    return {key: getattr(validated, key) for key in overrides if key in _KNOWN_FIELDS}


class Config:
    """Immutable set of rendering overrides.

    Only the settings passed explicitly are stored, so configs from different
    sources can be layered. Supports context manager for scoped overrides and
    process-level defaults.

    Example:
        config = Config(date_format="%Y-%m-%d")

        with config:
            ensure_after(value, bound)  # messages use ISO dates
    """

    def __init__(self, **overrides: Any) -> None:
        """Create config.

        Args:
            **overrides: Any GuardSettings field (date_format, datetime_format,
                decimal_separator, null_text).

        Raises:
            GuardClausesConfigError: If a value is invalid or a key is unknown.
        """
        unknown = set(overrides) - _KNOWN_FIELDS
        if unknown:
            raise GuardClausesConfigError(
                f"Unknown guardclauses settings: {sorted(unknown)}. "
                f"Available: {sorted(_KNOWN_FIELDS)}"
            )
        self._overrides: dict[str, Any] = _validate_overrides(overrides, "Config()")
        self._token: Any = None

    @property
    def overrides(self) -> dict[str, Any]:
        """Get the explicitly configured settings."""
        return self._overrides.copy()

    @property
    def settings(self) -> GuardSettings:
        """Resolve overrides on top of the defaults."""
        return GuardSettings(**self._overrides)

    def __repr__(self) -> str:
        return f"Config({self._overrides!r})"

    def __enter__(self) -> Self:
        """Push this config onto the context stack."""
        self._token = _config_context.set(self)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Pop this config from the context stack."""
        if self._token is not None:
            _config_context.reset(self._token)
            self._token = None

    def set_as_default(self) -> None:
        """Set as process-level default (below context, above env and file config).

        Thread Safety:
            This method is NOT thread-safe. Call it during application startup
            before spawning threads.
        """
        global _process_default
        _process_default = self

    def merge(self, other: Config) -> Config:
        """Merge another config on top of this one.

        Settings from `other` take precedence over settings from `self`.
        """
        return Config(**{**self._overrides, **other._overrides})

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> Config:
        """Load config from the [tool.guardclauses] section of pyproject.toml.

        Args:
            path: Path to pyproject.toml. If None, searches from cwd upward.

        Returns:
            Config with the file's settings, or empty Config if not found.

        Raises:
            GuardClausesConfigError: If the section contains invalid values.
        """
        pyproject_path = Path(path) if path is not None else find_pyproject()

        if pyproject_path is None or not pyproject_path.exists():
            return cls()

        try:
            section = load_tool_section(pyproject_path)
        except tomllib.TOMLDecodeError as e:
            warnings.warn(
                f"Failed to parse {pyproject_path}: {e}. "
                "Guardclauses configuration will be ignored.",
                stacklevel=2,
            )
            return cls()

        if not section:
            return cls()

        unknown = set(section) - _KNOWN_FIELDS
        if unknown:
            warnings.warn(
                f"Unknown fields in [tool.{TOOL_SECTION}]: {sorted(unknown)}",
                stacklevel=2,
            )

        known = {k: v for k, v in section.items() if k in _KNOWN_FIELDS}
        config = cls()
        config._overrides = _validate_overrides(known, f"[tool.{TOOL_SECTION}] in {pyproject_path}")
        return config

    @classmethod
    def from_env(cls) -> Config:
        """Load config from environment variables.

        Reads:
        - GUARDCLAUSES_DATE_FORMAT: strftime pattern for short dates
        - GUARDCLAUSES_DATETIME_FORMAT: strftime pattern for timestamps
        - GUARDCLAUSES_DECIMAL_SEPARATOR: single character, e.g. "."
        - GUARDCLAUSES_NULL_TEXT: placeholder for None values

        Empty variables are ignored.

        Raises:
            GuardClausesConfigError: If a variable holds an invalid value.
        """
        values = {
            field: os.environ[env]
            for env, field in _ENV_FIELDS.items()
            if os.environ.get(env)
        }
        config = cls()
        config._overrides = _validate_overrides(values, "environment")
        return config

    @classmethod
    def current(cls) -> Config:
        """Get the currently active config.

        Resolution order (highest priority first):
        1. Active context (from `with config:`). Only the innermost context
           applies: nested contexts replace each other, they do not layer.
        2. Process default (from `config.set_as_default()`)
        3. Environment variables (GUARDCLAUSES_*, cached)
        4. File config (from pyproject.toml, cached)
        """
        global _file_config_cache, _env_config_cache

        with _config_cache_lock:
            if _file_config_cache is None:
                _file_config_cache = cls.from_file()
            if _env_config_cache is None:
                _env_config_cache = cls.from_env()

        base = _file_config_cache.merge(_env_config_cache)

        if _process_default is not None:
            base = base.merge(_process_default)

        context_config = _config_context.get()
        if context_config is not None:
            base = base.merge(context_config)

        return base


def current_config() -> Config:
    """Get the currently active config."""
    return Config.current()


def current_settings() -> GuardSettings:
    """Get the effective GuardSettings for the current context."""
    return Config.current().settings


def clear_config_cache() -> None:
    """Clear the cached file and environment configuration.

    Forces the next call to Config.current() to reload pyproject.toml and
    environment variables. Does NOT clear set_as_default() or active contexts.
    """
    global _file_config_cache, _env_config_cache
    with _config_cache_lock:
        _file_config_cache = None
        _env_config_cache = None


__all__ = [
    "Config",
    "GuardSettings",
    "current_config",
    "current_settings",
    "clear_config_cache",
]
