"""Centralized test configuration and fixtures.

Guard messages depend on the active formatting config, which is cached at
module level. This module resets that state between tests so every test sees
the built-in (nl-NL) defaults unless it configures something itself.

Global state that must be reset:
- config_module._file_config_cache
- config_module._env_config_cache
- config_module._process_default
- config_module._config_context (ContextVar)
"""

from contextvars import ContextVar

import pytest

import guardclauses.config as config_module

GUARDCLAUSES_ENV_VARS = [
    config_module.ENV_DATE_FORMAT,
    config_module.ENV_DATETIME_FORMAT,
    config_module.ENV_DECIMAL_SEPARATOR,
    config_module.ENV_NULL_TEXT,
]


def _reset_config_state():
    config_module._file_config_cache = None
    config_module._env_config_cache = None
    config_module._process_default = None


@pytest.fixture(autouse=True)
def reset_all_global_state(monkeypatch):
    """Reset config caches and GUARDCLAUSES_* variables around each test."""
    for name in GUARDCLAUSES_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    _reset_config_state()
    # Recreate the ContextVar so no scoped config leaks between tests
    config_module._config_context = ContextVar("guardclauses_config", default=None)

    yield

    _reset_config_state()
