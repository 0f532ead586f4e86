"""guardclauses - precondition checks that name what went wrong.

Every guard returns its value unchanged when the check passes, and otherwise
raises an error that names the parameter, the calling operation and the
violated constraint. Parameter and operation are picked up from the call site
automatically:

    from guardclauses import ensure_positive

    def withdraw(amount: Decimal) -> None:
        ensure_positive(amount)
        # OutOfRangeError: Ongeldige waarde -5 voor amount in methode
        # withdraw. Waarde moet strikt positief zijn.

Import Guidelines:
    All public API is exported at the top level:
        from guardclauses import ensure, ensure_positive, OutOfRangeError, ...

    The date range guard is exported as ensure_date_in_range; the numeric
    one as ensure_in_range. Both also live in their own modules:
        from guardclauses.dates import ensure_in_range
"""

from importlib.metadata import version, PackageNotFoundError

from guardclauses.config import (
    Config,
    GuardSettings,
    current_config,
    current_settings,
    clear_config_cache,
)
from guardclauses.exceptions import (
    GuardClauseError,
    GuardClausesConfigError,
    OutOfRangeError,
    ValidationError,
    InvalidFormatError,
    NullReferenceError,
)
from guardclauses.numeric import (
    ensure_positive,
    ensure_not_negative,
    ensure_greater_than,
    ensure_smaller_than,
    ensure_in_range,
)
from guardclauses.dates import (
    ensure_after,
    ensure_before,
    ensure_in_range as ensure_date_in_range,
)
from guardclauses.identifiers import ensure_not_empty_uuid, ensure_version7, uuid_version
from guardclauses.presence import ensure_not_none, ensure_not_null, ensure_not_default
from guardclauses.text import (
    ensure_not_null_text,
    ensure_not_empty,
    ensure_minimum_string_length,
    ensure_exact_string_length,
    ensure_maximum_string_length,
)
from guardclauses.predicates import ensure_true, ensure_true_async
from guardclauses.fluent import Guarded, ensure

try:
    __version__ = version("guardclauses")
except PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development/editable installs

__all__ = [
    # Package metadata
    "__version__",
    # Fluent chain
    "ensure",
    "Guarded",
    # Numbers
    "ensure_positive",
    "ensure_not_negative",
    "ensure_greater_than",
    "ensure_smaller_than",
    "ensure_in_range",
    # Dates
    "ensure_after",
    "ensure_before",
    "ensure_date_in_range",
    # Identifiers
    "ensure_not_empty_uuid",
    "ensure_version7",
    "uuid_version",
    # Presence
    "ensure_not_none",
    "ensure_not_null",
    "ensure_not_default",
    # Text
    "ensure_not_null_text",
    "ensure_not_empty",
    "ensure_minimum_string_length",
    "ensure_exact_string_length",
    "ensure_maximum_string_length",
    # Predicates
    "ensure_true",
    "ensure_true_async",
    # Exceptions (all inherit from GuardClauseError)
    "GuardClauseError",
    "GuardClausesConfigError",
    "OutOfRangeError",
    "ValidationError",
    "InvalidFormatError",
    "NullReferenceError",
    # Configuration
    "Config",
    "GuardSettings",
    "current_config",
    "current_settings",
    "clear_config_cache",
]
