# noqa: D104
"""Error handling and exceptions."""

from prettylog.core.errors.error_metrics import ErrorMetrics
from prettylog.core.errors.exceptions import (
    ConfigurationError,
    PrettyLogException,
    UnknownZoneAlias,
)

__all__ = [
    "ConfigurationError",
    "ErrorMetrics",
    "PrettyLogException",
    "UnknownZoneAlias",
]
