# noqa: D104
"""Utility functions."""

from prettylog.core.utils.date_utils import (
    format_local,
    parse_iso8601_utc,
)

__all__ = [
    "format_local",
    "parse_iso8601_utc",
]
