# noqa: D104
"""Logging utilities."""

from prettylog.core.logging.logging import JSONFormatter, SimpleConsoleFormatter, setup_logger

__all__ = [
    "JSONFormatter",
    "SimpleConsoleFormatter",
    "setup_logger",
]
