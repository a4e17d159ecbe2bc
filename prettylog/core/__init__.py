# noqa: D104
"""Core package - configuration and base components.

This package contains the core infrastructure modules:
- config: Environment / .env configuration
- errors: Exception classes and error metrics
- logging: Logging utilities
- utils: Timestamp parsing and formatting
"""

from prettylog.core.config import PrettyConfig, load_config

__all__ = [
    "PrettyConfig",
    "load_config",
]
