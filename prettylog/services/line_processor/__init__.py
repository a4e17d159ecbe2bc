# noqa: D104
"""syslog-ng line rewriting."""

from prettylog.services.line_processor.line_processor import LineProcessor, split_terminator

__all__ = [
    "LineProcessor",
    "split_terminator",
]
