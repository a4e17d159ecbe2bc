"""Rewrite ``R_ISODATE SOURCEIP HOST PROGRAM[PID]: MSG`` lines.

Tokens are handled strictly by position:

1. the timestamp, converted to the resolved timezone
2. the source IP, dropped
3. everything else, passed through unchanged
"""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from prettylog.core.errors import ErrorMetrics
from prettylog.core.utils.date_utils import format_local, parse_iso8601_utc
from prettylog.services.zone_resolver import ResolvedTimezone

logger = logging.getLogger(__name__)

INVALID_TIMESTAMP = "invalid_timestamp"


def split_terminator(line: str) -> tuple[str, str]:
    """Split ``line`` into its content and its trailing line terminator."""
    if line.endswith("\r\n"):
        return line[:-2], "\r\n"
    if line.endswith("\n"):
        return line[:-1], "\n"
    return line, ""


class LineProcessor:
    """Positional token rewriter bound to a single timezone."""

    def __init__(self, zone: ResolvedTimezone, metrics: ErrorMetrics | None = None):
        self.zone = zone
        self.metrics = metrics or ErrorMetrics()
        self.line_number = 0

    def convert_timestamp(self, token: str) -> str:
        """Format ``token`` in the bound zone, or return it unchanged if it does not parse."""
        instant = parse_iso8601_utc(token)
        if instant is not None:
            try:
                return format_local(instant, self.zone.tzinfo)
            except OverflowError:
                # 9999-12-31 / 0001-01-01 付近は現地時刻が datetime の範囲外になる
                pass

        logger.debug(
            f"Line {self.line_number}: unparseable timestamp {token!r}, passing through",
            extra={"line_number": self.line_number, "token": token},
        )
        self.metrics.record_error(INVALID_TIMESTAMP, self.line_number, {"token": token})
        return token

    def process_line(self, line: str) -> str:
        self.line_number += 1
        content, terminator = split_terminator(line)
        if not content:
            return terminator

        # 連続した区切り文字は空トークンとして保持する
        tokens = content.split(" ")

        output = [self.convert_timestamp(tokens[0])]
        output.extend(tokens[2:])

        return " ".join(output) + terminator

    def process_lines(self, lines: Iterable[str]) -> Iterable[str]:
        for line in lines:
            yield self.process_line(line)

    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        """Rewrite every line of ``stdin`` to ``stdout``, flushing after each line.

        Returns the number of lines processed.
        """
        start = self.line_number
        for rewritten in self.process_lines(stdin):
            stdout.write(rewritten)
            stdout.flush()

        invalid = self.metrics.count(INVALID_TIMESTAMP)
        if invalid:
            logger.warning(
                f"{invalid} line(s) had no parseable timestamp and were passed through unchanged",
                extra={"invalid_timestamps": invalid},
            )

        return self.line_number - start
