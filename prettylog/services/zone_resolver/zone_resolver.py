"""Resolve user supplied zone aliases to timezone database entries."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from prettylog.core.errors import UnknownZoneAlias
from prettylog.services.zone_resolver.zone_table import ZONE_TABLE, ZoneAlias

logger = logging.getLogger(__name__)

# 最初の数字以降を切り捨てる（DC13 -> DC）
_LEADING_NON_DIGITS = re.compile(r"[^0-9]*")


@dataclass(frozen=True)
class ResolvedTimezone:
    """The timezone selected for one run, passed explicitly to the formatter."""

    name: str
    tzinfo: ZoneInfo


def normalize_alias(raw: str) -> str:
    """Uppercase ``raw`` and cut it at the first decimal digit."""
    return _LEADING_NON_DIGITS.match(raw.upper()).group(0)


def resolve_alias(raw: str, table: Iterable[ZoneAlias] = ZONE_TABLE) -> str:
    """Return the canonical identifier whose row contains ``raw``.

    Rows are scanned in order and names within a row in column order; the
    first match wins.

    Raises
    ------
    UnknownZoneAlias
        When no row matches, including when nothing is left after
        normalization.
    """
    normalized = normalize_alias(raw)
    if normalized:
        for row in table:
            for name in row.names:
                if name.upper() == normalized:
                    logger.debug(f"Alias {raw!r} matched {name!r} -> {row.canonical}")
                    return row.canonical

    raise UnknownZoneAlias(raw, normalized)


def resolve_timezone(raw: str, table: Iterable[ZoneAlias] = ZONE_TABLE) -> ResolvedTimezone:
    """Resolve ``raw`` and load the matching zone from the timezone database."""
    canonical = resolve_alias(raw, table)
    try:
        zone = ZoneInfo(canonical)
    except ZoneInfoNotFoundError as e:
        raise UnknownZoneAlias(raw, normalize_alias(raw), reason=f"{canonical} is not in the timezone database") from e

    return ResolvedTimezone(name=canonical, tzinfo=zone)
