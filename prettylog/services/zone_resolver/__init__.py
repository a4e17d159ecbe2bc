# noqa: D104
"""Timezone alias table and resolver."""

from prettylog.services.zone_resolver.zone_resolver import (
    ResolvedTimezone,
    normalize_alias,
    resolve_alias,
    resolve_timezone,
)
from prettylog.services.zone_resolver.zone_table import ZONE_TABLE, ZoneAlias, format_zone_table

__all__ = [
    "ZONE_TABLE",
    "ResolvedTimezone",
    "ZoneAlias",
    "format_zone_table",
    "normalize_alias",
    "resolve_alias",
    "resolve_timezone",
]
