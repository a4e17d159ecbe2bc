"""Static alias table mapping short CLI names to timezone database identifiers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class ZoneAlias:
    """One row of the alias table.

    ``canonical`` is looked up in the timezone database and is itself a
    valid alias. Duplicate aliases within a row are dropped.
    """

    canonical: str
    aliases: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        unique = tuple(dict.fromkeys(a for a in self.aliases if a.upper() != self.canonical.upper()))
        object.__setattr__(self, "aliases", unique)

    @property
    def names(self) -> tuple[str, ...]:
        """Canonical identifier followed by the aliases, in match order."""
        return (self.canonical, *self.aliases)


# 大文字小文字は区別しない（比較時に大文字化する）
ZONE_TABLE: tuple[ZoneAlias, ...] = (
    ZoneAlias("UTC", ("GMT", "ZULU", "U")),
    ZoneAlias("MST7MDT", ("M",)),
    ZoneAlias("PST8PDT", ("PST", "PDT", "SEA", "SE", "P", "LA", "SV", "SJC", "LAX", "PAO")),
    ZoneAlias(
        "EST5EDT",
        ("EST", "EDT", "NY", "E", "DC", "ATL", "JFK", "BOS", "DTW", "EWR", "GSP", "IAD", "PIT"),
    ),
    ZoneAlias("CST6CDT", ("CST", "CDT", "DA", "C", "CH", "DFW", "IAH", "MCI", "ORD")),
    ZoneAlias("Asia/Tokyo", ("JST", "JP", "TY", "JAPAN", "NRT", "TOKYO", "J")),
    ZoneAlias("Asia/Hong_Kong", ("HK", "HKG", "H")),
    ZoneAlias("Asia/Singapore", ("SG", "SIN", "S")),
    ZoneAlias("Asia/Seoul", ("SL",)),
    ZoneAlias("Asia/Manila", ("PH", "MANILA")),
    ZoneAlias("America/Sao_Paulo", ("SP",)),
    ZoneAlias("America/Toronto", ("TR", "YYZ")),
    ZoneAlias("America/Phoenix", ("PHX", "PHOENIX")),
    ZoneAlias("Europe/Amsterdam", ("AMS", "AM", "A")),
    ZoneAlias("Europe/London", ("LD", "L")),
    ZoneAlias("Europe/Madrid", ("MD", "SPAIN", "MADRID")),
    ZoneAlias("Australia/Sydney", ("SY", "SYD", "SYDNEY")),
    ZoneAlias("CET", ("FR", "FRA", "FRANKFURT", "MRS", "MARSEILLE", "PA")),
)


def format_zone_table(table: Iterable[ZoneAlias] = ZONE_TABLE) -> list[str]:
    """Return one ``CANONICAL: CANONICAL ALIAS ...`` line per row."""
    return [f"{row.canonical}: {' '.join(row.names)}" for row in table]
