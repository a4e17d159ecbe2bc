"""タイムゾーンのエイリアス解決のテスト."""

from zoneinfo import ZoneInfo

import pytest

from prettylog.core.errors import UnknownZoneAlias
from prettylog.services.zone_resolver import (
    ZONE_TABLE,
    ResolvedTimezone,
    ZoneAlias,
    format_zone_table,
    normalize_alias,
    resolve_alias,
    resolve_timezone,
)


class TestNormalizeAlias:
    """normalize_alias関数のテスト。"""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("nrt", "NRT"),
            ("DC13", "DC"),
            ("dc7", "DC"),
            ("a1b2", "A"),
            ("Asia/Tokyo", "ASIA/TOKYO"),
            ("13", ""),
            ("", ""),
        ],
    )
    def test_uppercases_and_truncates_at_first_digit(self, raw, expected) -> None:
        assert normalize_alias(raw) == expected


class TestResolveAlias:
    """resolve_alias関数のテスト。"""

    @pytest.mark.parametrize("raw", ["nrt", "NRT", "NRT1", "Tokyo", "jst", "j"])
    def test_tokyo_aliases(self, raw) -> None:
        """
        Given: 大文字小文字や末尾の数字が異なるエイリアス。
        When: resolve_alias が呼ばれたとき。
        Then: すべて Asia/Tokyo に解決される。
        """
        assert resolve_alias(raw) == "Asia/Tokyo"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("dc13", "EST5EDT"),
            ("sea", "PST8PDT"),
            ("ord", "CST6CDT"),
            ("m", "MST7MDT"),
            ("zulu", "UTC"),
            ("utc", "UTC"),
            ("phx", "America/Phoenix"),
            ("ph", "Asia/Manila"),
            ("fra", "CET"),
            ("syd2", "Australia/Sydney"),
        ],
    )
    def test_known_aliases(self, raw, expected) -> None:
        assert resolve_alias(raw) == expected

    @pytest.mark.parametrize("raw", ["Asia/Tokyo", "asia/hong_kong", "EST5EDT", "cet"])
    def test_canonical_identifier_is_an_alias(self, raw) -> None:
        """
        Given: 正式なタイムゾーン名。
        When: resolve_alias が呼ばれたとき。
        Then: その行の正式名が返る。
        """
        assert resolve_alias(raw).upper() == raw.upper()

    @pytest.mark.parametrize("raw", ["ZZZ", "zzz1", "13", "", "TOKY"])
    def test_unknown_alias_raises(self, raw) -> None:
        """
        Given: 表に存在しないエイリアス。
        When: resolve_alias が呼ばれたとき。
        Then: 表の任意の行ではなく UnknownZoneAlias になる。
        """
        with pytest.raises(UnknownZoneAlias) as exc_info:
            resolve_alias(raw)
        assert exc_info.value.alias == raw

    def test_first_row_wins_on_duplicate(self) -> None:
        table = (
            ZoneAlias("Asia/Tokyo", ("X",)),
            ZoneAlias("Europe/London", ("X",)),
        )
        assert resolve_alias("x", table) == "Asia/Tokyo"


class TestResolveTimezone:
    """resolve_timezone関数のテスト。"""

    def test_returns_loaded_zone(self) -> None:
        resolved = resolve_timezone("nrt")

        assert resolved == ResolvedTimezone(name="Asia/Tokyo", tzinfo=ZoneInfo("Asia/Tokyo"))

    def test_missing_database_entry_raises(self) -> None:
        """
        Given: タイムゾーンDBに存在しない正式名を持つ表。
        When: resolve_timezone が呼ばれたとき。
        Then: UnknownZoneAlias になる。
        """
        table = (ZoneAlias("Nowhere/Atlantis", ("ATL",)),)

        with pytest.raises(UnknownZoneAlias, match="Nowhere/Atlantis"):
            resolve_timezone("atl", table)


class TestZoneTable:
    """ZONE_TABLE の内容のテスト。"""

    def test_every_canonical_is_in_timezone_database(self) -> None:
        for row in ZONE_TABLE:
            assert ZoneInfo(row.canonical).key == row.canonical

    def test_no_alias_is_claimed_by_two_rows(self) -> None:
        seen: dict[str, str] = {}
        for row in ZONE_TABLE:
            for name in row.names:
                assert name.upper() not in seen, f"{name} in {row.canonical} and {seen[name.upper()]}"
                seen[name.upper()] = row.canonical

    def test_zone_alias_drops_duplicates(self) -> None:
        row = ZoneAlias("Europe/Amsterdam", ("AMS", "AM", "AM", "europe/amsterdam", "A"))

        assert row.aliases == ("AMS", "AM", "A")
        assert row.names == ("Europe/Amsterdam", "AMS", "AM", "A")

    def test_format_zone_table(self) -> None:
        """
        Given: デフォルトの表。
        When: format_zone_table が呼ばれたとき。
        Then: 1行に1エントリ、正式名とエイリアスが空白区切りで並ぶ。
        """
        lines = format_zone_table()

        assert len(lines) == len(ZONE_TABLE)
        assert lines[0] == "UTC: UTC GMT ZULU U"
        assert "Asia/Tokyo: Asia/Tokyo JST JP TY JAPAN NRT TOKYO J" in lines
