"""syslog-ng 形式のログを読みやすい形式に変換するコマンド。

Example
-------
    tail -f syslogngfile.log | pretty -z nrt
    grep -ais "nrt.*BGP_IO_ERROR_CLOSE_SESSION:" syslogngfile.log | pretty -z dc13
"""

import argparse
import io
import os
import sys

from prettylog import __author__, __release_date__, __version__
from prettylog.core.config import load_config
from prettylog.core.errors import ConfigurationError, UnknownZoneAlias
from prettylog.core.logging import setup_logger
from prettylog.services.line_processor import LineProcessor
from prettylog.services.zone_resolver import ZONE_TABLE, format_zone_table, resolve_timezone

PROG = "pretty"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="syslog-ng のISO8601(UTC)タイムスタンプを指定タイムゾーンの現地時刻に変換します",
        add_help=False,
    )
    parser.add_argument("-l", dest="list_zones", action="store_true", help="タイムゾーンのエイリアス一覧を表示")
    parser.add_argument("-z", dest="zone", metavar="ZONEINFO", help="変換先のタイムゾーン（エイリアス）")
    parser.add_argument("-v", dest="version", action="store_true", help="バージョンを表示")
    parser.add_argument("-h", "-?", action="help", help="オプションを表示")
    return parser


def _pass_through_undecodable(stream) -> None:
    """不正なUTF-8バイト列（grep -a の出力など）を落とさずに通す"""
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors="surrogateescape")


def version_text() -> str:
    return f"pretty log formatter, version: {__version__}\nCreated by {__author__}\n{__release_date__}\n"


def main(argv: list[str] | None = None) -> int:
    """
    標準入力のログ行を変換して標準出力に書き出します。

    -l / -v / -h は情報を表示して終了コード0で終了します。
    未知のエイリアスや不正な設定値は終了コード2です。
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_zones:
        for row in format_zone_table(ZONE_TABLE):
            print(row)
        return 0

    if args.version:
        sys.stdout.write(version_text())
        return 0

    try:
        config = load_config()
    except ConfigurationError as e:
        parser.exit(2, f"{PROG}: {e}\n")

    logger = setup_logger("prettylog", level=config.LOG_LEVEL, log_dir=config.LOG_DIR, use_json=config.LOG_JSON)

    # -z 未指定または空文字ならデフォルト
    zone_selection = args.zone or config.PRETTY_ZONE

    try:
        zone = resolve_timezone(zone_selection)
    except UnknownZoneAlias as e:
        logger.error(f"{e} (run `{PROG} -l` to list aliases)")
        return 2

    logger.info(f"Timezone: {zone.name}")

    _pass_through_undecodable(sys.stdin)
    _pass_through_undecodable(sys.stdout)

    processor = LineProcessor(zone)
    try:
        processor.run(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except BrokenPipeError:
        # 下流（head など）が先に閉じた場合、終了時のflushでの再エラーを防ぐ
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1

    logger.debug(
        f"Processed {processor.line_number} line(s)",
        extra={"lines": processor.line_number, "errors": processor.metrics.get_error_stats()},
    )
    if processor.metrics.count():
        logger.debug(processor.metrics.get_error_report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
