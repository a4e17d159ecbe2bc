# noqa: D104
"""prettylog - syslog-ng ログ行を読みやすい現地時刻に変換するフィルタ."""

__version__ = "1.0.1"
__author__ = "Tim Osburn"
__release_date__ = "2021-07-05"

__all__ = ["__author__", "__release_date__", "__version__"]
