"""Pytest共通設定ファイル（全テストで自動ロードされる）.

このファイルはpytestが自動的に読み込み、すべてのテストに適用される。
"""

import logging

import pytest

_CONFIG_ENV_VARS = ("PRETTY_ZONE", "LOG_LEVEL", "LOG_DIR", "LOG_JSON")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    全テスト共通設定:
    開発者の環境変数やカレントディレクトリの .env が設定に混ざらないように、
    設定用の環境変数を消して一時ディレクトリで実行する。
    """
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture(autouse=True)
def reset_prettylog_logger():
    """setup_loggerが追加したハンドラーをテスト毎に片付ける"""
    yield
    logger = logging.getLogger("prettylog")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
