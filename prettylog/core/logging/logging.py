import json
import logging
import logging.handlers
import os
import sys
from datetime import UTC, datetime
from typing import Any

# LogRecord の標準属性（JSON出力から除外）
_STANDARD_ATTRS = frozenset(
    [
        "args",
        "msg",
        "message",
        "levelname",
        "levelno",
        "name",
        "module",
        "funcName",
        "lineno",
        "pathname",
        "filename",
        "exc_info",
        "exc_text",
        "stack_info",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    ]
)


class SimpleConsoleFormatter(logging.Formatter):
    """コンソール用のシンプルなフォーマッタ（メッセージのみ）"""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


class JSONFormatter(logging.Formatter):
    """JSON形式でログを出力するフォーマッタ"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        # extra= で渡されたカスタムフィールド
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS:
                log_obj[key] = value

        return json.dumps(log_obj, ensure_ascii=False, default=str)


def setup_logger(
    name: str, level: str = "INFO", log_dir: str | None = None, use_json: bool = True
) -> logging.Logger:
    """
    ロガーのセットアップ

    Parameters
    ----------
    name : str
        ロガー名
    level : str
        ログレベル（デフォルト: "INFO"）
    log_dir : str | None
        ログファイルの保存ディレクトリ。None の場合はファイル出力しない
    use_json : bool
        ファイル出力にJSON形式を使用するか（デフォルト: True）

    Returns
    -------
    logging.Logger
        設定済みのロガー

    Notes
    -----
    - コンソール出力: stderr にシンプルなテキスト形式。stdout は変換結果専用
    - ファイル出力: JSON形式（use_json=True）または標準形式（use_json=False）
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # 既存のハンドラーを適切にクローズしてからクリア
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    # コンソールハンドラー（常にシンプル形式）
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(SimpleConsoleFormatter())
    logger.addHandler(console_handler)

    if log_dir is None:
        return logger

    # ログディレクトリの作成
    os.makedirs(log_dir, exist_ok=True)

    # ファイルハンドラー（ローテーション付き）
    file_handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, f"{name}.log"),
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        JSONFormatter() if use_json else logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)

    return logger
