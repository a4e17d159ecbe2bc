import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from prettylog.core.errors.exceptions import ConfigurationError


class PrettyConfig(BaseSettings):
    """基本設定クラス"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # タイムゾーン関連
    PRETTY_ZONE: str = Field(default="UTC", validation_alias="PRETTY_ZONE")

    # ログ関連
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_DIR: str | None = Field(default=None, validation_alias="LOG_DIR")
    LOG_JSON: bool = Field(default=True, validation_alias="LOG_JSON")

    @field_validator("PRETTY_ZONE")
    @classmethod
    def _blank_zone_is_utc(cls, value: str) -> str:
        return value.strip() or "UTC"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("LOG_DIR")
    @classmethod
    def _blank_log_dir_is_unset(cls, value: str | None) -> str | None:
        return value or None


def load_config() -> PrettyConfig:
    """環境変数と .env から設定を読み込む"""
    try:
        return PrettyConfig()
    except ValidationError as e:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        raise ConfigurationError(f"invalid configuration: {problems}") from e
