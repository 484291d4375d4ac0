from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """環境変数ベースのアプリケーション設定

    不正な値の場合は pydantic.ValidationError を送出する。
    """

    model_config = SettingsConfigDict(
        frozen=True,
        populate_by_name=True,
        env_ignore_empty=True,
        extra="ignore",
    )

    service_name: str = Field(
        default="bus-reservation",
        min_length=1,
        validation_alias="POWERTOOLS_SERVICE_NAME",
    )
    log_level: LogLevel = Field(
        default="WARNING", validation_alias="POWERTOOLS_LOG_LEVEL"
    )
    # 車両の定員（座席数）。既定は 10 席で固定
    bus_capacity: int = Field(
        default=10, gt=0, validation_alias="BUS_RESERVATION_CAPACITY"
    )
    seed_sample_data: bool = Field(
        default=True, validation_alias="BUS_RESERVATION_SEED"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """小文字の指定も受け付ける"""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def from_env(cls) -> Settings:
        """環境変数から設定を読み込む"""
        return cls()
