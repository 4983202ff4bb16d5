from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .defaults import (
    DATE_DEFAULT_FORMAT,
    NUMBER_DEFAULT_PRECISION,
    PASSWORD_DEFAULT_MIN_LENGTH,
    THOUSANDS_DEFAULT_SEPARATOR,
)


class AppSettings(BaseSettings):
    """全局应用设置（可由环境变量/配置文件覆盖）"""

    model_config = SettingsConfigDict(
        env_prefix="UTILKIT_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # 全局
    verbose: bool = Field(default=False, description="详细日志输出")

    # 格式化
    date_format: str = Field(default=DATE_DEFAULT_FORMAT, min_length=1, description="默认日期格式")
    precision: int = Field(default=NUMBER_DEFAULT_PRECISION, ge=0, le=20, description="数值精度")
    thousands_separator: str = Field(default=THOUSANDS_DEFAULT_SEPARATOR, description="千分位分隔符")

    # 校验
    password_min_length: int = Field(default=PASSWORD_DEFAULT_MIN_LENGTH, ge=0)

    # 配置文件（若 CLI 未提供，可通过环境变量指向）
    config_file: Optional[Path] = Field(default=None, description="配置文件路径，可选")


__all__ = ["AppSettings"]
