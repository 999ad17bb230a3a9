"""
解析器自身的设置（支持环境变量覆盖）

- TRUNK_LOG_LEVEL: 日志级别
- TRUNK_ENABLE_COMPRESSION: 将 [[compression]] 扩展段交给构建配置
- TRUNK_CONFIG_NAME: 默认配置文件名
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_NAME = "Trunk.toml"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# 各子命令的环境变量前缀
ENV_PREFIXES: dict[str, str] = {
    "build": "TRUNK_BUILD_",
    "watch": "TRUNK_WATCH_",
    "serve": "TRUNK_SERVE_",
    "clean": "TRUNK_CLEAN_",
}


class ResolverSettings(BaseSettings):
    """解析器设置"""

    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    enable_compression: bool = False
    config_name: str = DEFAULT_CONFIG_NAME

    model_config = SettingsConfigDict(env_prefix="TRUNK_")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v
