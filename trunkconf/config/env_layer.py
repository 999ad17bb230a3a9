"""
环境变量层 - 读取 TRUNK_<子命令>_<字段> 形式的环境变量

映射示例：
    TRUNK_BUILD_RELEASE=true      -> build.release
    TRUNK_BUILD_DIST=out          -> build.dist
    TRUNK_WATCH_IGNORE=a,b        -> watch.ignore
    TRUNK_SERVE_PORT=9000         -> serve.port
    TRUNK_CLEAN_CARGO=1           -> clean.cargo

proxy / compression 不支持环境变量配置。
"""

from __future__ import annotations

import logging

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from ..interfaces import EnvCoercionError, ILayerLoader
from ..models import BuildOptions, CleanOptions, RawConfig, ServeOptions, WatchOptions
from .settings import ENV_PREFIXES

logger = logging.getLogger(__name__)


class BuildEnv(BuildOptions, BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIXES["build"], env_ignore_empty=True)


class WatchEnv(WatchOptions, BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIXES["watch"], env_ignore_empty=True)


class ServeEnv(ServeOptions, BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIXES["serve"], env_ignore_empty=True)


class CleanEnv(CleanOptions, BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIXES["clean"], env_ignore_empty=True)


class EnvLayerLoader(ILayerLoader):
    """环境变量层"""

    layer = "env"

    def load(self) -> RawConfig:
        """读取环境变量快照；四个子命令段落总是存在"""
        config = RawConfig(
            build=self._load_section("build", BuildEnv, BuildOptions),
            watch=self._load_section("watch", WatchEnv, WatchOptions),
            serve=self._load_section("serve", ServeEnv, ServeOptions),
            clean=self._load_section("clean", CleanEnv, CleanOptions),
        )
        logger.debug("已加载环境变量配置")
        return config

    def _load_section(self, name, settings_cls, options_cls):
        prefix = ENV_PREFIXES[name]
        try:
            settings = settings_cls()
        except ValidationError as e:
            first = e.errors()[0]
            field = f"{prefix}{first['loc'][0]}".upper() if first["loc"] else prefix
            raise EnvCoercionError(
                f"环境变量无法转换: {first['msg']}", self.layer, field
            ) from e
        except SettingsError as e:
            raise EnvCoercionError(f"环境变量解析失败: {e}", self.layer, prefix) from e

        # 只保留实际设置过的字段，其余保持"未指定"
        return options_cls.model_validate(settings.model_dump(exclude_unset=True))
