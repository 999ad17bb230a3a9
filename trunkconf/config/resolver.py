"""
配置解析器 - 按子命令组合各配置层，产出运行期配置

流程：
1. base = merge(文件层, 环境变量层)
2. 依次叠加与子命令相关的命令行层（build -> watch -> serve；clean 单独）
3. 取出对应段落（缺失时使用全默认选项），构造不可变运行期配置

任何底层错误都会包装为 ConfigError 抛出，不返回部分结果。
每次调用都独立构建并丢弃自己的配置链，不保留状态。

使用方式：
    resolver = ConfigResolver(config_path="Trunk.toml")
    rtc = resolver.build(BuildOptions(release=True))
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from ..interfaces import ConfigError, EnvCoercionError, LayerError
from ..models import (
    BuildOptions,
    CleanOptions,
    RawConfig,
    RtcBuild,
    RtcClean,
    RtcServe,
    RtcWatch,
    ServeOptions,
    WatchOptions,
)
from .cli_layer import cli_layer
from .env_layer import EnvLayerLoader
from .file_layer import FileLayerLoader
from .merge import merge
from .settings import ResolverSettings

logger = logging.getLogger(__name__)


class ConfigResolver:
    """配置解析器"""

    def __init__(
        self,
        config_path: str | Path | None = None,
        settings: ResolverSettings | None = None,
    ):
        self.config_path = Path(config_path) if config_path is not None else None
        self._settings = settings

    @property
    def settings(self) -> ResolverSettings:
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    # === 各子命令 ===

    def full(self) -> RawConfig:
        """文件层与环境变量层合并后的完整配置"""
        return self._file_and_env_layers()

    def build(self, cli_build: BuildOptions | None = None) -> RtcBuild:
        """构建运行期配置"""
        config = self._with_cli(
            self._file_and_env_layers(),
            build=cli_build or BuildOptions(),
        )
        return self._rtc_build(config)

    def watch(
        self,
        cli_build: BuildOptions | None = None,
        cli_watch: WatchOptions | None = None,
    ) -> RtcWatch:
        """监听运行期配置"""
        config = self._with_cli(
            self._file_and_env_layers(),
            build=cli_build or BuildOptions(),
            watch=cli_watch or WatchOptions(),
        )
        return self._rtc_watch(config)

    def serve(
        self,
        cli_build: BuildOptions | None = None,
        cli_watch: WatchOptions | None = None,
        cli_serve: ServeOptions | None = None,
    ) -> RtcServe:
        """开发服务器运行期配置"""
        config = self._with_cli(
            self._file_and_env_layers(),
            build=cli_build or BuildOptions(),
            watch=cli_watch or WatchOptions(),
            serve=cli_serve or ServeOptions(),
        )
        watch = self._rtc_watch(config)
        return RtcServe.from_options(watch, config.serve or ServeOptions(), config.proxy)

    def clean(self, cli_clean: CleanOptions | None = None) -> RtcClean:
        """清理运行期配置"""
        config = self._with_cli(
            self._file_and_env_layers(),
            clean=cli_clean or CleanOptions(),
        )
        return RtcClean.from_options(config.clean or CleanOptions())

    # === 内部 ===

    def _file_and_env_layers(self) -> RawConfig:
        try:
            file_cfg = FileLayerLoader(
                self.config_path,
                default_name=self.settings.config_name,
            ).load()
            env_cfg = EnvLayerLoader().load()
        except LayerError as e:
            raise ConfigError(f"配置解析失败: {e}", source=e) from e
        logger.debug(f"合并文件层与环境变量层 (config={self.config_path})")
        return merge(file_cfg, env_cfg)

    @staticmethod
    def _with_cli(base: RawConfig, **sections) -> RawConfig:
        """按 build -> watch -> serve -> clean 顺序逐段叠加命令行层"""
        config = base
        for name in ("build", "watch", "serve", "clean"):
            if name in sections:
                config = merge(config, cli_layer(**{name: sections[name]}))
        return config

    def _rtc_build(self, config: RawConfig) -> RtcBuild:
        compression = config.compression if self.settings.enable_compression else None
        return RtcBuild.from_options(config.build or BuildOptions(), compression)

    def _rtc_watch(self, config: RawConfig) -> RtcWatch:
        build = self._rtc_build(config)
        return RtcWatch.from_options(build, config.watch or WatchOptions())


def load_settings() -> ResolverSettings:
    """读取解析器设置（环境变量 TRUNK_*）"""
    try:
        return ResolverSettings()
    except ValidationError as e:
        first = e.errors()[0]
        field = f"TRUNK_{first['loc'][0]}".upper() if first["loc"] else None
        source = EnvCoercionError(f"环境变量无法转换: {first['msg']}", "env", field)
        raise ConfigError(f"解析器设置无效: {source}", source=source) from e


# 便捷函数
def full_config(config: str | Path | None = None) -> RawConfig:
    """文件层与环境变量层合并后的完整配置"""
    return ConfigResolver(config).full()


def rtc_build(cli_build: BuildOptions | None = None, config: str | Path | None = None) -> RtcBuild:
    return ConfigResolver(config).build(cli_build)


def rtc_watch(
    cli_build: BuildOptions | None = None,
    cli_watch: WatchOptions | None = None,
    config: str | Path | None = None,
) -> RtcWatch:
    return ConfigResolver(config).watch(cli_build, cli_watch)


def rtc_serve(
    cli_build: BuildOptions | None = None,
    cli_watch: WatchOptions | None = None,
    cli_serve: ServeOptions | None = None,
    config: str | Path | None = None,
) -> RtcServe:
    return ConfigResolver(config).serve(cli_build, cli_watch, cli_serve)


def rtc_clean(cli_clean: CleanOptions | None = None, config: str | Path | None = None) -> RtcClean:
    return ConfigResolver(config).clean(cli_clean)
