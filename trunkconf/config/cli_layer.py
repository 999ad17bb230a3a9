"""
命令行层 - 将已解析的命令行选项包装为 RawConfig

命令行参数由参数解析器预先校验，本层不产生错误。
"""

from __future__ import annotations

from ..interfaces import ILayerLoader
from ..models import BuildOptions, CleanOptions, RawConfig, ServeOptions, WatchOptions


class CliLayerLoader(ILayerLoader):
    """命令行层（只携带当前子命令相关的段落）"""

    layer = "cli"

    def __init__(
        self,
        build: BuildOptions | None = None,
        watch: WatchOptions | None = None,
        serve: ServeOptions | None = None,
        clean: CleanOptions | None = None,
    ):
        self.build = build
        self.watch = watch
        self.serve = serve
        self.clean = clean

    def load(self) -> RawConfig:
        return RawConfig(
            build=self.build,
            watch=self.watch,
            serve=self.serve,
            clean=self.clean,
        )


def cli_layer(
    build: BuildOptions | None = None,
    watch: WatchOptions | None = None,
    serve: ServeOptions | None = None,
    clean: CleanOptions | None = None,
) -> RawConfig:
    """便捷函数：构造命令行层快照"""
    return CliLayerLoader(build=build, watch=watch, serve=serve, clean=clean).load()
