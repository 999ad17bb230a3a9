"""
运行期配置 - 各子命令最终使用的不可变配置对象

职责：
- 由合并后的选项构造，补齐默认值
- 下游（打包流水线/开发服务器/监听器/清理器）只读使用

测试要点：
- test_build_defaults: target/dist/public_url 默认值
- test_watch_ignores_dist: 监听忽略产物目录
- test_serve_defaults: 端口默认 8080
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AnyUrl, BaseModel, ConfigDict

from .compression import CompressionConfig
from .options import (
    BuildOptions,
    CleanOptions,
    ProxyConfig,
    ServeOptions,
    WatchOptions,
)

DEFAULT_TARGET = "index.html"
DIST_DIR = "dist"
STAGE_DIR = ".stage"
DEFAULT_PUBLIC_URL = "/"
DEFAULT_PORT = 8080


class RtcBuild(BaseModel):
    """构建运行期配置"""

    model_config = ConfigDict(frozen=True)

    target: Path
    target_parent: Path
    release: bool
    # 最终产物目录
    final_dist: Path
    # 构建过程中的暂存目录（位于 final_dist 内）
    staging_dist: Path
    public_url: str
    # 压缩功能关闭时为 None
    compression: tuple[CompressionConfig, ...] | None = None

    @classmethod
    def from_options(
        cls,
        opts: BuildOptions,
        compression: list[CompressionConfig] | None = None,
    ) -> RtcBuild:
        """从合并后的构建选项构造"""
        target = (opts.target or Path(DEFAULT_TARGET)).absolute()
        target_parent = target.parent
        final_dist = opts.dist or target_parent / DIST_DIR
        return cls(
            target=target,
            target_parent=target_parent,
            release=opts.release,
            final_dist=final_dist,
            staging_dist=final_dist / STAGE_DIR,
            public_url=opts.public_url or DEFAULT_PUBLIC_URL,
            compression=tuple(compression) if compression is not None else None,
        )


class RtcWatch(BaseModel):
    """监听运行期配置"""

    model_config = ConfigDict(frozen=True)

    build: RtcBuild
    paths: tuple[Path, ...]
    ignored_paths: tuple[Path, ...]

    @classmethod
    def from_options(cls, build: RtcBuild, opts: WatchOptions) -> RtcWatch:
        """从构建配置与监听选项构造"""
        ignored = [path.absolute() for path in opts.ignore or []]
        if build.final_dist not in ignored:
            ignored.append(build.final_dist)
        return cls(
            build=build,
            paths=(build.target_parent,),
            ignored_paths=tuple(ignored),
        )


class RtcServe(BaseModel):
    """开发服务器运行期配置"""

    model_config = ConfigDict(frozen=True)

    watch: RtcWatch
    port: int
    open: bool
    proxy_backend: AnyUrl | None = None
    proxy_rewrite: str | None = None
    # 配置文件中的 [[proxy]] 列表
    proxies: tuple[ProxyConfig, ...] | None = None

    @classmethod
    def from_options(
        cls,
        watch: RtcWatch,
        opts: ServeOptions,
        proxies: list[ProxyConfig] | None = None,
    ) -> RtcServe:
        return cls(
            watch=watch,
            port=opts.port if opts.port is not None else DEFAULT_PORT,
            open=opts.open,
            proxy_backend=opts.proxy_backend,
            proxy_rewrite=opts.proxy_rewrite,
            proxies=tuple(proxies) if proxies is not None else None,
        )


class RtcClean(BaseModel):
    """清理运行期配置"""

    model_config = ConfigDict(frozen=True)

    dist: Path
    cargo: bool

    @classmethod
    def from_options(cls, opts: CleanOptions) -> RtcClean:
        return cls(dist=opts.dist or Path(DIST_DIR), cargo=opts.cargo)
