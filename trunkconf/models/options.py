"""
配置选项模型 - 各配置层共用的原始配置结构

对应 Trunk.toml 的各个段落：
- build / watch / serve / clean: 子命令选项（逐字段合并）
- proxy: 代理列表（整表替换）
- compression: 压缩列表（可选扩展段，整表替换）

所有字段均可缺省：None 表示"本层未指定"，而不是默认值。
合并策略通过 Annotated 元数据逐字段声明（见 MergeStrategy）。
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import NoDecode

from .compression import CompressionConfig


class MergeStrategy(str, Enum):
    """字段合并策略"""
    OVERRIDE = "override"    # 高层有值则取高层，否则取低层
    STICKY_OR = "sticky_or"  # 逻辑或：任意一层为 True 即为 True
    REPLACE = "replace"      # 列表整体替换，不做元素级合并
    NESTED = "nested"        # 子配置逐字段合并


def merge_strategy(field: FieldInfo) -> MergeStrategy:
    """读取字段声明的合并策略（未声明时为 OVERRIDE）"""
    for meta in field.metadata:
        if isinstance(meta, MergeStrategy):
            return meta
    return MergeStrategy.OVERRIDE


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True)


class BuildOptions(_Options):
    """构建选项"""

    # 驱动打包流程的 index HTML [默认: index.html]
    target: Path | None = None
    # release 模式 [默认: false]，一旦开启不可被更高层关闭
    release: Annotated[bool, MergeStrategy.STICKY_OR] = False
    # 产物输出目录 [默认: <target所在目录>/dist]
    dist: Path | None = None
    # 资源对外发布的 URL 前缀 [默认: /]
    public_url: str | None = None


class WatchOptions(_Options):
    """监听选项"""

    # 额外忽略的路径；环境变量中以逗号分隔
    ignore: Annotated[list[Path] | None, NoDecode] = None

    @field_validator("ignore", mode="before")
    @classmethod
    def _split_ignore(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value


class ServeOptions(_Options):
    """开发服务器选项"""

    port: Annotated[int, Field(ge=0, le=65535)] | None = None
    open: Annotated[bool, MergeStrategy.STICKY_OR] = False
    proxy_backend: AnyUrl | None = None
    proxy_rewrite: str | None = None


class CleanOptions(_Options):
    """清理选项"""

    dist: Path | None = None
    # 同时执行 cargo clean
    cargo: Annotated[bool, MergeStrategy.STICKY_OR] = False


class ProxyConfig(_Options):
    """代理配置（仅来自配置文件，不支持命令行/环境变量）"""

    backend: AnyUrl
    # 匹配此 URI 前缀的请求改写后转发到 backend
    rewrite: str | None = None


class RawConfig(_Options):
    """单层配置快照"""

    build: Annotated[BuildOptions | None, MergeStrategy.NESTED] = None
    watch: Annotated[WatchOptions | None, MergeStrategy.NESTED] = None
    serve: Annotated[ServeOptions | None, MergeStrategy.NESTED] = None
    clean: Annotated[CleanOptions | None, MergeStrategy.NESTED] = None
    proxy: Annotated[list[ProxyConfig] | None, MergeStrategy.REPLACE] = None
    compression: Annotated[list[CompressionConfig] | None, MergeStrategy.REPLACE] = None


# 子命令段落（参与路径规范化与环境变量映射）
SUBCOMMAND_SECTIONS: dict[str, type[_Options]] = {
    "build": BuildOptions,
    "watch": WatchOptions,
    "serve": ServeOptions,
    "clean": CleanOptions,
}
