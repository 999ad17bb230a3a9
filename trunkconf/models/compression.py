"""
压缩配置模型 - Trunk.toml 中的 [[compression]] 段

注意：该段总是参与校验，仅在 ResolverSettings.enable_compression 开启时交给 RtcBuild。
压缩算法本身不在本模块范围内，下游按 algorithm 分派。

示例：
    [[compression]]
    algorithm = "gzip"
    options = { level = 9 }
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Compressor(str, Enum):
    """压缩算法"""
    GZIP = "gzip"
    BROTLI = "brotli"
    ZSTD = "zstd"


class CompressorOptions(BaseModel):
    """传递给压缩算法的参数"""

    model_config = ConfigDict(frozen=True)

    level: int | None = Field(default=None, ge=0)


class CompressionConfig(BaseModel):
    """单条压缩配置"""

    model_config = ConfigDict(frozen=True)

    # 必填，缺失时整个配置文件解析失败
    algorithm: Compressor
    options: CompressorOptions | None = None
    # 资源筛选正则
    test: str | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None
    # 资源体积阈值（字节）
    threshold: int | None = Field(default=None, ge=0)
    # 压缩比低于该值时不输出压缩文件
    ratio: float | None = None

    @field_validator("test")
    @classmethod
    def _check_regex(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"无效的正则表达式: {value!r} ({e})") from e
        return value


def group_by_algorithm(
    entries: Iterable[CompressionConfig] | None,
) -> dict[Compressor, list[CompressionConfig]]:
    """按算法分组（供压缩分派器使用），保持配置顺序"""
    groups: dict[Compressor, list[CompressionConfig]] = {}
    for entry in entries or ():
        groups.setdefault(entry.algorithm, []).append(entry)
    return groups
