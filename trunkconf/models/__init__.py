"""
数据模型层 - 定义配置系统核心数据结构

各层通过这些模型交互：
- RawConfig: 单层配置快照（文件/环境变量/命令行）
- BuildOptions/WatchOptions/ServeOptions/CleanOptions: 子命令选项
- ProxyConfig/CompressionConfig: 列表型配置段
- RtcBuild/RtcWatch/RtcServe/RtcClean: 最终运行期配置
"""

from .compression import (
    CompressionConfig,
    Compressor,
    CompressorOptions,
    group_by_algorithm,
)
from .options import (
    SUBCOMMAND_SECTIONS,
    BuildOptions,
    CleanOptions,
    MergeStrategy,
    ProxyConfig,
    RawConfig,
    ServeOptions,
    WatchOptions,
    merge_strategy,
)
from .runtime import RtcBuild, RtcClean, RtcServe, RtcWatch

__all__ = [
    "RawConfig",
    "BuildOptions",
    "WatchOptions",
    "ServeOptions",
    "CleanOptions",
    "ProxyConfig",
    "MergeStrategy",
    "merge_strategy",
    "SUBCOMMAND_SECTIONS",
    "Compressor",
    "CompressorOptions",
    "CompressionConfig",
    "group_by_algorithm",
    "RtcBuild",
    "RtcWatch",
    "RtcServe",
    "RtcClean",
]
