"""
配置层 - 加载、合并并解析各层配置

职责：
- 文件层：读取 Trunk.toml，路径相对配置文件目录解析
- 环境变量层：读取 TRUNK_BUILD_* / TRUNK_WATCH_* / TRUNK_SERVE_* / TRUNK_CLEAN_*
- 命令行层：包装已解析的命令行选项
- 合并引擎与解析器：按 文件 -> 环境变量 -> 命令行 的优先级产出运行期配置
"""

from .cli_layer import CliLayerLoader, cli_layer
from .env_layer import EnvLayerLoader
from .file_layer import FileLayerLoader
from .merge import merge, merge_models
from .paths import absolutize, normalize_paths
from .resolver import (
    ConfigResolver,
    full_config,
    load_settings,
    rtc_build,
    rtc_clean,
    rtc_serve,
    rtc_watch,
)
from .settings import DEFAULT_CONFIG_NAME, ENV_PREFIXES, LOG_LEVELS, ResolverSettings

__all__ = [
    "FileLayerLoader",
    "EnvLayerLoader",
    "CliLayerLoader",
    "cli_layer",
    "merge",
    "merge_models",
    "absolutize",
    "normalize_paths",
    "ConfigResolver",
    "full_config",
    "load_settings",
    "rtc_build",
    "rtc_watch",
    "rtc_serve",
    "rtc_clean",
    "ResolverSettings",
    "DEFAULT_CONFIG_NAME",
    "ENV_PREFIXES",
    "LOG_LEVELS",
]
