"""
模块接口契约 - 定义配置层加载器的抽象接口与异常

设计原则：
1. 每个配置层（文件/环境变量/命令行）都产出一个 RawConfig 快照
2. 层之间不共享状态，由合并引擎按优先级组合
3. 便于单元测试和mock替换

使用方式：
    from trunkconf.interfaces import ILayerLoader

    class MyLayer(ILayerLoader):
        layer = "custom"

        def load(self) -> RawConfig:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import RawConfig


# ============================================================================
# 配置层接口
# ============================================================================

class ILayerLoader(ABC):
    """配置层加载器接口"""

    #: 层名称（出现在错误信息中）
    layer: str = ""

    @abstractmethod
    def load(self) -> RawConfig:
        """
        加载本层配置快照

        Returns:
            RawConfig（未指定的字段保持为空，不填默认值）

        Raises:
            LayerError: 本层读取/解析/转换失败
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class TrunkConfError(Exception):
    """基础异常"""
    pass


class LayerError(TrunkConfError):
    """配置层错误（携带触发的层与字段）"""

    def __init__(self, message: str, layer: str, field: str | None = None):
        super().__init__(message)
        self.layer = layer
        self.field = field

    def __str__(self) -> str:
        where = f"{self.layer}:{self.field}" if self.field else self.layer
        return f"[{where}] {self.args[0]}"


class FileReadError(LayerError):
    """配置文件不存在或不可读"""
    pass


class ParseError(LayerError):
    """配置文件语法错误或字段不符合约束"""
    pass


class EnvCoercionError(LayerError):
    """环境变量无法转换为目标字段类型"""
    pass


class PathResolutionError(LayerError):
    """显式指定的配置文件路径无法规范化"""
    pass


class ConfigError(TrunkConfError):
    """解析失败（包装第一个底层错误）"""

    def __init__(self, message: str, source: LayerError):
        super().__init__(message)
        self.source = source
