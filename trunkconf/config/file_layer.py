"""
文件层 - 读取 Trunk.toml（或 YAML 格式的同名配置）

职责：
- 定位配置文件（默认当前目录下的 Trunk.toml）
- 解析 TOML/YAML 并校验各段结构
- 将相对路径解析为相对于配置文件所在目录的绝对路径

测试要点：
- test_missing_default_file: 默认文件不存在时返回空配置
- test_missing_explicit_file: 显式指定的文件不存在时报错
- test_relative_dist: 相对路径基于配置文件目录
- test_compression_without_algorithm: 缺少 algorithm 时解析失败
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..interfaces import FileReadError, ILayerLoader, ParseError, PathResolutionError
from ..models import RawConfig
from .paths import normalize_paths
from .settings import DEFAULT_CONFIG_NAME

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class FileLayerLoader(ILayerLoader):
    """配置文件层"""

    layer = "file"

    def __init__(
        self,
        path: str | Path | None = None,
        *,
        default_name: str = DEFAULT_CONFIG_NAME,
    ):
        self.explicit = path is not None
        self.path = Path(path) if path is not None else Path(default_name)

    def load(self) -> RawConfig:
        """加载配置文件；默认位置不存在时返回空配置"""
        if not self.path.exists():
            if self.explicit:
                raise FileReadError(f"配置文件不存在: {self.path}", self.layer)
            logger.debug(f"未找到配置文件 {self.path}，使用空配置")
            return RawConfig()

        path = self._canonicalize()
        if path is None:
            logger.debug(f"配置文件 {self.path} 已不存在，使用空配置")
            return RawConfig()

        data = self._parse(path, self._read(path))
        config = self._validate(data)

        logger.debug(f"已加载配置文件: {path}")
        return normalize_paths(config, base=path.parent)

    def _canonicalize(self) -> Path | None:
        try:
            return self.path.resolve(strict=True)
        except OSError as e:
            if not self.explicit:
                # 默认位置在 exists() 之后消失，按不存在处理
                return None
            raise PathResolutionError(
                f"无法获取配置文件的规范路径: {self.path} ({e})", self.layer
            ) from e

    def _read(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            raise FileReadError(f"读取配置文件失败: {path} ({e})", self.layer) from e

    def _parse(self, path: Path, raw: bytes) -> dict[str, Any]:
        """按扩展名解析为 dict"""
        try:
            text = raw.decode("utf-8")
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(text)
            else:
                data = tomllib.loads(text)
        except (UnicodeDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as e:
            raise ParseError(f"配置文件格式错误: {path} ({e})", self.layer) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ParseError(f"配置文件顶层必须是表结构: {path}", self.layer)
        return data

    def _validate(self, data: dict[str, Any]) -> RawConfig:
        # [[compression]] 总是参与校验；功能开关只决定是否交给运行期配置
        try:
            return RawConfig.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise ParseError(f"配置字段无效: {first['msg']}", self.layer, field) from e
