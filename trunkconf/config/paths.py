"""
路径规范化 - 将配置文件中的相对路径解析为绝对路径

配置文件中的路径一律相对于配置文件所在目录解释；
只作用于文件层，且在合并之前完成。
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel

from ..models import SUBCOMMAND_SECTIONS, RawConfig

M = TypeVar("M", bound=BaseModel)


def absolutize(path: Path, base: Path) -> Path:
    """相对路径拼接到 base 下，绝对路径原样返回"""
    if path.is_absolute():
        return path
    return base / path


def normalize_section(section: M, base: Path) -> M:
    """规范化单个子配置中的所有路径字段（Path 或 list[Path]）"""
    updates = {}
    for name in type(section).model_fields:
        value = getattr(section, name)
        if isinstance(value, Path):
            updates[name] = absolutize(value, base)
        elif isinstance(value, list) and value and all(isinstance(v, Path) for v in value):
            updates[name] = [absolutize(v, base) for v in value]
    if not updates:
        return section
    return section.model_copy(update=updates)


def normalize_paths(raw: RawConfig, base: Path) -> RawConfig:
    """规范化 RawConfig 各子命令段落中的路径"""
    updates = {}
    for name in SUBCOMMAND_SECTIONS:
        section = getattr(raw, name)
        if section is not None:
            updates[name] = normalize_section(section, base)
    return raw.model_copy(update=updates)
