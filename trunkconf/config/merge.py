"""
合并引擎 - 按优先级合并两层配置快照

规则（由字段上声明的 MergeStrategy 决定）：
- NESTED: 仅一侧存在时原样使用；两侧都存在时逐字段合并
- OVERRIDE: greater 有值取 greater，否则取 lesser
- STICKY_OR: 两侧逻辑或，release/open/cargo 一旦为 True 不可被关闭
- REPLACE: 列表整体替换，不拼接、不去重

合并顺序固定为 文件 -> 环境变量 -> 命令行。
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

from ..models import MergeStrategy, RawConfig, merge_strategy

M = TypeVar("M", bound=BaseModel)


def merge(lesser: RawConfig, greater: RawConfig) -> RawConfig:
    """合并两层配置，greater 优先"""
    return merge_models(lesser, greater)


def merge_models(lesser: M, greater: M) -> M:
    """按字段策略合并同类型的两个模型"""
    merged: dict[str, Any] = {}
    for name, field in type(greater).model_fields.items():
        merged[name] = merge_value(
            merge_strategy(field),
            getattr(lesser, name),
            getattr(greater, name),
        )
    return type(greater).model_construct(**merged)


def merge_value(strategy: MergeStrategy, lesser: Any, greater: Any) -> Any:
    """按策略合并单个字段值"""
    if strategy is MergeStrategy.STICKY_OR:
        return bool(lesser) or bool(greater)

    if strategy is MergeStrategy.NESTED:
        if lesser is None:
            return greater
        if greater is None:
            return lesser
        return merge_models(lesser, greater)

    # OVERRIDE / REPLACE: 取第一个非空值（greater 优先）
    return greater if greater is not None else lesser
