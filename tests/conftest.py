"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(write_config):
        path = write_config('[build]\\ndist = "out"\\n')
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from trunkconf.config import ConfigResolver, ResolverSettings


# ============================================================================
# 环境隔离
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """清除 TRUNK_* 环境变量，并切换到临时目录（避免读到真实 Trunk.toml）"""
    for key in list(os.environ):
        if key.upper().startswith("TRUNK_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ============================================================================
# 配置文件 Fixtures
# ============================================================================

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """项目目录（已解析符号链接）"""
    return tmp_path.resolve()


@pytest.fixture
def write_config(project_dir: Path) -> Callable[..., Path]:
    """写入配置文件，返回文件路径"""

    def _write(content: str, name: str = "Trunk.toml", subdir: str | None = None) -> Path:
        directory = project_dir / subdir if subdir else project_dir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings() -> ResolverSettings:
    """默认解析器设置（压缩关闭）"""
    return ResolverSettings()


@pytest.fixture
def compression_settings() -> ResolverSettings:
    """启用压缩扩展段的解析器设置"""
    return ResolverSettings(enable_compression=True)


@pytest.fixture
def make_resolver(settings: ResolverSettings) -> Callable[..., ConfigResolver]:
    """构造解析器"""

    def _make(config_path: Path | None = None, resolver_settings: ResolverSettings | None = None):
        return ConfigResolver(config_path, settings=resolver_settings or settings)

    return _make
