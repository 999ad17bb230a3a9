"""
环境变量层单元测试
"""

from pathlib import Path

import pytest

from trunkconf.config import EnvLayerLoader
from trunkconf.interfaces import EnvCoercionError
from trunkconf.models import (
    BuildOptions,
    CleanOptions,
    RawConfig,
    ServeOptions,
    WatchOptions,
)


class TestEnvLayer:
    """环境变量读取测试"""

    def test_empty_environment(self):
        """测试无环境变量时四个段落仍然存在"""
        config = EnvLayerLoader().load()
        assert config == RawConfig(
            build=BuildOptions(),
            watch=WatchOptions(),
            serve=ServeOptions(),
            clean=CleanOptions(),
        )
        assert config.proxy is None
        assert config.compression is None

    def test_build_vars(self, monkeypatch: pytest.MonkeyPatch):
        """测试构建相关变量"""
        monkeypatch.setenv("TRUNK_BUILD_RELEASE", "true")
        monkeypatch.setenv("TRUNK_BUILD_DIST", "out")
        monkeypatch.setenv("TRUNK_BUILD_PUBLIC_URL", "/app/")

        build = EnvLayerLoader().load().build
        assert build.release is True
        # 环境变量中的路径不做规范化
        assert build.dist == Path("out")
        assert build.public_url == "/app/"
        assert build.target is None

    def test_watch_ignore_list(self, monkeypatch: pytest.MonkeyPatch):
        """测试逗号分隔的忽略路径"""
        monkeypatch.setenv("TRUNK_WATCH_IGNORE", "node_modules, target")
        assert EnvLayerLoader().load().watch.ignore == [Path("node_modules"), Path("target")]

    def test_serve_vars(self, monkeypatch: pytest.MonkeyPatch):
        """测试开发服务器相关变量"""
        monkeypatch.setenv("TRUNK_SERVE_PORT", "9000")
        monkeypatch.setenv("TRUNK_SERVE_OPEN", "1")
        monkeypatch.setenv("TRUNK_SERVE_PROXY_BACKEND", "http://localhost:8000/api")
        monkeypatch.setenv("TRUNK_SERVE_PROXY_REWRITE", "/api/")

        serve = EnvLayerLoader().load().serve
        assert serve.port == 9000
        assert serve.open is True
        assert str(serve.proxy_backend) == "http://localhost:8000/api"
        assert serve.proxy_rewrite == "/api/"

    def test_clean_vars(self, monkeypatch: pytest.MonkeyPatch):
        """测试清理相关变量"""
        monkeypatch.setenv("TRUNK_CLEAN_CARGO", "yes")
        monkeypatch.setenv("TRUNK_CLEAN_DIST", "/var/dist")

        clean = EnvLayerLoader().load().clean
        assert clean.cargo is True
        assert clean.dist == Path("/var/dist")

    def test_empty_value_is_unset(self, monkeypatch: pytest.MonkeyPatch):
        """测试空值视为未指定"""
        monkeypatch.setenv("TRUNK_SERVE_PORT", "")
        assert EnvLayerLoader().load().serve.port is None

    def test_other_prefixes_ignored(self, monkeypatch: pytest.MonkeyPatch):
        """测试不同前缀互不干扰"""
        monkeypatch.setenv("TRUNK_CLEAN_DIST", "clean-out")
        config = EnvLayerLoader().load()
        assert config.build.dist is None
        assert config.clean.dist == Path("clean-out")


class TestEnvCoercion:
    """环境变量类型转换失败测试"""

    def test_invalid_port(self, monkeypatch: pytest.MonkeyPatch):
        """测试端口不是整数"""
        monkeypatch.setenv("TRUNK_SERVE_PORT", "abc")
        with pytest.raises(EnvCoercionError) as exc_info:
            EnvLayerLoader().load()
        assert exc_info.value.layer == "env"
        assert exc_info.value.field == "TRUNK_SERVE_PORT"

    def test_port_out_of_range(self, monkeypatch: pytest.MonkeyPatch):
        """测试端口超出范围"""
        monkeypatch.setenv("TRUNK_SERVE_PORT", "70000")
        with pytest.raises(EnvCoercionError):
            EnvLayerLoader().load()

    def test_invalid_bool(self, monkeypatch: pytest.MonkeyPatch):
        """测试布尔值无法识别"""
        monkeypatch.setenv("TRUNK_BUILD_RELEASE", "maybe")
        with pytest.raises(EnvCoercionError) as exc_info:
            EnvLayerLoader().load()
        assert exc_info.value.field == "TRUNK_BUILD_RELEASE"

    def test_invalid_url(self, monkeypatch: pytest.MonkeyPatch):
        """测试代理地址无效"""
        monkeypatch.setenv("TRUNK_SERVE_PROXY_BACKEND", "not a url")
        with pytest.raises(EnvCoercionError):
            EnvLayerLoader().load()
