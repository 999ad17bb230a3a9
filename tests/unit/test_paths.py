"""
路径规范化单元测试
"""

from pathlib import Path

from trunkconf.config import absolutize, normalize_paths
from trunkconf.models import (
    BuildOptions,
    CleanOptions,
    ProxyConfig,
    RawConfig,
    ServeOptions,
    WatchOptions,
)

BASE = Path("/project/sub")


class TestAbsolutize:
    """单个路径解析测试"""

    def test_relative(self):
        """测试相对路径拼接到基准目录"""
        assert absolutize(Path("out"), BASE) == Path("/project/sub/out")

    def test_absolute_untouched(self):
        """测试绝对路径保持不变"""
        assert absolutize(Path("/var/www"), BASE) == Path("/var/www")


class TestNormalizePaths:
    """RawConfig 路径规范化测试"""

    def test_all_path_fields(self):
        """测试各段落的路径字段"""
        raw = RawConfig(
            build=BuildOptions(target=Path("src/index.html"), dist=Path("out")),
            watch=WatchOptions(ignore=[Path("assets"), Path("/tmp/cache")]),
            clean=CleanOptions(dist=Path("out")),
        )
        result = normalize_paths(raw, BASE)

        assert result.build.target == Path("/project/sub/src/index.html")
        assert result.build.dist == Path("/project/sub/out")
        assert result.watch.ignore == [Path("/project/sub/assets"), Path("/tmp/cache")]
        assert result.clean.dist == Path("/project/sub/out")

    def test_absent_fields_untouched(self):
        """测试缺省字段与非路径字段不受影响"""
        raw = RawConfig(
            build=BuildOptions(release=True, public_url="/app/"),
            serve=ServeOptions(port=9000),
            proxy=[ProxyConfig(backend="http://localhost:9000/api")],
        )
        result = normalize_paths(raw, BASE)

        assert result == raw
        assert result.build.target is None
        assert result.watch is None

    def test_does_not_mutate_input(self):
        """测试输入快照不被修改"""
        raw = RawConfig(build=BuildOptions(dist=Path("out")))
        normalize_paths(raw, BASE)
        assert raw.build.dist == Path("out")
