"""
命令行入口 - 解析参数并输出各子命令的运行期配置

子命令：
- build [TARGET] [--release] [-d DIST] [--public-url URL]
- watch  build 参数 + [-i IGNORE ...]
- serve  build/watch 参数 + [--port] [--open] [--proxy-backend] [--proxy-rewrite]
- clean  [-d DIST] [--cargo]
- config show  输出文件层+环境变量层合并结果

解析成功后以 JSON 输出运行期配置；解析失败时返回退出码 1，不执行任何工作。
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import AnyUrl, TypeAdapter, ValidationError

from . import __version__
from .config import LOG_LEVELS, ConfigResolver, load_settings
from .interfaces import ConfigError
from .models import BuildOptions, CleanOptions, ServeOptions, WatchOptions

logger = logging.getLogger(__name__)

_URL_ADAPTER = TypeAdapter(AnyUrl)


# ============================================================================
# 参数类型
# ============================================================================

def parse_public_url(value: str) -> str:
    """规范化 public URL：保证以 / 开头和结尾"""
    prefix = "" if value.startswith("/") else "/"
    suffix = "" if value.endswith("/") else "/"
    return f"{prefix}{value}{suffix}"


def parse_url(value: str) -> AnyUrl:
    try:
        return _URL_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise argparse.ArgumentTypeError(f"无效的URL: {value}") from e


def parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"无效的端口: {value}") from e
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"端口超出范围 0-65535: {value}")
    return port


# ============================================================================
# 参数解析器
# ============================================================================

def _add_build_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("target", nargs="?", type=Path, help="驱动打包流程的 index HTML [默认: index.html]")
    parser.add_argument("--release", action="store_true", help="release 模式构建")
    parser.add_argument("-d", "--dist", type=Path, help="产物输出目录 [默认: dist]")
    parser.add_argument("--public-url", type=parse_public_url, help="资源发布的 URL 前缀 [默认: /]")


def _add_watch_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-i", "--ignore", type=Path, nargs="+", help="额外忽略的路径")


def _add_serve_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--port", type=parse_port, help="监听端口 [默认: 8080]")
    parser.add_argument("--open", action="store_true", help="首次构建完成后打开浏览器")
    parser.add_argument("--proxy-backend", type=parse_url, help="代理后端 URL")
    parser.add_argument("--proxy-rewrite", help="需改写并转发到后端的 URI 前缀")


def setup_parser() -> argparse.ArgumentParser:
    """构造命令行解析器"""
    parser = argparse.ArgumentParser(prog="trunkconf", description="Trunk 配置解析")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, help="配置文件路径 [默认: Trunk.toml]")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, help="日志级别 [默认: INFO]"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="解析构建配置")
    _add_build_args(build)

    watch = sub.add_parser("watch", help="解析监听配置")
    _add_build_args(watch)
    _add_watch_args(watch)

    serve = sub.add_parser("serve", help="解析开发服务器配置")
    _add_build_args(serve)
    _add_watch_args(serve)
    _add_serve_args(serve)

    clean = sub.add_parser("clean", help="解析清理配置")
    clean.add_argument("-d", "--dist", type=Path, help="产物输出目录 [默认: dist]")
    clean.add_argument("--cargo", action="store_true", help="同时执行 cargo clean")

    config = sub.add_parser("config", help="配置相关操作")
    config_sub = config.add_subparsers(dest="config_command", required=True)
    config_sub.add_parser("show", help="输出文件层与环境变量层合并后的配置")

    return parser


# ============================================================================
# 命令行层选项
# ============================================================================

def build_options(args: argparse.Namespace) -> BuildOptions:
    return BuildOptions(
        target=args.target,
        release=args.release,
        dist=args.dist,
        public_url=args.public_url,
    )


def watch_options(args: argparse.Namespace) -> WatchOptions:
    return WatchOptions(ignore=args.ignore)


def serve_options(args: argparse.Namespace) -> ServeOptions:
    return ServeOptions(
        port=args.port,
        open=args.open,
        proxy_backend=args.proxy_backend,
        proxy_rewrite=args.proxy_rewrite,
    )


def clean_options(args: argparse.Namespace) -> CleanOptions:
    return CleanOptions(dist=args.dist, cargo=args.cargo)


def resolve(args: argparse.Namespace, resolver: ConfigResolver):
    """按子命令解析运行期配置"""
    if args.command == "build":
        return resolver.build(build_options(args))
    if args.command == "watch":
        return resolver.watch(build_options(args), watch_options(args))
    if args.command == "serve":
        return resolver.serve(build_options(args), watch_options(args), serve_options(args))
    if args.command == "clean":
        return resolver.clean(clean_options(args))
    return resolver.full()


# ============================================================================
# 入口
# ============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = setup_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(str(e))
        return 1

    level = args.log_level or settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    resolver = ConfigResolver(args.config, settings=settings)
    try:
        result = resolve(args, resolver)
    except ConfigError as e:
        logger.error(f"{args.command} 配置解析失败，已中止: {e.source}")
        return 1

    logger.info(f"{args.command} 配置解析完成")
    print(result.model_dump_json(indent=2, exclude_none=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
