# 命令行入口
"""
biograph 命令行:

    biograph sdl [--module NAME] [--output FILE] [--with-directives]
    biograph lint [--strict]
    biograph assertions [--apply]
    biograph serve
"""

import argparse
import asyncio
import sys
from pathlib import Path

from biograph.config import get_settings
from biograph.knowledge.schema import (
    DIRECTIVE_PRELUDE,
    get_schema_registry,
    lint_registry,
    render_module,
    render_sdl,
    schema_assertions,
)
from biograph.utils import LOG_LEVELS, get_logger, setup_logging

logger = get_logger(__name__)


def _cmd_sdl(args: argparse.Namespace) -> int:
    registry = get_schema_registry()

    if args.module:
        try:
            sdl = render_module(registry.module(args.module))
        except KeyError as e:
            print(e.args[0], file=sys.stderr)
            return 2
        if args.with_directives:
            sdl = DIRECTIVE_PRELUDE + "\n" + sdl
    else:
        sdl = render_sdl(registry, include_directives=args.with_directives)

    if args.output:
        Path(args.output).write_text(sdl, encoding="utf-8")
        logger.info("SDL written", path=args.output, types=len(registry))
    else:
        sys.stdout.write(sdl)
    return 0


def _cmd_lint(args: argparse.Namespace) -> int:
    report = lint_registry(get_schema_registry())

    for issue in report.issues:
        location = issue.type_name or ""
        if issue.field_name:
            location += f".{issue.field_name}"
        print(f"{issue.severity:<7} {issue.code:<22} {location}: {issue.message}")

    print(f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)")

    if report.errors or (args.strict and report.warnings):
        return 1
    return 0


async def _apply_assertions() -> int:
    from biograph.knowledge.neo4j_client import get_neo4j_client, init_neo4j_schema

    client = get_neo4j_client()
    try:
        await client.connect()
        return await init_neo4j_schema(client, get_schema_registry())
    finally:
        await client.close()


def _cmd_assertions(args: argparse.Namespace) -> int:
    if args.apply:
        count = asyncio.run(_apply_assertions())
        print(f"{count} statement(s) applied")
        return 0

    for statement in schema_assertions(get_schema_registry()):
        print(statement + ";")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    from biograph.api.main import run

    run()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biograph",
        description="生物医药知识图谱类型定义工具",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="覆盖配置中的日志级别",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sdl = subparsers.add_parser("sdl", help="输出合并后的 GraphQL SDL")
    sdl.add_argument("--module", type=str, help="只渲染指定的 Schema 模块")
    sdl.add_argument("--output", "-o", type=str, help="写入文件而非标准输出")
    sdl.add_argument(
        "--with-directives",
        action="store_true",
        help="前置指令定义，使 SDL 可单独校验",
    )
    sdl.set_defaults(func=_cmd_sdl)

    lint = subparsers.add_parser("lint", help="检查合并后的 SDL")
    lint.add_argument("--strict", action="store_true", help="存在警告时同样返回失败")
    lint.set_defaults(func=_cmd_lint)

    assertions = subparsers.add_parser("assertions", help="Neo4j 约束与索引语句")
    assertions.add_argument("--apply", action="store_true", help="在 Neo4j 中执行")
    assertions.set_defaults(func=_cmd_assertions)

    serve = subparsers.add_parser("serve", help="启动 API 服务")
    serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    """命令行入口"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # 日志写入 stderr，stdout 仅输出命令结果
    setup_logging(args.log_level or get_settings().log_level, stream=sys.stderr)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
