#!/usr/bin/env python3
"""
AssetLint - Unity 资源命名规范检查工具

Usage:
    assetlint [options]

Options:
    --config PATH              设置文件路径 (默认: .assetlint.yaml)
    --project-root PATH        Unity 工程根目录 (默认: 当前目录)
    --files FILE [FILE...]     指定要检查的资源（批次模式）
    --suggest                  输出建议名称
    --rename                   将违规资源重命名为建议名称
    --active-document NAME     当前打开的场景名称（同名资源不重命名）
    --export-log LOGGER        导出违规日志 (TextViolationLogger / CSVViolationLogger)
    --json-output              输出 JSON 格式
    --verbose                  详细输出
    --help                     显示帮助
"""
import argparse
import os
import sys
import traceback

from ...core.lint.violation_logger import get_available_loggers
from ...lib.logger import get_logger, cleanup_old_logs

from .linter import AssetLint


def parse_args(argv=None) -> argparse.Namespace:
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        prog="assetlint",
        description="AssetLint - Unity 资源命名规范检查工具",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "--config", "-c",
        help="设置文件路径",
        default=None
    )

    parser.add_argument(
        "--project-root", "-p",
        help="Unity 工程根目录",
        default=None  # 延迟到 main() 中解析
    )

    parser.add_argument(
        "--files", "-f",
        nargs="+",
        help="指定要检查的资源"
    )

    parser.add_argument(
        "--suggest", "-s",
        action="store_true",
        help="输出建议名称"
    )

    parser.add_argument(
        "--rename", "-r",
        action="store_true",
        help="将违规资源重命名为建议名称"
    )

    parser.add_argument(
        "--active-document",
        help="当前打开的场景名称",
        default=None
    )

    parser.add_argument(
        "--export-log", "-e",
        choices=sorted(get_available_loggers()),
        help="导出违规日志",
        default=None
    )

    parser.add_argument(
        "--json-output", "-j",
        action="store_true",
        help="输出 JSON 格式"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="详细输出"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """主入口"""
    args = parse_args(argv)
    logger = get_logger("assetlint")

    removed = cleanup_old_logs()
    if removed:
        logger.debug(f"Removed {removed} old log files")

    if args.project_root is None:
        args.project_root = os.getcwd()

    try:
        linter = AssetLint(args)
        exit_code = linter.run()
        logger.debug(f"Exit code: {exit_code}")
        sys.exit(exit_code)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
