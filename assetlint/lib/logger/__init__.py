"""
AssetLint Logger Module

会话日志写入 ~/.assetlint/logs/（ASSETLINT_HOME 可覆盖根目录）。

Usage:
    from assetlint.lib.logger import get_logger, LogContext

    logger = get_logger("assetlint")
    timings = {}
    with LogContext(logger, "config_loading", timings):
        logger.debug("Loading config...")
    logger.log_timings(timings)

Available loggers:
    - assetlint: 检查、配置和规则加载
    - renamer: 批量重命名
"""
from .python_logger import (
    AssetLintLogger,
    get_logger,
    reset_session,
    log_function,
    log_lint_start,
    log_lint_end,
)
from .context import LogContext
from .utils import cleanup_old_logs, get_current_log_file
from .constants import get_global_dir, get_logs_dir

__all__ = [
    'AssetLintLogger',
    'get_logger',
    'LogContext',
    'reset_session',
    'log_function',
    'log_lint_start',
    'log_lint_end',
    'cleanup_old_logs',
    'get_current_log_file',
    'get_global_dir',
    'get_logs_dir',
]
