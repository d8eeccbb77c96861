"""
AssetLint Python Logger

每次运行一个会话，同一会话内的日志写入 <logs_dir>/<name>_<timestamp>.log。
日志目录默认 ~/.assetlint/logs/，可通过 ASSETLINT_HOME 覆盖。

Usage:
    from assetlint.lib.logger import get_logger, LogContext

    logger = get_logger('assetlint')
    logger.info("Starting asset name lint")

    with LogContext(logger, "config_loading"):
        logger.debug("Loading config from path")
"""
import logging
import os
import sys
from datetime import datetime
from functools import wraps
from typing import Dict, Optional

from .constants import (
    LOG_FORMAT,
    LOG_FORMAT_DETAILED,
    LOG_TIMESTAMP_FORMAT,
    LOG_FILENAME_FORMAT,
    DATE_FORMAT,
    ENV_VERBOSE,
    ensure_logs_dir,
)


class AssetLintLogger:
    """AssetLint 日志记录器

    包装 logging.getLogger("assetlint.<name>")，文件处理器记录全部级别，
    控制台处理器只在 verbose 模式下挂载。
    """

    _instances: Dict[str, "AssetLintLogger"] = {}
    _session_id: Optional[str] = None

    def __init__(self, name: str, log_file: Optional[str] = None):
        self.name = name
        self.logger = logging.getLogger(f"assetlint.{name}")
        self.logger.setLevel(logging.DEBUG)
        self.log_file: Optional[str] = None
        self._console: Optional[logging.Handler] = None

        if not self.logger.handlers:
            self._attach_file_handler(log_file or self._session_log_file())
            if os.environ.get(ENV_VERBOSE):
                self.enable_console()

    def _attach_file_handler(self, log_file: str):
        handler = logging.FileHandler(log_file, encoding='utf-8')
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED, DATE_FORMAT))
        self.logger.addHandler(handler)
        self.log_file = log_file

    def _session_log_file(self) -> str:
        if AssetLintLogger._session_id is None:
            AssetLintLogger._session_id = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        file_name = LOG_FILENAME_FORMAT.format(module=self.name, timestamp=AssetLintLogger._session_id)
        return str(ensure_logs_dir() / file_name)

    def enable_console(self, level: int = logging.INFO):
        """挂载 stderr 控制台处理器，重复调用只调整级别"""
        if self._console is None:
            self._console = logging.StreamHandler(sys.stderr)
            self._console.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
            self.logger.addHandler(self._console)
        self._console.setLevel(level)

    def debug(self, msg: str, *args, **kwargs):
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self.logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        """ERROR 级别并附带当前异常堆栈"""
        self.logger.exception(msg, *args, **kwargs)

    def log_separator(self, title: str = ""):
        line = f"{'=' * 20} {title} {'=' * 20}" if title else "=" * 60
        self.info(line)

    def log_list(self, title: str, items: list, level: str = "debug", max_items: int = 20):
        """记录列表，超出 max_items 的部分只记录数量"""
        log_func = getattr(self, level, self.debug)
        log_func(f"{title} ({len(items)} items):")
        for i, item in enumerate(items[:max_items]):
            log_func(f"  [{i}] {item}")
        if len(items) > max_items:
            log_func(f"  ... and {len(items) - max_items} more")

    def log_timings(self, timings: Dict[str, float], level: str = "info"):
        """按耗时降序记录各阶段耗时"""
        log_func = getattr(self, level, self.info)
        log_func(f"Phase timings ({sum(timings.values()):.3f}s total):")
        for phase, elapsed in sorted(timings.items(), key=lambda kv: kv[1], reverse=True):
            log_func(f"  {phase}: {elapsed:.3f}s")


def get_logger(name: str, log_file: Optional[str] = None) -> AssetLintLogger:
    """
    获取日志记录器（单例模式）

    Args:
        name: 日志记录器名称，如 'assetlint', 'renamer'
        log_file: 可选的日志文件路径，仅首次创建时生效

    Returns:
        AssetLintLogger 实例
    """
    if name not in AssetLintLogger._instances:
        AssetLintLogger._instances[name] = AssetLintLogger(name, log_file)
    return AssetLintLogger._instances[name]


def reset_session():
    """关闭全部处理器并开始新会话，下一次 get_logger 会创建新的日志文件"""
    for instance in AssetLintLogger._instances.values():
        for handler in list(instance.logger.handlers):
            instance.logger.removeHandler(handler)
            handler.close()
    AssetLintLogger._session_id = None
    AssetLintLogger._instances.clear()


def log_function(logger_name: str = "assetlint"):
    """函数装饰器，记录调用、完成和失败"""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(logger_name)
            logger.debug(f"Calling {func.__qualname__}()")
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__qualname__}() failed: {e}")
                raise
            logger.debug(f"{func.__qualname__}() completed")
            return result
        return wrapper
    return decorator


# ==================== 便捷函数 ====================

def log_lint_start(project_root: str, assets_count: int, batch_mode: bool = False):
    """记录 lint 会话开始"""
    logger = get_logger("assetlint")
    logger.log_separator("AssetLint Session Start")
    logger.info(f"Project root: {project_root}")
    logger.info(f"Assets to check: {assets_count} ({'selected files' if batch_mode else 'full scan'})")


def log_lint_end(violations_count: int, elapsed: float):
    """记录 lint 会话结束"""
    logger = get_logger("assetlint")
    logger.info(f"Lint completed in {elapsed:.2f}s with {violations_count} violation(s)")
    logger.log_separator("AssetLint Session End")
