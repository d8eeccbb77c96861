"""
AssetLint Logger Constants

日志目录与格式定义，只依赖标准库。
"""
import os
from pathlib import Path


# 环境变量
ENV_HOME = "ASSETLINT_HOME"        # 覆盖全局根目录（默认 ~/.assetlint）
ENV_VERBOSE = "ASSETLINT_VERBOSE"  # 非空时输出到控制台

# 会话日志文件: <logger>_<YYYYmmdd_HHMMSS>.log
LOG_FILENAME_FORMAT = "{module}_{timestamp}.log"
LOG_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_FORMAT_DETAILED = "%(asctime)s [%(levelname)s] [%(name)s:%(funcName)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_RETENTION_DAYS = 7


def get_global_dir() -> Path:
    """全局根目录，每次调用时读取 ASSETLINT_HOME"""
    return Path(os.environ.get(ENV_HOME) or Path.home() / ".assetlint")


def get_logs_dir() -> Path:
    return get_global_dir() / "logs"


def ensure_logs_dir() -> Path:
    """确保日志目录存在"""
    logs_dir = get_logs_dir()
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir
