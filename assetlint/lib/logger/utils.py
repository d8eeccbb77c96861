"""
AssetLint Logger Utilities
"""
import time
from typing import Optional

from .constants import LOG_RETENTION_DAYS, get_logs_dir


def cleanup_old_logs(max_days: int = LOG_RETENTION_DAYS) -> int:
    """删除修改时间早于 max_days 天的会话日志，返回删除数量"""
    logs_dir = get_logs_dir()
    if not logs_dir.is_dir():
        return 0

    cutoff = time.time() - max_days * 86400
    deleted_count = 0
    for log_file in logs_dir.glob("*.log"):
        try:
            if log_file.stat().st_mtime < cutoff:
                log_file.unlink()
                deleted_count += 1
        except OSError:
            # 其他进程正在写入或已删除
            continue
    return deleted_count


def get_current_log_file(name: str = "assetlint") -> Optional[str]:
    """当前会话中指定日志记录器的文件路径，未创建时返回 None"""
    from .python_logger import AssetLintLogger

    instance = AssetLintLogger._instances.get(name)
    return instance.log_file if instance else None
