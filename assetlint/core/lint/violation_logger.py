"""
Violation Logger Module - 违规日志导出

将违规资源导出为文本报告或 CSV 文件，文件名为 AssetLintingLog_<时间戳>.<扩展名>
"""
import csv
import io
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Type

from .asset_name import asset_name_by_path
from ...lib.logger import get_logger


LOG_FILE_PREFIX = "AssetLintingLog_"
DEFAULT_LOG_DIR = "Logs"


def get_log_file_name(now: Optional[datetime] = None) -> str:
    """基于当前 UTC 时间生成日志文件名（不含扩展名），如 AssetLintingLog_2024-05-01_10.20.30Z

    带时区的 now 先换算为 UTC，不带时区的按 UTC 处理。
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return LOG_FILE_PREFIX + now.strftime("%Y-%m-%d_%H.%M.%SZ")


class RuleViolationLogger(ABC):
    """违规日志基类"""

    # 文件扩展名
    extension: str = ""

    def __init__(self, log_dir: str = DEFAULT_LOG_DIR):
        """
        Args:
            log_dir: 日志输出目录
        """
        self.log_dir = Path(log_dir)
        self.entries: List[Tuple[str, str]] = []
        self.logger = get_logger("assetlint")

    def log_violation(self, asset_path: str):
        """记录一个违规资源"""
        self.entries.append((asset_name_by_path(asset_path), asset_path))

    @abstractmethod
    def render(self) -> str:
        """生成日志文本"""

    def generate_log(self) -> Path:
        """
        写出日志文件

        Returns:
            日志文件路径
        """
        self.log_dir.mkdir(parents=True, exist_ok=True)
        log_path = self.log_dir / f"{get_log_file_name()}.{self.extension}"
        with open(log_path, 'w', encoding='utf-8', newline='') as f:
            f.write(self.render())
        self.logger.info(f"Violation log written: {log_path} ({len(self.entries)} entries)")
        return log_path


class TextViolationLogger(RuleViolationLogger):
    """文本日志，按列对齐"""

    extension = "txt"

    HEADER = "/// ASSET NAMING INCONSISTENCIES ///"
    SUMMARY_HEADER = "/// SUMMARY ///"
    GAP = " " * 5

    def render(self) -> str:
        name_width = max((len(name) for name, _ in self.entries), default=0) + 2
        path_width = max((len(path) for _, path in self.entries), default=0) + 2

        lines = [self.HEADER, ""]
        for name, path in self.entries:
            quoted_name = f"'{name}'".ljust(name_width)
            quoted_path = f"'{path}'".ljust(path_width)
            lines.append(f"Asset{self.GAP}{quoted_name}{self.GAP}at{self.GAP}"
                         f"{quoted_path}{self.GAP}has naming inconsistencies.")
        lines.extend([
            "",
            self.SUMMARY_HEADER,
            "",
            f"A total of {len(self.entries)} naming inconsistencies were found.",
        ])
        return "\n".join(lines) + "\n"


class CSVViolationLogger(RuleViolationLogger):
    """CSV 日志"""

    extension = "csv"

    HEADER = ["Violating Asset", "Path"]

    def render(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(self.HEADER)
        writer.writerows(self.entries)
        return buffer.getvalue()


def get_available_loggers() -> Dict[str, Type[RuleViolationLogger]]:
    """获取所有可用的日志类型（类名 -> 类）"""
    return {cls.__name__: cls for cls in RuleViolationLogger.__subclasses__()}
