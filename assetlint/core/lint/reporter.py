"""
Reporter Module - 违规输出格式化
"""
import json
import sys
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ...lib.logger import get_logger


RULE_ID = "asset_naming"


class Severity(Enum):
    """严重级别：fail_on_violation 时为 error，否则为 warning"""
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Violation:
    """违规记录"""
    asset_path: str
    asset_name: str
    suggested_name: str
    severity: Severity = Severity.WARNING
    message: str = ""
    rule_id: str = RULE_ID
    source: str = "assetlint"
    failures: List[str] = field(default_factory=list)  # 不满足的检查项: prefix / infix / suffix / spaces
    guid: Optional[str] = None

    def __post_init__(self):
        if not self.message:
            self.message = (f"{self.asset_name} has naming inconsistencies! "
                            f"Suggested name is: {self.suggested_name}")

    def to_console_format(self) -> str:
        """
        转换为编辑器 / CI 可识别的格式
        格式: Assets/path/file.png: warning: message [rule_id]
        """
        return f"{self.asset_path}: {self.severity.value}: {self.message} [{self.rule_id}]"

    def to_dict(self) -> dict:
        """
        唯一序列化入口

        Returns:
            包含所有非空字段的字典
        """
        result = {
            "asset_path": self.asset_path,
            "asset_name": self.asset_name,
            "suggested_name": self.suggested_name,
            "severity": self.severity.value,
            "message": self.message,
            "rule_id": self.rule_id,
            "source": self.source,
        }
        if self.failures:
            result["failures"] = list(self.failures)
        if self.guid:
            result["guid"] = self.guid
        return result


class Reporter:
    """报告生成器"""

    def __init__(self):
        self.violations: List[Violation] = []
        self.logger = get_logger("assetlint")

    def add_violation(self, violation: Violation):
        """添加违规记录"""
        self.violations.append(violation)
        self.logger.debug(f"Added violation: {violation.asset_path} -> {violation.suggested_name}")

    def deduplicate(self):
        """去重：同一资源只保留一条"""
        seen = set()
        unique = []
        for v in self.violations:
            if v.asset_path not in seen:
                seen.add(v.asset_path)
                unique.append(v)
        self.violations = unique

    def sort(self):
        """按资源路径排序"""
        self.violations.sort(key=lambda v: v.asset_path)

    def report(self) -> int:
        """
        输出报告

        Returns:
            返回码：有违规返回 1，否则返回 0
        """
        self.deduplicate()
        self.sort()

        for v in self.violations:
            print(v.to_console_format())

        return 1 if self.violations else 0

    def get_summary(self) -> dict:
        """统计摘要：总数、按严重级别、按不满足的检查项、涉及的目录数"""
        by_severity = Counter(v.severity for v in self.violations)
        by_failure = Counter(kind for v in self.violations for kind in v.failures)
        folders = {v.asset_path.rsplit("/", 1)[0] if "/" in v.asset_path else "" for v in self.violations}

        return {
            "total": len(self.violations),
            "errors": by_severity[Severity.ERROR],
            "warnings": by_severity[Severity.WARNING],
            "by_failure": dict(sorted(by_failure.items())),
            "folders_affected": len(folders),
        }

    def to_json_dict(self, extra: Optional[dict] = None) -> dict:
        data = {
            "summary": self.get_summary(),
            "violations": [v.to_dict() for v in self.violations],
        }
        data.update(extra or {})
        return data

    def to_json(self, extra: Optional[dict] = None) -> str:
        return json.dumps(self.to_json_dict(extra=extra), indent=2, ensure_ascii=False)

    def print_summary(self):
        """打印摘要到 stderr（不影响 stdout 解析）"""
        summary = self.get_summary()
        lines = [
            f"{summary['total']} asset(s) violate naming rules "
            f"in {summary['folders_affected']} folder(s)",
        ]
        for kind, count in summary["by_failure"].items():
            lines.append(f"  {kind}: {count}")
        print("\n".join(["", "-" * 50, *lines, "-" * 50]), file=sys.stderr)
