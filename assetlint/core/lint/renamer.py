"""
Asset Renamer Module - 批量重命名

每个资源对应一个重命名操作（当前名 / 新名 / 建议名），
非法或不安全的重命名会被跳过，文件系统失败计为失败，不会中断批量操作。
"""
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .asset_name import asset_name_by_path
from .asset_store import AssetStore
from ...lib.logger import get_logger


# 不能出现在文件名中的字符（含控制字符）
_INVALID_NAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


@dataclass
class AssetRenameOperation:
    """单个资源的重命名操作"""
    asset_path: str
    new_name: str
    suggested_name: str = ""

    @property
    def current_name(self) -> str:
        return asset_name_by_path(self.asset_path)

    @property
    def is_different(self) -> bool:
        return self.new_name != self.current_name

    def use_suggested_name(self):
        """将新名称设为建议名称"""
        self.new_name = self.suggested_name


@dataclass
class RenameSummary:
    """重命名结果统计"""
    renamed: int = 0
    skipped: int = 0
    failed: int = 0

    def __str__(self) -> str:
        return (f"Renamed {self.renamed} asset(s), skipped {self.skipped} asset(s), "
                f"and failed to rename {self.failed} asset(s).")


def is_valid_file_name(name: str) -> bool:
    """名称非空且不含非法字符"""
    return bool(name) and not _INVALID_NAME_CHARS.search(name)


class AssetRenamer:
    """批量重命名器"""

    def __init__(self, store: AssetStore, active_document: Optional[str] = None):
        """
        Args:
            store: 资源存储
            active_document: 当前打开文档（场景）的名称，同名资源不允许重命名
        """
        self.store = store
        self.active_document = active_document
        self.logger = get_logger("renamer")

    def is_rename_valid(self, operation: AssetRenameOperation) -> bool:
        return (bool(operation.asset_path) and
                is_valid_file_name(operation.new_name) and
                operation.is_different)

    def is_rename_safe(self, operation: AssetRenameOperation) -> bool:
        if not self.active_document:
            return True
        return operation.current_name != self.active_document

    def rename_all(self, operations: Iterable[AssetRenameOperation]) -> RenameSummary:
        """执行所有重命名操作"""
        summary = RenameSummary()

        for operation in operations:
            if not self.is_rename_valid(operation) or not self.is_rename_safe(operation):
                self.logger.debug(f"Skipped rename: {operation.asset_path} -> {operation.new_name!r}")
                summary.skipped += 1
                continue

            if self.store.rename(operation.asset_path, operation.new_name):
                summary.renamed += 1
            else:
                summary.failed += 1

        self.logger.info(str(summary))
        return summary


def build_operations(asset_paths: Iterable[str], suggest) -> List[AssetRenameOperation]:
    """
    为资源构造重命名操作，新名称默认等于当前名称

    Args:
        asset_paths: 资源路径
        suggest: 资源路径 -> 建议名称
    """
    operations = []
    for path in asset_paths:
        operations.append(AssetRenameOperation(
            asset_path=path,
            new_name=asset_name_by_path(path),
            suggested_name=suggest(path),
        ))
    return operations
