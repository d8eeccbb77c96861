"""
Ignore Filter Module - 忽略路径 / 忽略资源

被忽略的资源不参与任何规则解析：判定恒为合规，也不生成建议名。
"""
from typing import List

from .asset_store import AssetRef
from .config import LintSettings


class IgnoreFilter:
    """忽略过滤器"""

    def __init__(self, settings: LintSettings):
        self.settings = settings

    @property
    def ignored_paths(self) -> List[str]:
        # 空白条目会匹配所有资源，需跳过
        return [p for p in self.settings.ignored_paths if p and p.strip()]

    def is_ignored(self, asset: AssetRef) -> bool:
        """
        资源是否被忽略

        - 资源标识（GUID 或路径）在 ignored_assets 中
        - 或任一 ignored_paths 条目是资源路径的子串（包含匹配，不是路径段前缀匹配）
        """
        ignored_assets = set(self.settings.ignored_assets)
        if any(identity in ignored_assets for identity in asset.identities):
            return True
        return any(path in asset.path for path in self.ignored_paths)

    def ignore_path(self, path: str):
        """添加忽略路径（已存在则跳过）"""
        if path in self.settings.ignored_paths:
            return
        self.settings.ignored_paths.append(path)

    def ignore_asset(self, asset: AssetRef):
        """添加忽略资源，优先记录 GUID"""
        identity = asset.guid or asset.path
        if identity in self.settings.ignored_assets:
            return
        self.settings.ignored_assets.append(identity)
