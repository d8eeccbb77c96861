"""测试用内存资源存储"""
import posixpath
from typing import Dict, List, Optional

from assetlint.core.lint.asset_store import AssetStore
from assetlint.core.lint.config import LintSettings, parse_rule_config
from assetlint.core.lint.rule_engine import RuleEngine


class InMemoryAssetStore(AssetStore):
    """路径 -> 资源属性"""

    def __init__(self, assets: Optional[Dict[str, dict]] = None):
        self.assets: Dict[str, dict] = dict(assets or {})
        self.rename_calls: List[tuple] = []

    def add(self, path: str, type_name: str = "", is_prefab: bool = False,
            is_variant: bool = False, guid: Optional[str] = None):
        self.assets[path] = {
            "type_name": type_name,
            "is_prefab": is_prefab,
            "is_variant": is_variant,
            "guid": guid,
        }
        return self

    def get_type_name(self, asset_path: str) -> str:
        return self.assets.get(asset_path, {}).get("type_name", "")

    def is_prefab(self, asset_path: str) -> bool:
        return self.assets.get(asset_path, {}).get("is_prefab", False)

    def is_variant(self, asset_path: str) -> bool:
        return self.assets.get(asset_path, {}).get("is_variant", False)

    def get_guid(self, asset_path: str) -> Optional[str]:
        return self.assets.get(asset_path, {}).get("guid")

    def list_all_asset_paths(self) -> List[str]:
        return list(self.assets)

    def rename(self, asset_path: str, new_name: str) -> bool:
        self.rename_calls.append((asset_path, new_name))
        directory = posixpath.dirname(asset_path)
        extension = posixpath.splitext(asset_path)[1]
        target = posixpath.join(directory, new_name + extension)
        if asset_path not in self.assets or target in self.assets:
            return False
        self.assets[target] = self.assets.pop(asset_path)
        return True


def make_settings(rules=None, **kwargs) -> LintSettings:
    """用规则配置字典构造设置"""
    naming_rules = [parse_rule_config(entry, index) for index, entry in enumerate(rules or [])]
    return LintSettings(naming_rules=naming_rules, **kwargs)


def make_engine(rules=None, **kwargs) -> RuleEngine:
    return RuleEngine.from_settings(make_settings(rules, **kwargs))
