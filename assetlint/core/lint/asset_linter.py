"""
Asset Name Linter Module - 批量检查资源名称

对一批导入 / 移动的资源进行检查，为每个新的违规生成警告，
同一批次内通过调用方持有的 already_seen 集合去重。
"""
from typing import Callable, Iterable, List, Optional, Set

from .asset_store import AssetStore
from .reporter import Reporter, Severity, Violation
from .rule_engine import RuleEngine
from .violation_logger import RuleViolationLogger
from ...lib.logger import get_logger


class AssetNameLinter:
    """资源名称检查器"""

    def __init__(self, engine: RuleEngine, store: AssetStore,
                 reporter: Optional[Reporter] = None,
                 on_violation: Optional[Callable[[Violation], None]] = None):
        """
        Args:
            engine: 规则引擎
            store: 资源存储
            reporter: 违规记录收集
            on_violation: 每个新违规的回调（warn_on_incorrect 时调用）
        """
        self.engine = engine
        self.store = store
        self.reporter = reporter or Reporter()
        self.on_violation = on_violation
        self.logger = get_logger("assetlint")

    @property
    def settings(self):
        return self.engine.settings

    def check_asset(self, asset_path: str) -> Optional[Violation]:
        """检查单个资源，合规时返回 None"""
        asset = self.store.asset_ref(asset_path)
        verdict = self.engine.evaluate(asset)
        if verdict.compliant:
            return None
        return Violation(
            asset_path=asset.path,
            asset_name=asset.name,
            suggested_name=self.engine.suggest(asset),
            severity=Severity.ERROR if self.settings.fail_on_violation else Severity.WARNING,
            failures=verdict.failures,
            guid=asset.guid,
        )

    def lint_batch(self, asset_paths: Iterable[str], already_seen: Set[str]) -> int:
        """
        检查一批资源

        Args:
            asset_paths: 本批次的资源路径
            already_seen: 本批次已检查的路径（会被更新）

        Returns:
            新发现的违规数量
        """
        violation_count = 0

        for path in asset_paths:
            if path in already_seen:
                continue
            already_seen.add(path)

            violation = self.check_asset(path)
            if violation is None:
                continue

            violation_count += 1
            self.reporter.add_violation(violation)
            if self.settings.warn_on_incorrect:
                self._warn(violation)

        if violation_count > 1 and self.settings.warn_on_incorrect:
            self.logger.warning(f"{violation_count} assets are not following naming conventions!")

        return violation_count

    def _warn(self, violation: Violation):
        self.logger.warning(violation.message)
        if self.on_violation:
            self.on_violation(violation)

    def lint_all(self) -> int:
        """检查工程内全部资源"""
        return self.lint_batch(self.store.list_all_asset_paths(), set())

    def get_all_violating_asset_paths(self) -> List[str]:
        """获取工程内全部违规资源路径"""
        violating = []
        for path in self.store.list_all_asset_paths():
            if not self.engine.is_compliant(self.store.asset_ref(path)):
                violating.append(path)
        return violating

    def log_violating_assets(self, violation_logger: RuleViolationLogger):
        """将工程内全部违规资源写入违规日志"""
        for path in self.get_all_violating_asset_paths():
            violation_logger.log_violation(path)
        return violation_logger.generate_log()

    def suggest_for_path(self, asset_path: str) -> str:
        """资源路径的建议名称"""
        return self.engine.suggest(self.store.asset_ref(asset_path))
