"""
Rule Engine Module - 命名规则引擎

负责:
- 从设置创建规则（内置规则 + 自定义 Python 规则 + 旧版开关展开的默认规则）
- 按位置（前缀 / 中缀 / 后缀）解析资源适用的最高优先级规则
- 判定资源名称是否合规
- 生成建议名称
"""
import importlib.util
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Type

from .asset_store import AssetRef
from .config import LintSettings, RuleConfig
from .errors import ConfigError
from .ignore_filter import IgnoreFilter
from .rules import NamingRule, RuleContext, build_registry, create_rule
from .rules.rule_utils import suffix_token_matches
from ...lib.logger import get_logger


# 旧版开关展开的规则优先级，低于任何用户规则
LEGACY_RULE_PRIORITY = -1_000_000


@dataclass(frozen=True)
class ResolvedRules:
    """资源在各位置上生效的规则（每个位置至多一条）"""
    prefix: Optional[NamingRule] = None
    infix: Optional[NamingRule] = None
    suffix: Optional[NamingRule] = None

    @property
    def any(self) -> bool:
        return any(rule is not None for rule in (self.prefix, self.infix, self.suffix))


@dataclass
class Verdict:
    """判定结果"""
    compliant: bool
    # 不满足的检查项: prefix / infix / suffix / spaces
    failures: List[str] = field(default_factory=list)


class RuleEngine:
    """规则引擎 - 管理规则并执行判定"""

    def __init__(self, settings: LintSettings, project_root: Optional[str] = None):
        """
        Args:
            settings: 当前启用的设置（检查期间只读）
            project_root: 工程根目录，用于定位自定义规则
        """
        self.settings = settings
        self.project_root = Path(project_root) if project_root else None
        self.rules: List[NamingRule] = []
        self.ignore_filter = IgnoreFilter(settings)
        self._custom_rule_classes: List[Type[NamingRule]] = []
        self.logger = get_logger("assetlint")

    @classmethod
    def from_settings(cls, settings: LintSettings, project_root: Optional[str] = None) -> 'RuleEngine':
        """创建引擎并加载全部规则"""
        engine = cls(settings, project_root)
        if settings.custom_rules_python_path:
            engine.load_custom_rules(settings.custom_rules_python_path)
        engine.load_builtin_rules()
        return engine

    # ==================== 规则加载 ====================

    def load_builtin_rules(self):
        """按设置中的顺序创建规则，单条规则配置错误时记录并跳过"""
        self.logger.debug("Loading naming rules...")
        registry = build_registry(self._custom_rule_classes)

        loaded_count = 0
        for rule_config in self.settings.naming_rules:
            if not rule_config.enabled:
                self.logger.debug(f"Skipped disabled rule: {rule_config.type}")
                continue
            try:
                rule = create_rule(rule_config, registry)
            except ConfigError as e:
                self.logger.error(f"Invalid naming rule {rule_config.type}: {e}")
                continue
            self.rules.append(rule)
            loaded_count += 1
            self.logger.debug(f"Loaded rule: {rule!r}")

        self._load_legacy_rules(registry)
        self.logger.info(f"Loaded {loaded_count} naming rules ({len(self.rules)} total)")

    def _load_legacy_rules(self, registry: Dict[str, Type[NamingRule]]):
        """旧版开关（默认前缀、变体后缀）展开为最低优先级规则"""
        legacy_configs = []
        if self.settings.default_prefixes_enabled:
            legacy_configs.append(RuleConfig(
                type="regex",
                priority=LEGACY_RULE_PRIORITY,
                context=RuleContext.PREFIX.value,
                params={"pattern": self.settings.default_prefix_regex},
            ))
        if self.settings.require_variant_suffix:
            legacy_configs.append(RuleConfig(type="variant_suffix", priority=LEGACY_RULE_PRIORITY))

        for rule_config in legacy_configs:
            try:
                self.rules.append(create_rule(rule_config, registry))
            except ConfigError as e:
                self.logger.error(f"Invalid default rule {rule_config.type}: {e}")

    def load_custom_rules(self, custom_rules_path: str):
        """加载自定义 Python 规则类（NamingRule 子类），配置中通过 type 引用"""
        rules_dir = Path(custom_rules_path)
        if not rules_dir.is_absolute() and self.project_root:
            rules_dir = self.project_root / rules_dir
        self.logger.debug(f"Loading custom rules from: {rules_dir}")

        if not rules_dir.exists():
            self.logger.debug("Custom rules directory does not exist")
            return

        loaded_count = 0
        for py_file in sorted(rules_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue

            try:
                loaded_count += self._load_rule_from_file(py_file)
                self.logger.debug(f"Loaded custom rule from: {py_file.name}")
            except Exception as e:
                self.logger.warning(f"Failed to load custom rule {py_file}: {e}")

        self.logger.info(f"Loaded {loaded_count} custom rule classes")

    def _load_rule_from_file(self, file_path: Path) -> int:
        """从文件加载规则类，返回找到的规则类数量"""
        spec = importlib.util.spec_from_file_location(f"assetlint_custom_{file_path.stem}", file_path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        found = 0
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if (isinstance(attr, type) and
                issubclass(attr, NamingRule) and
                attr is not NamingRule and
                getattr(attr, '__module__', None) == module.__name__ and
                attr.identifier):
                self._custom_rule_classes.append(attr)
                found += 1
        return found

    # ==================== 规则解析 ====================

    def is_ignored(self, asset: AssetRef) -> bool:
        return self.ignore_filter.is_ignored(asset)

    def resolve(self, asset: AssetRef) -> ResolvedRules:
        """
        解析资源在各位置上生效的规则

        - 被忽略的资源没有任何规则
        - 脚本资源且 ignore_script_assets 时，前缀 / 后缀不解析（中缀仍解析）
        - 同一位置取优先级最高的规则，优先级相同时取列表中靠前者
        """
        if self.is_ignored(asset):
            return ResolvedRules()

        skip_fixes = self.settings.ignore_script_assets and asset.is_script
        return ResolvedRules(
            prefix=None if skip_fixes else self._rule_for(asset, RuleContext.PREFIX),
            infix=self._rule_for(asset, RuleContext.INFIX),
            suffix=None if skip_fixes else self._rule_for(asset, RuleContext.SUFFIX),
        )

    def _rule_for(self, asset: AssetRef, context: RuleContext) -> Optional[NamingRule]:
        candidates = [
            rule for rule in self.rules
            if rule.enabled and rule.context == context and self._applies(rule, asset)
        ]
        if not candidates:
            return None
        # sorted 稳定，降序时同优先级保持原顺序
        return sorted(candidates, key=lambda rule: rule.priority, reverse=True)[0]

    def _applies(self, rule: NamingRule, asset: AssetRef) -> bool:
        try:
            return bool(rule.applies(asset))
        except Exception as e:
            self.logger.warning(f"Rule {rule.identifier} failed on {asset.path}: {e}")
            return False

    def _fix(self, rule: Optional[NamingRule], asset: AssetRef) -> str:
        if rule is None:
            return ""
        try:
            return rule.fix(asset) or ""
        except Exception as e:
            self.logger.warning(f"Rule {rule.identifier} failed to compute fix for {asset.path}: {e}")
            return ""

    def fix_for(self, asset: AssetRef, context: RuleContext) -> str:
        """资源在指定位置上的期望片段（没有规则时为空字符串）"""
        resolved = self.resolve(asset)
        rule = {
            RuleContext.PREFIX: resolved.prefix,
            RuleContext.INFIX: resolved.infix,
            RuleContext.SUFFIX: resolved.suffix,
        }[context]
        return self._fix(rule, asset)

    # ==================== 判定 ====================

    def evaluate(self, asset: AssetRef) -> Verdict:
        """
        判定资源名称

        - 前缀: 名称以期望前缀开头
        - 中缀: 名称与中缀规则给出的完整名称完全一致
        - 后缀: 后缀以完整 token 出现在末尾（之后只能是结尾或 _ 开头的内容）
        """
        if self.is_ignored(asset):
            return Verdict(compliant=True)

        failures = []
        if not self.settings.allow_spaces and " " in asset.name:
            failures.append("spaces")

        resolved = self.resolve(asset)
        if resolved.any:
            prefix = self._fix(resolved.prefix, asset)
            if prefix and not asset.name.startswith(prefix):
                failures.append(RuleContext.PREFIX.value)

            infix = self._fix(resolved.infix, asset)
            if infix and asset.name != infix:
                failures.append(RuleContext.INFIX.value)

            suffix = self._fix(resolved.suffix, asset)
            if suffix and not suffix_token_matches(asset.name, suffix):
                failures.append(RuleContext.SUFFIX.value)

        return Verdict(compliant=not failures, failures=failures)

    def is_compliant(self, asset: AssetRef) -> bool:
        """资源名称是否符合规则（没有适用规则时视为合规）"""
        return self.evaluate(asset).compliant

    # ==================== 建议名称 ====================

    def suggest(self, asset: AssetRef) -> str:
        """
        生成建议名称

        先去掉已存在的期望前缀 / 后缀和所有下划线，得到基础名；
        有中缀规则时以其对基础名的变换结果替换基础名；再加上前缀和后缀。
        已合规的名称即为自身的建议名，对建议名再次调用结果不变。
        """
        if self.is_ignored(asset) or self.evaluate(asset).compliant:
            return asset.name

        resolved = self.resolve(asset)
        prefix = self._fix(resolved.prefix, asset)
        suffix = self._fix(resolved.suffix, asset)

        base = asset.name
        if prefix and base.startswith(prefix):
            base = base[len(prefix):]
        if suffix and base.endswith(suffix):
            base = base[:-len(suffix)]

        base = base.replace("_", "")
        if not self.settings.allow_spaces:
            base = base.replace(" ", "")

        if resolved.infix is not None:
            base = self._fix(resolved.infix, asset.with_name(base)) or base

        return prefix + base + suffix
