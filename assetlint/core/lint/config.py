"""
Configuration Module - 设置文件解析和管理

一个工程只能有一个启用的设置文件；多个启用的设置文件视为配置错误。
"""
import copy
import yaml
from pathlib import Path
from typing import Dict, List, Any, Optional
from dataclasses import dataclass, field

from .errors import ConfigError
from ...lib.logger import get_logger


# 默认设置文件位置（相对工程根目录），按顺序查找
DEFAULT_CONFIG_FILES = [
    ".assetlint.yaml",
    ".assetlint.yml",
    "assetlint.yaml",
]

# 规则条目中的保留键，其余键都作为规则参数
_RULE_RESERVED_KEYS = {"type", "enabled", "priority", "context", "params"}


@dataclass
class RuleConfig:
    """规则配置"""
    type: str
    enabled: bool = True
    priority: int = 0
    context: Optional[str] = None  # None 表示使用规则的 default_context
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class LintSettings:
    """完整的命名检查设置"""
    # 基础配置
    enabled: bool = True
    warn_on_incorrect: bool = True
    fail_on_violation: bool = True

    # 默认规则
    ignore_script_assets: bool = True
    allow_spaces: bool = True
    # 旧版开关，加载时展开为低优先级规则
    default_prefixes_enabled: bool = False
    default_prefix_regex: str = "[A-Z0-9]"
    require_variant_suffix: bool = False

    # 命名规则（有序）
    naming_rules: List[RuleConfig] = field(default_factory=list)

    # 忽略
    ignored_paths: List[str] = field(default_factory=list)
    ignored_assets: List[str] = field(default_factory=list)  # GUID 或资源路径

    # 资源发现
    included: List[str] = field(default_factory=lambda: ["Assets/*"])
    excluded: List[str] = field(default_factory=list)
    type_overrides: Dict[str, str] = field(default_factory=dict)

    # 自定义规则路径
    custom_rules_python_path: str = ""

    # 违规日志输出目录（相对工程根目录）
    log_dir: str = "Logs"

    # 设置文件来源
    source_path: Optional[str] = None


def parse_rule_config(entry: Any, index: int = 0) -> RuleConfig:
    """
    解析单条规则配置

    支持两种写法:
        - {type: type_prefix, priority: 10, type_name: Texture2D, prefix: T}
        - {type: type_prefix, params: {type_name: Texture2D, prefix: T}}

    Raises:
        ConfigError: 条目结构非法
    """
    if not isinstance(entry, dict):
        raise ConfigError(f"naming_rules[{index}] must be a mapping")
    rule_type = entry.get("type")
    if not isinstance(rule_type, str) or not rule_type:
        raise ConfigError(f"naming_rules[{index}] missing 'type'")

    params = {k: v for k, v in entry.items() if k not in _RULE_RESERVED_KEYS}
    explicit_params = entry.get("params") or {}
    if not isinstance(explicit_params, dict):
        raise ConfigError(f"naming_rules[{index}].params must be a mapping")
    params.update(explicit_params)

    priority = entry.get("priority", 0)
    if not isinstance(priority, int) or isinstance(priority, bool):
        raise ConfigError(f"naming_rules[{index}].priority must be an integer")

    return RuleConfig(
        type=rule_type,
        enabled=bool(entry.get("enabled", True)),
        priority=priority,
        context=entry.get("context"),
        params=params,
    )


class ConfigLoader:
    """配置加载器"""

    DEFAULT_CONFIG = {
        "enabled": True,
        "warn_on_incorrect": True,
        "fail_on_violation": True,
        "ignore_script_assets": True,
        "allow_spaces": True,
        "default_prefixes_enabled": False,
        "default_prefix_regex": "[A-Z0-9]",
        "require_variant_suffix": False,
        "naming_rules": [],
        "ignored_paths": [],
        "ignored_assets": [],
        "included": ["Assets/*"],
        "excluded": [],
        "type_overrides": {},
        "custom_rules": {
            "python": {
                "path": ""
            }
        },
        "log_dir": "Logs",
    }

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else None
        self._config: Dict[str, Any] = {}
        self.logger = get_logger("assetlint")

    def load(self) -> LintSettings:
        """加载配置文件"""
        self.logger.debug(f"Loading config from: {self.config_path}")

        # 从默认配置开始（深拷贝）
        self._config = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path and self.config_path.exists():
            self.logger.debug("Config file exists, loading user config")
            with open(self.config_path, 'r', encoding='utf-8') as f:
                try:
                    user_config = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigError(f"Invalid YAML in {self.config_path}: {e}")
            if not isinstance(user_config, dict):
                raise ConfigError(f"Config root must be a mapping: {self.config_path}")
            self._merge_config(self._config, user_config)
            self.logger.debug(f"Merged {len(user_config)} user config keys")
        else:
            self.logger.debug("No config file found, using defaults only")

        settings = self._build_settings()
        self.logger.debug(f"Settings built: {len(settings.naming_rules)} naming rules configured")
        return settings

    def _merge_config(self, base: Dict, override: Dict):
        """递归合并配置"""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def _build_settings(self) -> LintSettings:
        """构建 LintSettings 对象"""
        naming_rules = []
        for index, entry in enumerate(self._config.get("naming_rules") or []):
            try:
                naming_rules.append(parse_rule_config(entry, index))
            except ConfigError as e:
                # 单条规则错误不影响其他规则
                self.logger.error(f"Skipped invalid rule: {e}")

        custom_rules = self._config.get("custom_rules") or {}

        return LintSettings(
            enabled=bool(self._config.get("enabled", True)),
            warn_on_incorrect=bool(self._config.get("warn_on_incorrect", True)),
            fail_on_violation=bool(self._config.get("fail_on_violation", True)),
            ignore_script_assets=bool(self._config.get("ignore_script_assets", True)),
            allow_spaces=bool(self._config.get("allow_spaces", True)),
            default_prefixes_enabled=bool(self._config.get("default_prefixes_enabled", False)),
            default_prefix_regex=str(self._config.get("default_prefix_regex") or "[A-Z0-9]"),
            require_variant_suffix=bool(self._config.get("require_variant_suffix", False)),
            naming_rules=naming_rules,
            ignored_paths=[str(p) for p in self._config.get("ignored_paths") or []],
            ignored_assets=[str(a) for a in self._config.get("ignored_assets") or []],
            included=list(self._config.get("included") or []),
            excluded=list(self._config.get("excluded") or []),
            type_overrides=dict(self._config.get("type_overrides") or {}),
            custom_rules_python_path=(custom_rules.get("python") or {}).get("path", "") or "",
            log_dir=str(self._config.get("log_dir") or "Logs"),
            source_path=str(self.config_path) if self.config_path else None,
        )

    def get_raw_config(self) -> Dict[str, Any]:
        """获取原始配置字典"""
        return self._config


def find_config_files(project_root: str) -> List[Path]:
    """查找工程根目录下所有存在的设置文件"""
    root = Path(project_root)
    return [root / name for name in DEFAULT_CONFIG_FILES if (root / name).is_file()]


def load_active_settings(project_root: str, config_path: Optional[str] = None) -> Optional[LintSettings]:
    """
    获取工程当前启用的设置

    - 指定 config_path 时只加载该文件，文件不存在时抛出 ConfigError
    - 否则加载所有默认位置的设置文件，要求至多一个 enabled
    - 没有设置文件时使用默认设置

    Returns:
        启用的设置；多个设置同时启用或唯一设置被禁用时返回 None（不执行检查）
    """
    logger = get_logger("assetlint")

    if config_path:
        if not Path(config_path).is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        settings = ConfigLoader(config_path).load()
        return settings if settings.enabled else None

    candidates = find_config_files(project_root)
    if not candidates:
        logger.warning("No config file found, using defaults")
        return ConfigLoader(None).load()

    enabled_settings = []
    for path in candidates:
        settings = ConfigLoader(str(path)).load()
        if settings.enabled:
            enabled_settings.append(settings)

    if len(enabled_settings) > 1:
        sources = [s.source_path for s in enabled_settings]
        logger.error(f"More than one enabled linting settings in the project, make sure only one is enabled: {sources}")
        return None

    if not enabled_settings:
        logger.info("No enabled linting settings")
        return None

    return enabled_settings[0]
