# AssetLint Rules Module

from typing import Dict, Iterable, Optional, Type

from .base_rule import NamingRule, RuleContext
from .naming_rules import (
    TypePrefixRule,
    RegexNamingRule,
    VariantSuffixRule,
    ReplaceSectionRule,
)
from ..config import RuleConfig
from ..errors import ConfigError


def get_all_rules():
    """获取所有内置规则类"""
    return [
        TypePrefixRule,
        RegexNamingRule,
        VariantSuffixRule,
        ReplaceSectionRule,
    ]


def build_registry(extra_rules: Optional[Iterable[Type[NamingRule]]] = None) -> Dict[str, Type[NamingRule]]:
    """
    构建规则注册表 identifier -> 规则类

    Args:
        extra_rules: 额外的规则类（自定义规则），同名时覆盖内置规则
    """
    registry = {rule_class.identifier: rule_class for rule_class in get_all_rules()}
    for rule_class in extra_rules or []:
        registry[rule_class.identifier] = rule_class
    return registry


def create_rule(rule_config: RuleConfig, registry: Optional[Dict[str, Type[NamingRule]]] = None) -> NamingRule:
    """
    根据配置创建规则实例

    Raises:
        ConfigError: 未知规则类型或参数非法
    """
    registry = registry or build_registry()
    rule_class = registry.get(rule_config.type)
    if rule_class is None:
        raise ConfigError(f"Unknown naming rule type: {rule_config.type!r}")
    return rule_class(rule_config)


__all__ = [
    'NamingRule',
    'RuleContext',
    'get_all_rules',
    'build_registry',
    'create_rule',
    'TypePrefixRule',
    'RegexNamingRule',
    'VariantSuffixRule',
    'ReplaceSectionRule',
]
