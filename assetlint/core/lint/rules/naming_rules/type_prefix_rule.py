"""
Type Prefix Rule - 类型前缀规则
"""
from ..base_rule import NamingRule, RuleContext
from ...errors import ConfigError


class TypePrefixRule(NamingRule):
    """资源类型匹配时要求固定前缀，如 Texture2D -> T_"""

    identifier = "type_prefix"
    name = "Type Prefix Rule"
    description = "指定类型的资源必须以配置的前缀开头"
    display_name = "类型前缀"
    default_context = RuleContext.PREFIX

    def __init__(self, config=None):
        super().__init__(config)
        self.type_name = self.require_str_param("type_name", "")
        # 前缀不含分隔符，分隔符自动追加
        self.prefix = self.require_str_param("prefix", "")
        self.separator = self.require_str_param("separator", "_")
        if not self.type_name:
            raise ConfigError("Rule type_prefix requires a non-empty 'type_name'")

    def applies(self, asset) -> bool:
        return asset.type_name == self.type_name

    def fix(self, asset) -> str:
        return self.prefix + self.separator
