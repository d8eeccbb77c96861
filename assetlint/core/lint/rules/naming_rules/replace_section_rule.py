"""
Replace Section Rule - 名称片段替换规则
"""
from ..base_rule import NamingRule, RuleContext
from ...errors import ConfigError


class ReplaceSectionRule(NamingRule):
    """
    将名称中的指定片段替换掉（默认去除空格）

    作为 INFIX 规则，fix 返回替换后的完整名称，判定时要求名称与其完全一致。
    """

    identifier = "replace_section"
    name = "Replace Section Rule"
    description = "名称中不应出现指定片段"
    display_name = "片段替换"
    default_context = RuleContext.INFIX

    def __init__(self, config=None):
        super().__init__(config)
        self.replace = self.require_str_param("replace", " ")
        self.replacement = self.require_str_param("replacement", "")
        if not self.replace:
            raise ConfigError("Rule replace_section requires a non-empty 'replace'")

    def applies(self, asset) -> bool:
        return True

    def fix(self, asset) -> str:
        return asset.name.replace(self.replace, self.replacement)
