"""
Regex Naming Rule - 正则派生前缀/后缀规则
"""
from ..base_rule import NamingRule, RuleContext
from ..rule_utils import compile_pattern, all_matches_as_string
from ...errors import ConfigError


class RegexNamingRule(NamingRule):
    """
    根据资源类型名派生前缀或后缀

    将正则对类型名的所有匹配拼接起来，前缀形式为 "<matches>_"，后缀形式为 "_<matches>"。
    例如默认正则 [A-Z] 对 "AudioClip" 得到前缀 "AC_"。
    """

    identifier = "regex"
    name = "Regex Naming Rule"
    description = "由资源类型名的正则匹配结果生成前缀或后缀"
    display_name = "正则前后缀"
    default_context = RuleContext.PREFIX
    context_configurable = True

    DEFAULT_PATTERN = r"[A-Z]"

    def __init__(self, config=None):
        super().__init__(config)
        if self.context == RuleContext.INFIX:
            raise ConfigError("Rule regex supports only prefix or suffix context")
        self.pattern = self.require_str_param("pattern", self.DEFAULT_PATTERN)
        self.separator = self.require_str_param("separator", "_")
        self._regex = compile_pattern(self.pattern, self.identifier)

    @property
    def is_valid(self) -> bool:
        return self._regex is not None

    def applies(self, asset) -> bool:
        return True

    def fix(self, asset) -> str:
        matches = all_matches_as_string(self._regex, asset.type_name)
        if not matches:
            return ""
        if self.context == RuleContext.SUFFIX:
            return self.separator + matches
        return matches + self.separator
