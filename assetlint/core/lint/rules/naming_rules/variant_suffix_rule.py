"""
Variant Suffix Rule - 预制体变体后缀规则
"""
from ..base_rule import NamingRule, RuleContext


class VariantSuffixRule(NamingRule):
    """预制体变体必须以 _Variant 结尾"""

    identifier = "variant_suffix"
    name = "Variant Suffix Rule"
    description = "预制体变体必须带有变体后缀"
    display_name = "变体后缀"
    default_context = RuleContext.SUFFIX

    DEFAULT_SUFFIX = "_Variant"

    def __init__(self, config=None):
        super().__init__(config)
        self.suffix = self.require_str_param("suffix", self.DEFAULT_SUFFIX)

    def applies(self, asset) -> bool:
        return asset.is_prefab and asset.is_variant_of_prefab

    def fix(self, asset) -> str:
        return self.suffix
