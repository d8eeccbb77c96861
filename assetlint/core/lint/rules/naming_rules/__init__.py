# Naming Rules Module

from .type_prefix_rule import TypePrefixRule
from .regex_naming_rule import RegexNamingRule
from .variant_suffix_rule import VariantSuffixRule
from .replace_section_rule import ReplaceSectionRule

__all__ = [
    'TypePrefixRule',
    'RegexNamingRule',
    'VariantSuffixRule',
    'ReplaceSectionRule',
]
