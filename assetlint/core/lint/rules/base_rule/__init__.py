from .base_rule import NamingRule, RuleContext

__all__ = ['NamingRule', 'RuleContext']
