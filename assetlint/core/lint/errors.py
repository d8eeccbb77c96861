"""
Errors - 异常定义
"""


class ConfigError(ValueError):
    """配置错误（规则参数非法、未知规则类型等）"""
