"""
Rule Utilities - 规则公共工具模块
"""
import re
from typing import Optional, Pattern

from ....lib.logger import get_logger


def compile_pattern(pattern: str, rule_id: str = "") -> Optional[Pattern]:
    """
    编译用户配置的正则表达式

    非法正则作为配置错误记录一次，返回 None（判定时视为无匹配）。

    Args:
        pattern: 正则表达式
        rule_id: 规则标识（用于日志）
    Returns:
        编译后的正则，非法时返回 None
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        get_logger("assetlint").error(f"Invalid regex in rule {rule_id or '<unknown>'}: {pattern!r} ({e})")
        return None


def all_matches_as_string(regex: Optional[Pattern], text: Optional[str]) -> str:
    """
    拼接输入中所有匹配的文本

    Args:
        regex: 正则（None 表示非法正则）
        text: 输入文本
    Returns:
        所有匹配按顺序拼接的结果，如 [A-Z] 对 "Texture2D" 得到 "T"
    """
    if regex is None or not text:
        return ""
    return "".join(match.group(0) for match in regex.finditer(text))


def suffix_token_matches(name: str, suffix: str) -> bool:
    """
    后缀是否以完整 token 出现在名称末尾

    要求: 非下划线字符串 + 后缀 + (结尾 | 下划线开头的任意内容)。
    例如 "PlayerUI" 匹配 "UI"，"UIPlayer" 不匹配。
    """
    if not suffix:
        return True
    return re.search(rf'([^_]+)({re.escape(suffix)})($|_.*$)', name) is not None
