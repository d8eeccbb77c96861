"""AssetLint Lint 模块

提供资源命名检查的命令行入口。

主要组件:
- AssetLint: 主 lint 类
- main: 命令行入口函数
"""
from .linter import AssetLint
from .cli import main, parse_args

__all__ = [
    'AssetLint',
    'main',
    'parse_args',
]
