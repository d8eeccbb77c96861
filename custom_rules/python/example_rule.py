"""
示例自定义规则

这个文件展示如何编写自定义命名规则。
在设置中配置 custom_rules.python.path 指向此目录，
目录下的规则类会被自动注册，之后可在 naming_rules 中通过 type 引用。

使用步骤:
1. 继承 NamingRule 基类
2. 定义 identifier、name、description、default_context
3. 实现 applies 和 fix 方法

设置示例:
    custom_rules:
      python:
        path: custom_rules/python
    naming_rules:
      - type: folder_prefix
        folder: Assets/UI/
        prefix: UI
        priority: 5
"""
from assetlint.core.lint.rules import NamingRule, RuleContext


class FolderPrefixRule(NamingRule):
    """
    目录前缀规则

    指定目录下的所有资源都必须带有固定前缀，
    例如 Assets/UI/ 下的资源以 UI_ 开头。
    """

    identifier = "folder_prefix"
    name = "Folder Prefix"
    description = "指定目录下的资源必须以配置的前缀开头"
    default_context = RuleContext.PREFIX

    def __init__(self, config=None):
        super().__init__(config)
        self.folder = self.require_str_param("folder", "")
        self.prefix = self.require_str_param("prefix", "")

    def applies(self, asset) -> bool:
        return bool(self.folder) and asset.path.startswith(self.folder)

    def fix(self, asset) -> str:
        return f"{self.prefix}_" if self.prefix else ""


class LodSuffixRule(NamingRule):
    """
    模型 LOD 后缀规则

    路径中包含 LOD 目录的模型资源必须以 _LOD 结尾
    """

    identifier = "lod_suffix"
    name = "LOD Suffix"
    description = "LOD 目录下的模型必须带有 _LOD 后缀"
    default_context = RuleContext.SUFFIX

    def applies(self, asset) -> bool:
        return asset.type_name == "GameObject" and not asset.is_prefab and "/LOD/" in asset.path

    def fix(self, asset) -> str:
        return self.get_param("suffix", "_LOD")


# 更多自定义规则示例...
# class YourCustomRule(NamingRule):
#     identifier = "your_rule_id"
#     name = "Your Rule Name"
#     description = "Your rule description"
#     default_context = RuleContext.SUFFIX
#
#     def applies(self, asset):
#         return asset.type_name == "Material"
#
#     def fix(self, asset):
#         return "_Mat"
