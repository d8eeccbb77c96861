"""
Base Rule - 命名规则基类
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, TYPE_CHECKING

from ...config import RuleConfig
from ...errors import ConfigError

if TYPE_CHECKING:
    from ...asset_store import AssetRef


class RuleContext(Enum):
    """规则作用位置"""
    PREFIX = "prefix"
    SUFFIX = "suffix"
    INFIX = "infix"

    @classmethod
    def parse(cls, value) -> 'RuleContext':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigError(f"Unknown rule context: {value!r}")


class NamingRule(ABC):
    """
    命名规则基类

    所有自定义规则都应该继承此类并实现 applies / fix 方法：
    - applies: 规则是否适用于资源（纯函数，不得有副作用）
    - fix: 资源期望的前缀 / 后缀；INFIX 规则返回变换后的完整名称
    """

    # 子类必须定义的属性
    identifier: str = ""       # 规则唯一标识符，对应配置中的 type，如 "type_prefix"
    name: str = ""             # 规则名称，如 "Type Prefix Rule"
    description: str = ""      # 规则描述
    display_name: str = ""     # 规则中文名称（用于显示），如 "类型前缀"
    default_context: RuleContext = RuleContext.PREFIX
    # 是否允许配置覆盖 context
    context_configurable: bool = False

    def __init__(self, config: Optional[RuleConfig] = None):
        """
        初始化规则

        Args:
            config: 规则配置，包含 priority、context、params
        """
        self.config = config or RuleConfig(type=self.identifier)

        if self.config.context and self.context_configurable:
            self._context = RuleContext.parse(self.config.context)
        else:
            self._context = self.default_context

        if not isinstance(self.config.priority, int) or isinstance(self.config.priority, bool):
            raise ConfigError(f"Rule {self.identifier} priority must be an integer: {self.config.priority!r}")

    @property
    def context(self) -> RuleContext:
        """规则作用位置（与资源无关）"""
        return self._context

    @property
    def priority(self) -> int:
        """优先级，同一位置多条规则适用时取最高者"""
        return self.config.priority

    @property
    def enabled(self) -> bool:
        """规则是否启用"""
        return self.config.enabled

    def get_param(self, key: str, default=None):
        """
        获取配置参数

        Args:
            key: 参数名
            default: 默认值
        Returns:
            参数值
        """
        if self.config.params:
            return self.config.params.get(key, default)
        return default

    def require_str_param(self, key: str, default: Optional[str] = None) -> str:
        """获取字符串参数，类型不符时抛出 ConfigError"""
        value = self.get_param(key, default)
        if not isinstance(value, str):
            raise ConfigError(f"Rule {self.identifier} param '{key}' must be a string: {value!r}")
        return value

    @abstractmethod
    def applies(self, asset: 'AssetRef') -> bool:
        """
        规则是否适用于资源

        Args:
            asset: 资源快照
        Returns:
            是否适用
        """
        pass

    @abstractmethod
    def fix(self, asset: 'AssetRef') -> str:
        """
        计算资源期望的前缀 / 后缀（INFIX 规则返回完整名称）

        仅在 applies 为 True 时调用。
        """
        pass

    def __repr__(self):
        return (f"<{self.__class__.__name__} identifier={self.identifier} "
                f"context={self.context.value} priority={self.priority}>")
