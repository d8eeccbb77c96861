"""AssetLint - Unity 资源命名规范检查工具"""

__version__ = "1.0.0"
