"""
Asset Name Utility - 资源名称工具
"""
import re

# 最后一个路径段中，最后一个 '.' 之前的部分
_NAME_PATTERN = re.compile(r'[^/]+(?=\.[^/.]*$)')


def asset_name_by_path(asset_path: str) -> str:
    """
    根据资源路径获取资源名称（不含扩展名）

    Args:
        asset_path: 资源路径，如 Assets/Art/player.png

    Returns:
        资源名称，如 player；路径无扩展名时返回空字符串
    """
    if not asset_path:
        return ""
    match = _NAME_PATTERN.search(asset_path)
    return match.group(0) if match else ""
