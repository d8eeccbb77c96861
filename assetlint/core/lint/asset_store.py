"""
Asset Store Module - 资源查询

提供命名规则判定所需的资源信息（名称、类型、是否预制体/变体/脚本），
以及基于 Unity 工程目录的实现：
- 类型名由扩展名映射得到（可通过配置覆盖）
- 资源标识（GUID）从 .meta 文件读取
- 预制体变体通过解析 Unity YAML 文档头判断
"""
import fnmatch
import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from .asset_name import asset_name_by_path
from ...lib.logger import get_logger


# Unity 主资源类型（按扩展名）
DEFAULT_TYPE_MAP: Dict[str, str] = {
    # Textures
    ".png": "Texture2D", ".jpg": "Texture2D", ".jpeg": "Texture2D", ".tga": "Texture2D",
    ".psd": "Texture2D", ".tif": "Texture2D", ".tiff": "Texture2D", ".bmp": "Texture2D",
    ".gif": "Texture2D", ".exr": "Texture2D", ".hdr": "Texture2D",
    ".cubemap": "Cubemap",
    ".rendertexture": "RenderTexture",
    ".spriteatlas": "SpriteAtlas",
    # Models / prefabs
    ".prefab": "GameObject",
    ".fbx": "GameObject", ".obj": "GameObject", ".blend": "GameObject", ".dae": "GameObject",
    ".3ds": "GameObject", ".max": "GameObject", ".ma": "GameObject", ".mb": "GameObject",
    # Rendering
    ".mat": "Material",
    ".shader": "Shader", ".shadergraph": "Shader",
    ".compute": "ComputeShader",
    ".physicmaterial": "PhysicMaterial",
    ".lighting": "LightingSettings",
    ".terrainlayer": "TerrainLayer",
    ".flare": "Flare",
    # Animation
    ".anim": "AnimationClip",
    ".controller": "AnimatorController",
    ".overridecontroller": "AnimatorOverrideController",
    ".mask": "AvatarMask",
    ".playable": "TimelineAsset",
    ".signal": "SignalAsset",
    # Audio / video
    ".wav": "AudioClip", ".mp3": "AudioClip", ".ogg": "AudioClip", ".aif": "AudioClip",
    ".aiff": "AudioClip",
    ".mixer": "AudioMixerController",
    ".mp4": "VideoClip", ".mov": "VideoClip", ".webm": "VideoClip",
    # Scenes / scripts / data
    ".unity": "SceneAsset",
    ".cs": "MonoScript",
    ".asmdef": "AssemblyDefinitionAsset",
    ".asset": "ScriptableObject",
    ".preset": "Preset",
    ".guiskin": "GUISkin",
    ".ttf": "Font", ".otf": "Font",
    ".uss": "StyleSheet",
    ".uxml": "VisualTreeAsset",
    ".txt": "TextAsset", ".json": "TextAsset", ".xml": "TextAsset", ".bytes": "TextAsset",
    ".csv": "TextAsset", ".md": "TextAsset", ".yaml": "TextAsset", ".html": "TextAsset",
}

SCRIPT_TYPE_NAME = "MonoScript"
PREFAB_EXTENSION = ".prefab"
META_EXTENSION = ".meta"

# 默认资源路径包含模式（fnmatch 的 * 可跨越目录）
DEFAULT_INCLUDED = ["Assets/*"]

# Unity YAML 文档头: --- !u!<classID> &<fileID> [stripped]
_DOCUMENT_HEADER = re.compile(r'^--- !u!(\d+) &-?\d+( stripped)?\s*$', re.MULTILINE)
_PREFAB_INSTANCE_CLASS_ID = "1001"
# 根实例没有父 Transform
_ROOT_TRANSFORM_PARENT = re.compile(r'^\s+m_TransformParent:\s*\{fileID:\s*0\}', re.MULTILINE)


@dataclass(frozen=True)
class AssetRef:
    """资源快照（每次判定时新建，不跨调用缓存）"""
    path: str
    type_name: str = ""
    is_prefab: bool = False
    is_variant_of_prefab: bool = False
    is_script: bool = False
    guid: Optional[str] = None
    name: str = ""

    def __post_init__(self):
        if not self.name:
            object.__setattr__(self, "name", asset_name_by_path(self.path))

    @property
    def identities(self) -> Tuple[str, ...]:
        """资源标识（GUID 与路径），用于忽略列表匹配"""
        return tuple(i for i in (self.guid, self.path) if i)

    def with_name(self, name: str) -> 'AssetRef':
        """返回替换名称后的副本（路径与类型信息不变）"""
        return replace(self, name=name)


class AssetStore(ABC):
    """资源查询接口（只读）"""

    @abstractmethod
    def get_type_name(self, asset_path: str) -> str:
        """主资源类型名，查询失败返回空字符串"""

    @abstractmethod
    def is_prefab(self, asset_path: str) -> bool:
        pass

    @abstractmethod
    def is_variant(self, asset_path: str) -> bool:
        pass

    @abstractmethod
    def list_all_asset_paths(self) -> List[str]:
        """工程内全部资源路径"""

    def get_name(self, asset_path: str) -> str:
        return asset_name_by_path(asset_path)

    def is_script(self, asset_path: str) -> bool:
        return self.get_type_name(asset_path) == SCRIPT_TYPE_NAME

    def get_guid(self, asset_path: str) -> Optional[str]:
        return None

    def rename(self, asset_path: str, new_name: str) -> bool:
        """重命名资源，返回是否成功"""
        return False

    def asset_ref(self, asset_path: str) -> AssetRef:
        """构造资源快照"""
        return AssetRef(
            path=asset_path,
            type_name=self.get_type_name(asset_path),
            is_prefab=self.is_prefab(asset_path),
            is_variant_of_prefab=self.is_variant(asset_path),
            is_script=self.is_script(asset_path),
            guid=self.get_guid(asset_path),
        )


class ProjectAssetStore(AssetStore):
    """基于 Unity 工程目录的资源查询"""

    ASSETS_DIR = "Assets"

    def __init__(self, project_root: str, type_overrides: Optional[Dict[str, str]] = None,
                 included: Optional[List[str]] = None, excluded: Optional[List[str]] = None):
        """
        Args:
            project_root: Unity 工程根目录（包含 Assets/）
            type_overrides: 扩展名 -> 类型名，覆盖默认映射
            included: 资源路径包含模式（fnmatch，相对工程根目录）
            excluded: 资源路径排除模式
        """
        self.project_root = Path(project_root)
        self.type_map = dict(DEFAULT_TYPE_MAP)
        for ext, type_name in (type_overrides or {}).items():
            key = ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            self.type_map[key] = type_name
        self.included = included if included is not None else list(DEFAULT_INCLUDED)
        self.excluded = excluded or []
        self.logger = get_logger("assetlint")

    def _abs(self, asset_path: str) -> Path:
        return self.project_root / asset_path

    def _extension(self, asset_path: str) -> str:
        return os.path.splitext(asset_path)[1].lower()

    def get_type_name(self, asset_path: str) -> str:
        return self.type_map.get(self._extension(asset_path), "")

    def is_prefab(self, asset_path: str) -> bool:
        return self._extension(asset_path) == PREFAB_EXTENSION

    def is_variant(self, asset_path: str) -> bool:
        """
        判断是否为预制体变体

        变体的根是一个 PrefabInstance (!u!1001)，其 m_Modification.m_TransformParent 为 {fileID: 0}。
        普通预制体中的嵌套实例挂在某个 Transform 下，父节点 fileID 非 0；
        变体中新增的 GameObject 是完整文档，不影响判断。
        """
        if not self.is_prefab(asset_path):
            return False
        try:
            with open(self._abs(asset_path), 'r', encoding='utf-8', errors='ignore') as f:
                content = f.read()
        except OSError as e:
            self.logger.debug(f"Failed to read prefab {asset_path}: {e}")
            return False

        headers = list(_DOCUMENT_HEADER.finditer(content))
        for i, match in enumerate(headers):
            if match.group(1) != _PREFAB_INSTANCE_CLASS_ID:
                continue
            end = headers[i + 1].start() if i + 1 < len(headers) else len(content)
            if _ROOT_TRANSFORM_PARENT.search(content, match.end(), end):
                return True
        return False

    def get_guid(self, asset_path: str) -> Optional[str]:
        """从 .meta 文件读取 GUID，读取失败返回 None"""
        meta_path = self._abs(asset_path + META_EXTENSION)
        try:
            with open(meta_path, 'r', encoding='utf-8') as f:
                # BaseLoader: 所有标量按字符串读取
                meta = yaml.load(f, Loader=yaml.BaseLoader) or {}
        except (OSError, yaml.YAMLError) as e:
            self.logger.debug(f"No readable meta for {asset_path}: {e}")
            return None
        guid = meta.get("guid") if isinstance(meta, dict) else None
        return str(guid) if guid else None

    def list_all_asset_paths(self) -> List[str]:
        """
        获取工程内全部资源路径

        跳过 .meta、隐藏文件（. 开头）和 ~ 结尾的文件/目录（Unity 不导入），
        只保留包含 '.' 的路径。
        """
        assets_root = self.project_root / self.ASSETS_DIR
        if not assets_root.is_dir():
            self.logger.warning(f"Assets directory not found: {assets_root}")
            return []

        paths = []
        for root, dirs, files in os.walk(assets_root):
            dirs[:] = sorted(d for d in dirs if not _is_hidden(d))
            for file_name in sorted(files):
                if file_name.endswith(META_EXTENSION) or _is_hidden(file_name):
                    continue
                rel_path = Path(root, file_name).relative_to(self.project_root).as_posix()
                if "." not in rel_path or not self._is_included(rel_path):
                    continue
                paths.append(rel_path)
        return paths

    def _is_included(self, rel_path: str) -> bool:
        for pattern in self.excluded:
            if fnmatch.fnmatch(rel_path, pattern):
                return False
        if not self.included:
            return True
        return any(fnmatch.fnmatch(rel_path, pattern) for pattern in self.included)

    def rename(self, asset_path: str, new_name: str) -> bool:
        """
        重命名资源文件及其 .meta 文件（保持扩展名和目录不变）

        Returns:
            是否成功；目标已存在或文件系统拒绝时返回 False
        """
        source = self._abs(asset_path)
        target = source.with_name(new_name + source.suffix)
        if target.exists():
            self.logger.warning(f"Rename target already exists: {target}")
            return False

        source_meta = Path(str(source) + META_EXTENSION)
        target_meta = Path(str(target) + META_EXTENSION)
        try:
            os.rename(source, target)
            if source_meta.exists():
                os.rename(source_meta, target_meta)
        except OSError as e:
            self.logger.warning(f"Failed to rename {asset_path} -> {new_name}: {e}")
            return False

        self.logger.debug(f"Renamed {asset_path} -> {target.name}")
        return True


def _is_hidden(name: str) -> bool:
    return name.startswith(".") or name.endswith("~")
