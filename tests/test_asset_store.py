import pathlib
import tempfile
import textwrap
import unittest

from assetlint.core.lint.asset_store import AssetRef, ProjectAssetStore


VARIANT_PREFAB = """\
%YAML 1.1
%TAG !u! tag:unity3d.com,2011:
--- !u!1001 &6830405925853462810
PrefabInstance:
  m_ObjectHideFlags: 0
  serializedVersion: 2
  m_Modification:
    m_TransformParent: {fileID: 0}
--- !u!1 &1714066532049316040 stripped
GameObject:
  m_CorrespondingSourceObject: {fileID: 5013411384935349394}
  m_PrefabInstance: {fileID: 6830405925853462810}
"""

REGULAR_PREFAB = """\
%YAML 1.1
%TAG !u! tag:unity3d.com,2011:
--- !u!1 &5013411384935349394
GameObject:
  m_ObjectHideFlags: 0
  m_Name: Enemy
--- !u!4 &4116230120011712232
Transform:
  m_ObjectHideFlags: 0
"""

NESTED_PREFAB = REGULAR_PREFAB + """\
--- !u!1001 &2214934019203929130
PrefabInstance:
  m_ObjectHideFlags: 0
  m_Modification:
    m_TransformParent: {fileID: 4116230120011712232}
"""

VARIANT_WITH_ADDED_CHILD = VARIANT_PREFAB + """\
--- !u!1 &3307115201872094016
GameObject:
  m_ObjectHideFlags: 0
  m_Name: Shield
--- !u!4 &8532164473398451730
Transform:
  m_ObjectHideFlags: 0
  m_Father: {fileID: 1714066532049316041}
"""


class ProjectAssetStoreTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = pathlib.Path(self._tmp.name)
        self.store = ProjectAssetStore(str(self.root))

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, rel_path, content="", guid=None):
        path = self.root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        if guid is not None:
            meta = textwrap.dedent(f"""\
                fileFormatVersion: 2
                guid: {guid}
                TextureImporter:
                  serializedVersion: 12
            """)
            pathlib.Path(str(path) + ".meta").write_text(meta, encoding="utf-8")
        return path

    def test_type_names_from_extension(self):
        self.assertEqual(self.store.get_type_name("Assets/Art/player.png"), "Texture2D")
        self.assertEqual(self.store.get_type_name("Assets/Art/PLAYER.PNG"), "Texture2D")
        self.assertEqual(self.store.get_type_name("Assets/Scripts/Player.cs"), "MonoScript")
        self.assertEqual(self.store.get_type_name("Assets/Prefabs/Enemy.prefab"), "GameObject")
        self.assertEqual(self.store.get_type_name("Assets/Other/thing.unknownext"), "")
        self.assertTrue(self.store.is_script("Assets/Scripts/Player.cs"))
        self.assertFalse(self.store.is_script("Assets/Art/player.png"))

    def test_type_overrides(self):
        store = ProjectAssetStore(str(self.root), type_overrides={"psb": "Texture2D", ".asset": "LightingDataAsset"})
        self.assertEqual(store.get_type_name("Assets/Art/hero.psb"), "Texture2D")
        self.assertEqual(store.get_type_name("Assets/Data/scene.asset"), "LightingDataAsset")

    def test_guid_is_read_from_meta(self):
        self.write("Assets/Art/player.png", guid="0a1b2c3d4e5f60718293a4b5c6d7e8f9")
        self.write("Assets/Art/numeric.png", guid="00000000000000001000000000000000")
        self.write("Assets/Art/nometa.png")
        self.assertEqual(self.store.get_guid("Assets/Art/player.png"), "0a1b2c3d4e5f60718293a4b5c6d7e8f9")
        self.assertEqual(self.store.get_guid("Assets/Art/numeric.png"), "00000000000000001000000000000000")
        self.assertIsNone(self.store.get_guid("Assets/Art/nometa.png"))
        self.assertIsNone(self.store.get_guid("Assets/Art/missing.png"))

    def test_variant_detection(self):
        self.write("Assets/Prefabs/Enemy Variant.prefab", VARIANT_PREFAB)
        self.write("Assets/Prefabs/Enemy.prefab", REGULAR_PREFAB)
        self.write("Assets/Prefabs/Squad.prefab", NESTED_PREFAB)
        self.write("Assets/Prefabs/Enemy Shielded.prefab", VARIANT_WITH_ADDED_CHILD)
        self.assertTrue(self.store.is_variant("Assets/Prefabs/Enemy Variant.prefab"))
        self.assertFalse(self.store.is_variant("Assets/Prefabs/Enemy.prefab"))
        self.assertFalse(self.store.is_variant("Assets/Prefabs/Squad.prefab"))
        self.assertTrue(self.store.is_variant("Assets/Prefabs/Enemy Shielded.prefab"))
        self.assertFalse(self.store.is_variant("Assets/Prefabs/Missing.prefab"))
        self.assertFalse(self.store.is_variant("Assets/Art/player.png"))

    def test_asset_ref(self):
        self.write("Assets/Prefabs/Enemy.prefab", VARIANT_PREFAB, guid="abc")
        asset = self.store.asset_ref("Assets/Prefabs/Enemy.prefab")
        self.assertEqual(asset, AssetRef(
            path="Assets/Prefabs/Enemy.prefab",
            type_name="GameObject",
            is_prefab=True,
            is_variant_of_prefab=True,
            is_script=False,
            guid="abc",
        ))
        self.assertEqual(asset.name, "Enemy")
        self.assertEqual(asset.identities, ("abc", "Assets/Prefabs/Enemy.prefab"))
        self.assertEqual(asset.with_name("Enemy_Variant").path, asset.path)

    def test_list_all_asset_paths(self):
        self.write("Assets/Art/player.png", guid="1")
        self.write("Assets/Art/.hidden.png")
        self.write("Assets/Backup~/old.png")
        self.write("Assets/Scripts/Player.cs")
        self.write("Assets/README")
        self.write("ProjectSettings/TagManager.asset")

        self.assertEqual(self.store.list_all_asset_paths(), [
            "Assets/Art/player.png",
            "Assets/Scripts/Player.cs",
        ])

    def test_list_respects_included_and_excluded(self):
        self.write("Assets/Art/player.png")
        self.write("Assets/Plugins/lib.dll")
        self.write("Assets/Scripts/Player.cs")
        store = ProjectAssetStore(str(self.root), included=["Assets/Art/*", "Assets/Plugins/*"],
                                  excluded=["Assets/Plugins/*"])
        self.assertEqual(store.list_all_asset_paths(), ["Assets/Art/player.png"])

    def test_list_without_assets_directory(self):
        self.assertEqual(self.store.list_all_asset_paths(), [])

    def test_rename_moves_meta(self):
        self.write("Assets/Art/player.png", "data", guid="1")
        self.assertTrue(self.store.rename("Assets/Art/player.png", "T_player"))
        self.assertTrue((self.root / "Assets/Art/T_player.png").exists())
        self.assertTrue((self.root / "Assets/Art/T_player.png.meta").exists())
        self.assertFalse((self.root / "Assets/Art/player.png").exists())
        self.assertFalse((self.root / "Assets/Art/player.png.meta").exists())

    def test_rename_fails_when_target_exists(self):
        self.write("Assets/Art/player.png")
        self.write("Assets/Art/T_player.png")
        self.assertFalse(self.store.rename("Assets/Art/player.png", "T_player"))
        self.assertTrue((self.root / "Assets/Art/player.png").exists())

    def test_rename_missing_source_fails(self):
        (self.root / "Assets").mkdir()
        self.assertFalse(self.store.rename("Assets/missing.png", "T_missing"))


if __name__ == "__main__":
    unittest.main()
