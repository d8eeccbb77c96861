import pathlib
import tempfile
import textwrap
import unittest

from assetlint.core.lint.config import (
    ConfigLoader,
    find_config_files,
    load_active_settings,
    parse_rule_config,
)
from assetlint.core.lint.errors import ConfigError


def write(path, content):
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


class ParseRuleConfigTests(unittest.TestCase):
    def test_inline_keys_become_params(self):
        config = parse_rule_config({"type": "type_prefix", "priority": 10, "type_name": "Texture2D", "prefix": "T"})
        self.assertEqual(config.type, "type_prefix")
        self.assertEqual(config.priority, 10)
        self.assertEqual(config.params, {"type_name": "Texture2D", "prefix": "T"})
        self.assertTrue(config.enabled)
        self.assertIsNone(config.context)

    def test_explicit_params_are_merged(self):
        config = parse_rule_config({"type": "regex", "context": "suffix", "params": {"pattern": "[A-Z0-9]"}})
        self.assertEqual(config.context, "suffix")
        self.assertEqual(config.params, {"pattern": "[A-Z0-9]"})

    def test_invalid_entries(self):
        for entry in ("type_prefix", {"priority": 1}, {"type": "regex", "priority": "1"},
                      {"type": "regex", "priority": True}, {"type": "regex", "params": ["x"]}):
            with self.assertRaises(ConfigError, msg=repr(entry)):
                parse_rule_config(entry)


class ConfigLoaderTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = pathlib.Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_defaults_without_file(self):
        settings = ConfigLoader(None).load()
        self.assertTrue(settings.enabled)
        self.assertTrue(settings.warn_on_incorrect)
        self.assertTrue(settings.ignore_script_assets)
        self.assertTrue(settings.allow_spaces)
        self.assertEqual(settings.naming_rules, [])
        self.assertEqual(settings.included, ["Assets/*"])
        self.assertEqual(settings.log_dir, "Logs")

    def test_user_config_is_merged(self):
        path = write(self.root / ".assetlint.yaml", """
            warn_on_incorrect: false
            ignored_paths: ["Assets/Plugins"]
            type_overrides:
              psb: Texture2D
            custom_rules:
              python:
                path: custom_rules/python
            naming_rules:
              - type: type_prefix
                type_name: Texture2D
                prefix: T
                priority: 10
              - priority: 3
              - type: variant_suffix
        """)
        loader = ConfigLoader(str(path))
        with self.assertLogs("assetlint.assetlint", level="ERROR"):
            settings = loader.load()

        self.assertFalse(settings.warn_on_incorrect)
        self.assertTrue(settings.ignore_script_assets)
        self.assertEqual(settings.ignored_paths, ["Assets/Plugins"])
        self.assertEqual(settings.type_overrides, {"psb": "Texture2D"})
        self.assertEqual(settings.custom_rules_python_path, "custom_rules/python")
        self.assertEqual([r.type for r in settings.naming_rules], ["type_prefix", "variant_suffix"])
        self.assertEqual(settings.source_path, str(path))
        self.assertIn("naming_rules", loader.get_raw_config())

    def test_invalid_yaml(self):
        path = write(self.root / ".assetlint.yaml", "naming_rules: [\n")
        with self.assertRaises(ConfigError):
            ConfigLoader(str(path)).load()

    def test_root_must_be_mapping(self):
        path = write(self.root / ".assetlint.yaml", "- a\n- b\n")
        with self.assertRaises(ConfigError):
            ConfigLoader(str(path)).load()


class ActiveSettingsTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = pathlib.Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_no_config_files_uses_defaults(self):
        settings = load_active_settings(str(self.root))
        self.assertIsNotNone(settings)
        self.assertIsNone(settings.source_path)

    def test_single_enabled_file(self):
        write(self.root / ".assetlint.yaml", "allow_spaces: false\n")
        settings = load_active_settings(str(self.root))
        self.assertFalse(settings.allow_spaces)

    def test_more_than_one_enabled_settings(self):
        write(self.root / ".assetlint.yaml", "enabled: true\n")
        write(self.root / "assetlint.yaml", "enabled: true\n")
        self.assertEqual(len(find_config_files(str(self.root))), 2)
        with self.assertLogs("assetlint.assetlint", level="ERROR") as logs:
            settings = load_active_settings(str(self.root))
        self.assertIsNone(settings)
        self.assertIn("More than one enabled linting settings", "\n".join(logs.output))

    def test_disabled_file_is_skipped(self):
        write(self.root / ".assetlint.yaml", "enabled: false\nallow_spaces: false\n")
        write(self.root / ".assetlint.yml", "enabled: true\n")
        settings = load_active_settings(str(self.root))
        self.assertTrue(settings.allow_spaces)
        self.assertTrue(settings.source_path.endswith(".assetlint.yml"))

    def test_all_disabled(self):
        write(self.root / ".assetlint.yaml", "enabled: false\n")
        self.assertIsNone(load_active_settings(str(self.root)))

    def test_explicit_config_path(self):
        path = write(self.root / "configs" / "lint.yaml", "ignore_script_assets: false\n")
        write(self.root / ".assetlint.yaml", "ignore_script_assets: true\n")
        settings = load_active_settings(str(self.root), str(path))
        self.assertFalse(settings.ignore_script_assets)

    def test_missing_explicit_config_path(self):
        write(self.root / ".assetlint.yaml", "enabled: true\n")
        with self.assertRaises(ConfigError):
            load_active_settings(str(self.root), str(self.root / "missing.yaml"))


if __name__ == "__main__":
    unittest.main()
