import unittest
import tomllib
import tempfile
from pathlib import Path

from settings_service import SETTINGS_PATH, SettingsService, _load_settings, clear_settings_cache


class TestSettingsToml(unittest.TestCase):
    """Test suite to validate settings.toml structure and contents."""

    @classmethod
    def setUpClass(cls):
        """Load settings.toml once for all tests."""
        with open(SETTINGS_PATH, "rb") as f:
            cls.settings = tomllib.load(f)

    def test_toml_file_can_be_loaded(self):
        """Test that settings.toml exists and can be parsed without errors."""
        self.assertTrue(SETTINGS_PATH.exists(), "settings.toml file does not exist")
        self.assertIsInstance(self.settings, dict)

    def test_required_sections_exist(self):
        for section in ("env", "database"):
            with self.subTest(section=section):
                self.assertIn(section, self.settings, f"{section} section is missing")

    def test_log_level_is_valid(self):
        self.assertIn(
            self.settings["env"]["log_level"],
            ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        )

    def test_database_url_is_string(self):
        self.assertIsInstance(self.settings["database"]["url"], str)
        self.assertTrue(self.settings["database"]["url"])


class TestSettingsService(unittest.TestCase):
    def setUp(self):
        clear_settings_cache()
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = Path(self.tmpdir.name) / "settings.toml"
        self.path.write_text(
            '[env]\nenv = "test"\nlog_level = "DEBUG"\n\n'
            '[database]\nurl = "sqlite://"\necho = true\n'
        )

    def tearDown(self):
        clear_settings_cache()
        self.tmpdir.cleanup()

    def test_properties(self):
        service = SettingsService(self.path)

        self.assertEqual(service.env, "test")
        self.assertEqual(service.log_level, "DEBUG")
        self.assertEqual(service.database_url, "sqlite://")
        self.assertTrue(service.database_echo)
        self.assertFalse(service.expire_on_commit)
        self.assertIs(service.settings_dict, service.settings)

    def test_settings_are_cached(self):
        first = _load_settings(self.path)
        self.path.write_text('[env]\nenv = "changed"\n')

        self.assertIs(_load_settings(self.path), first)

        clear_settings_cache()
        self.assertEqual(_load_settings(self.path)["env"]["env"], "changed")

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            SettingsService(Path(self.tmpdir.name) / "missing.toml")

    def test_missing_key_raises(self):
        self.path.write_text('[env]\nenv = "test"\n')

        with self.assertRaises(KeyError):
            SettingsService(self.path).database_url

    def test_project_settings_load(self):
        service = SettingsService()
        self.assertEqual(service.settings_path, SETTINGS_PATH)
        self.assertIn("database", service.settings_dict)


if __name__ == "__main__":
    unittest.main()
