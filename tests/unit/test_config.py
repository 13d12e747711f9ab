import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from release_kit.config import ContentConfig, ReleaseConfig


class TestContentConfig(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp()).resolve()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    @patch.dict(os.environ, {"CONTENT_DIR": "", "CONTENT_EXPORT_COMMAND": "", "CONTENTSTACK_STACK_API_KEY": ""})
    def test_default_command_from_key(self):
        config = ContentConfig.from_env(cwd=self.test_dir, api_key="blt123")

        self.assertEqual(config.content_dir, self.test_dir / "content")
        self.assertEqual(config.build_export_command(), "csdx cm:export -k blt123 -d content")

    @patch.dict(os.environ, {"CONTENT_DIR": "", "CONTENT_EXPORT_COMMAND": "", "CONTENTSTACK_STACK_API_KEY": ""})
    def test_missing_key_raises(self):
        config = ContentConfig.from_env(cwd=self.test_dir)
        with self.assertRaises(RuntimeError):
            config.build_export_command()

    @patch.dict(os.environ, {"CONTENT_DIR": "", "CONTENT_EXPORT_COMMAND": "", "CONTENTSTACK_STACK_API_KEY": ""})
    def test_explicit_command_wins(self):
        config = ContentConfig.from_env(cwd=self.test_dir, export_command="exporter --all", api_key="blt123")
        self.assertEqual(config.build_export_command(), "exporter --all")

    @patch.dict(os.environ, {"CONTENT_DIR": "", "CONTENT_EXPORT_COMMAND": "", "CONTENTSTACK_STACK_API_KEY": ""})
    def test_dotenv_file_is_loaded(self):
        (self.test_dir / ".env").write_text("CONTENTSTACK_STACK_API_KEY=from_dotenv\nCONTENT_DIR=export\n", encoding="utf-8")

        # real (empty) env vars are not overridden, so drop them first
        del os.environ["CONTENTSTACK_STACK_API_KEY"]
        del os.environ["CONTENT_DIR"]
        config = ContentConfig.from_env(cwd=self.test_dir)

        self.assertEqual(config.api_key, "from_dotenv")
        self.assertEqual(config.build_export_command(), "csdx cm:export -k from_dotenv -d export")


class TestReleaseConfig(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp()).resolve()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    @patch.dict(os.environ, {"RELEASE_MANIFEST": "", "RELEASE_REMOTE": "", "RELEASE_STRICT_REMOTE": ""})
    def test_defaults(self):
        config = ReleaseConfig.from_env(cwd=self.test_dir)

        self.assertEqual(config.manifest_path, self.test_dir / "package.json")
        self.assertEqual(config.remote, "origin")
        self.assertFalse(config.strict_remote)

    @patch.dict(os.environ, {"RELEASE_MANIFEST": "app/manifest.json", "RELEASE_REMOTE": "upstream", "RELEASE_STRICT_REMOTE": "yes"})
    def test_environment(self):
        config = ReleaseConfig.from_env(cwd=self.test_dir)

        self.assertEqual(config.manifest_path, self.test_dir / "app" / "manifest.json")
        self.assertEqual(config.remote, "upstream")
        self.assertTrue(config.strict_remote)

    @patch.dict(os.environ, {"RELEASE_MANIFEST": "app/manifest.json", "RELEASE_REMOTE": "upstream", "RELEASE_STRICT_REMOTE": "yes"})
    def test_flags_override_environment(self):
        config = ReleaseConfig.from_env(cwd=self.test_dir, manifest="/abs/package.json", remote="origin", strict_remote=False)

        self.assertEqual(config.manifest_path, Path("/abs/package.json"))
        self.assertEqual(config.remote, "origin")
        self.assertFalse(config.strict_remote)


if __name__ == "__main__":
    unittest.main()
