import tempfile
import unittest
from pathlib import Path

from docpick.core import config as core_config
from docpick.core.document import DEFAULT_TITLE
from docpick.core.picker import DocumentPicker


class CoreConfigTests(unittest.TestCase):
    def test_unknown_encoding_falls_back_to_utf8(self):
        cfg = core_config.normalize_config({"encoding": "not-a-codec"})
        self.assertEqual(cfg["encoding"], "utf-8")

        cfg_latin = core_config.normalize_config({"encoding": "latin-1"})
        self.assertEqual(cfg_latin["encoding"], "latin-1")

    def test_missing_last_directory_is_dropped(self):
        cfg = core_config.normalize_config({"last_directory": "/does/not/exist/anywhere"})
        self.assertIsNone(cfg["last_directory"])

        with tempfile.TemporaryDirectory() as tmpdir:
            cfg_existing = core_config.normalize_config({"last_directory": tmpdir})
            self.assertEqual(cfg_existing["last_directory"], tmpdir)

    def test_invalid_counters_and_titles_are_reset(self):
        cfg = core_config.normalize_config({"total_imports": "many", "dialog_title": "   "})
        self.assertEqual(cfg["total_imports"], 0)
        self.assertEqual(cfg["dialog_title"], "Select Q&A Document")

        self.assertEqual(core_config.normalize_config({"total_imports": True})["total_imports"], 0)

    def test_default_title_matches_picker_default(self):
        picker = DocumentPicker(lambda doc: None, lambda msg: None, chooser=object())
        self.assertEqual(core_config.DEFAULT_CONFIG["dialog_title"], DEFAULT_TITLE)
        self.assertEqual(picker.title, core_config.DEFAULT_CONFIG["dialog_title"])

    def test_non_dict_config_gives_defaults(self):
        self.assertEqual(core_config.normalize_config(None), core_config.DEFAULT_CONFIG)

    def test_load_save_round_trip_uses_normalization(self):
        original_dir = core_config.CONFIG_DIR
        original_file = core_config.CONFIG_FILE

        try:
            with tempfile.TemporaryDirectory() as tmpdir:
                core_config.CONFIG_DIR = Path(tmpdir)
                core_config.CONFIG_FILE = core_config.CONFIG_DIR / "config.json"

                core_config.save_config({"copy_to_clipboard": True, "encoding": "bogus"})
                loaded = core_config.load_config()

                self.assertTrue(loaded["copy_to_clipboard"])
                self.assertEqual(loaded["encoding"], "utf-8")
                self.assertEqual(loaded["dialog_title"], "Select Q&A Document")
        finally:
            core_config.CONFIG_DIR = original_dir
            core_config.CONFIG_FILE = original_file

    def test_corrupt_config_file_logs_and_returns_defaults(self):
        original_dir = core_config.CONFIG_DIR
        original_file = core_config.CONFIG_FILE

        try:
            with tempfile.TemporaryDirectory() as tmpdir:
                core_config.CONFIG_DIR = Path(tmpdir)
                core_config.CONFIG_FILE = core_config.CONFIG_DIR / "config.json"
                core_config.CONFIG_FILE.write_text("{not json", encoding="utf-8")

                with self.assertLogs("docpick", level="WARNING") as logs:
                    loaded = core_config.load_config()

                self.assertEqual(loaded, core_config.DEFAULT_CONFIG)
                self.assertTrue(any("Failed to load config" in line for line in logs.output))
        finally:
            core_config.CONFIG_DIR = original_dir
            core_config.CONFIG_FILE = original_file


if __name__ == "__main__":
    unittest.main()
