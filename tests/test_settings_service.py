#!/usr/bin/env python3
"""Unit tests for the JSON settings store."""

import os
import shutil
import sys
import tempfile
from pathlib import Path

# Add parent directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

import unittest
from core.settings_service import SettingsService


class TestSettingsService(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.temp_dir, "app_settings.json")
        self.service = SettingsService(self.path)

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_missing_file_loads_empty(self):
        assert self.service.load() == {}

    def test_corrupt_or_non_dict_file_loads_empty(self):
        Path(self.path).write_text("{not json", encoding="utf-8")
        assert self.service.load() == {}
        Path(self.path).write_text("[1, 2]", encoding="utf-8")
        assert self.service.load() == {}

    def test_save_then_load_keeps_arabic(self):
        self.service.save({"last_customer": {"id": "c1", "name": "أحمد"}})
        assert "أحمد" in Path(self.path).read_text(encoding="utf-8")
        assert self.service.load()["last_customer"]["name"] == "أحمد"

    def test_last_export_dir(self):
        settings = {}
        assert self.service.get_last_export_dir(settings) is None
        assert self.service.set_last_export_dir(settings, os.path.join(self.temp_dir, "out.xlsx"))
        assert self.service.get_last_export_dir(settings) == self.temp_dir

    def test_last_export_dir_ignores_bare_file_name(self):
        settings = {}
        assert self.service.set_last_export_dir(settings, "out.xlsx") is False
        assert settings == {}

    def test_last_customer(self):
        settings = {}
        assert self.service.get_last_customer(settings) == (None, None)
        self.service.set_last_customer(settings, None, "شركة النور")
        assert self.service.get_last_customer(settings) == (None, "شركة النور")
        self.service.set_last_customer(settings, "c1", "أحمد")
        assert self.service.get_last_customer(settings) == ("c1", "أحمد")

    def test_malformed_last_customer(self):
        assert self.service.get_last_customer({"last_customer": "x"}) == (None, None)


if __name__ == "__main__":
    unittest.main()
