#!/usr/bin/env python3
"""Unit tests for writing and opening print documents."""

import shutil
import sys
import tempfile
import webbrowser
from pathlib import Path
from unittest.mock import patch

# Add parent directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

import unittest
from billing.print_service import open_print_document


class TestOpenPrintDocument(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.print_dir = str(Path(self.temp_dir) / "print")

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _written(self):
        return list(Path(self.print_dir).glob("*.html"))

    @patch("billing.print_service.webbrowser.open", return_value=True)
    def test_writes_file_and_opens_new_window(self, mock_open):
        assert open_print_document("<p>كشف</p>", "statement", self.print_dir) is True
        files = self._written()
        assert len(files) == 1
        assert files[0].read_text(encoding="utf-8") == "<p>كشف</p>"
        uri = mock_open.call_args[0][0]
        assert uri.startswith("file://")
        assert mock_open.call_args[1] == {"new": 2}

    @patch("billing.print_service.webbrowser.open", return_value=True)
    def test_unsafe_stem_is_cleaned(self, _mock_open):
        open_print_document("x", "receipt ../../a/b", self.print_dir)
        name = self._written()[0].name
        assert "/" not in name and " " not in name
        assert name.startswith("receipt_")

    @patch("billing.print_service.webbrowser.open", return_value=False)
    def test_blocked_window_returns_false(self, _mock_open):
        assert open_print_document("x", "statement", self.print_dir) is False

    @patch("billing.print_service.webbrowser.open", side_effect=webbrowser.Error("no browser"))
    def test_missing_browser_returns_false(self, _mock_open):
        assert open_print_document("x", "statement", self.print_dir) is False

    @patch("billing.print_service.webbrowser.open", return_value=True)
    def test_unwritable_folder_returns_false(self, mock_open):
        blocker = Path(self.temp_dir) / "file"
        blocker.write_text("not a folder")
        assert open_print_document("x", "statement", str(blocker)) is False
        mock_open.assert_not_called()


if __name__ == "__main__":
    unittest.main()
