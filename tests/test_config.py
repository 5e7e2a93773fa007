#!/usr/bin/env python3
"""Unit tests for config.py constants and column configuration."""

import sys
from pathlib import Path

# Add parent directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

import unittest
from core.config import (
    BUTTON_LABELS,
    COLUMN_CONFIGS,
    COLUMN_HEADINGS,
    COLUMN_ORDER,
    DEBT_METHOD,
    ENTRY_KIND_LABELS,
    MESSAGES,
    STATUS_BADGE_COLORS,
    STATUS_KEYS,
    get_column_config,
)


class TestStatusConfig(unittest.TestCase):
    def test_arabic_and_english_status_keys(self):
        assert STATUS_KEYS["نشط"] == STATUS_KEYS["active"] == "active"
        assert STATUS_KEYS["منتهي"] == STATUS_KEYS["expired"] == "expired"
        assert STATUS_KEYS["معلق"] == STATUS_KEYS["pending"] == "pending"

    def test_badge_colors_have_both_tones(self):
        for color in ("green", "red", "yellow", "gray"):
            assert set(STATUS_BADGE_COLORS[color]) == {"background", "foreground"}


class TestLedgerConfig(unittest.TestCase):
    def test_debt_method_matches_label(self):
        assert DEBT_METHOD == "دين سابق"
        assert ENTRY_KIND_LABELS["debt"] == DEBT_METHOD

    def test_required_messages_present(self):
        for key in ("load_failed", "save_failed", "delete_failed", "confirm_delete", "incomplete", "amount_positive"):
            assert MESSAGES[key]

    def test_button_labels_present(self):
        for key in ("print_statement", "add_debt", "add_invoice", "add_receipt", "delete", "print_receipt"):
            assert BUTTON_LABELS[key]


class TestColumnConfig(unittest.TestCase):
    def test_order_matches_configs(self):
        for section, order in COLUMN_ORDER.items():
            assert set(order) == set(COLUMN_CONFIGS[section])
            assert set(order) == set(COLUMN_HEADINGS[section])

    def test_get_column_config_adds_headers(self):
        config = get_column_config("ledger_entries")
        assert config["amount"]["header"] == "المبلغ"
        assert config["amount"]["width"] == 150

    def test_unknown_section_raises(self):
        with self.assertRaises(ValueError):
            get_column_config("trucks")


if __name__ == "__main__":
    unittest.main()
