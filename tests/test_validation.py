#!/usr/bin/env python3
"""Unit tests for validation.py module."""

import sys
from datetime import date
from pathlib import Path

# Add parent directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

import unittest
from utils.validation import (
    normalize_whitespace,
    optional_date,
    optional_text,
    parse_amount,
    positive_amount,
)


class TestNormalizeWhitespace(unittest.TestCase):
    def test_collapses_inner_whitespace(self):
        assert normalize_whitespace("شركة   النور\tللتجارة\n") == "شركة النور للتجارة"

    def test_empty_values(self):
        assert normalize_whitespace("") == ""
        assert normalize_whitespace(None) == ""
        assert normalize_whitespace("   ") == ""


class TestOptionalText(unittest.TestCase):
    def test_blank_is_none(self):
        assert optional_text("  ") is None
        assert optional_text(None) is None

    def test_trimmed_and_capped(self):
        assert optional_text("  ref  1 ") == "ref 1"
        assert optional_text("x" * 600) == "x" * 500
        assert optional_text("abcdef", max_len=3) == "abc"


class TestParseAmount(unittest.TestCase):
    def test_numbers(self):
        assert parse_amount("1500") == 1500.0
        assert parse_amount(" 12.75 ") == 12.75
        assert parse_amount("1,250") == 1250.0
        assert parse_amount("-5") == -5.0

    def test_blank_or_text_is_none(self):
        assert parse_amount("") is None
        assert parse_amount(None) is None
        assert parse_amount("abc") is None

    def test_non_finite_is_none(self):
        for value in ("nan", "NaN", "inf", "-inf", "Infinity", "1e999"):
            assert parse_amount(value) is None, value


class TestPositiveAmount(unittest.TestCase):
    def test_valid(self):
        assert positive_amount("300", "required", "positive") == 300.0

    def test_blank_uses_required_message(self):
        with self.assertRaisesRegex(ValueError, "required"):
            positive_amount("  ", "required", "positive")

    def test_zero_negative_or_text_use_positive_message(self):
        for value in ("0", "-10", "abc", "nan", "inf", "-inf"):
            with self.assertRaisesRegex(ValueError, "positive"):
                positive_amount(value, "required", "positive")


class TestOptionalDate(unittest.TestCase):
    def test_blank_is_none(self):
        assert optional_date("") is None
        assert optional_date(None) is None

    def test_valid_date(self):
        assert optional_date(" 2024-01-15 ") == date(2024, 1, 15)

    def test_invalid_date_raises(self):
        with self.assertRaises(ValueError):
            optional_date("15/01/2024")
        with self.assertRaises(ValueError):
            optional_date("2024-13-01")


if __name__ == "__main__":
    unittest.main()
