#!/usr/bin/env python3
"""Unit tests for date and money formatting helpers."""

import sys
from datetime import date, timezone
from pathlib import Path

# Add parent directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

import unittest
from utils.formatting import (
    date_to_timestamp,
    format_amount,
    format_date,
    format_datetime,
    format_money,
    parse_timestamp,
    parse_ymd,
    timestamp_date_part,
    to_number,
)


class TestParsing(unittest.TestCase):
    def test_parse_ymd(self):
        assert parse_ymd("2024-02-29") == date(2024, 2, 29)
        assert parse_ymd(" 2024-01-05 ") == date(2024, 1, 5)
        assert parse_ymd("2023-02-29") is None
        assert parse_ymd("05/01/2024") is None
        assert parse_ymd("") is None
        assert parse_ymd(None) is None

    def test_parse_timestamp_with_z_suffix(self):
        parsed = parse_timestamp("2024-01-15T10:30:00Z")
        assert parsed.tzinfo == timezone.utc
        assert (parsed.hour, parsed.minute) == (10, 30)

    def test_parse_timestamp_plain_date(self):
        parsed = parse_timestamp("2024-01-15")
        assert parsed.date() == date(2024, 1, 15)

    def test_parse_timestamp_invalid(self):
        assert parse_timestamp("not a date") is None
        assert parse_timestamp(None) is None

    def test_date_to_timestamp_is_utc_midnight(self):
        assert date_to_timestamp(date(2024, 3, 1)) == "2024-03-01T00:00:00+00:00"

    def test_timestamp_date_part(self):
        assert timestamp_date_part("2024-03-01T12:00:00+00:00") == "2024-03-01"
        assert timestamp_date_part(None) == ""


class TestDateDisplay(unittest.TestCase):
    def test_format_date_day_month_year(self):
        assert format_date("2024-01-05T00:00:00+00:00") == "5/1/2024"
        assert format_date("2024-12-31") == "31/12/2024"

    def test_format_date_keeps_timestamp_own_date(self):
        assert format_date("2024-01-15T23:30:00+00:00") == "15/1/2024"

    def test_format_date_empty_value(self):
        assert format_date(None) == ""
        assert format_date("", empty="—") == "—"

    def test_format_datetime(self):
        assert format_datetime("2024-01-15T09:05:00+00:00") == "15/1/2024 09:05"
        assert format_datetime(None) == ""


class TestMoney(unittest.TestCase):
    def test_to_number(self):
        assert to_number("1500") == 1500
        assert to_number(" 12.5 ") == 12.5
        assert to_number(7) == 7

    def test_to_number_treats_bad_values_as_zero(self):
        for value in (None, "", "abc", "nan", "inf", True):
            assert to_number(value) == 0.0, value

    def test_format_amount_groups_thousands(self):
        assert format_amount(12500) == "12,500"
        assert format_amount(1234567.891) == "1,234,567.89"
        assert format_amount(0) == "0"

    def test_format_amount_drops_trailing_zeros(self):
        assert format_amount(2500.50) == "2,500.5"
        assert format_amount("100.00") == "100"

    def test_format_money_suffix(self):
        assert format_money(5000) == "5,000 د.ل"
        assert format_money(None) == "0 د.ل"


if __name__ == "__main__":
    unittest.main()
