#!/usr/bin/env python3
"""Unit tests for contract gallery search, status badges and loading."""

import os
import shutil
import sys
import tempfile
from pathlib import Path

# Add parent directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

import unittest
from billing.contract_gallery import (
    ContractGallery,
    contract_matches,
    filter_contracts,
    load_gallery_contracts,
    status_color,
)
from data.data_client import DataClient
from data.models import Contract
from data.sample_data import SAMPLE_CONTRACTS, seed_sample_data


def sample_contracts():
    return [Contract.from_row(row) for row in SAMPLE_CONTRACTS]


class TestFilterContracts(unittest.TestCase):
    def test_contract_number_matches_exactly_one(self):
        result = filter_contracts(sample_contracts(), "C-2024-002")
        assert [c.contract_number for c in result] == ["C-2024-002"]

    def test_empty_term_returns_all(self):
        assert len(filter_contracts(sample_contracts(), "")) == 3
        assert len(filter_contracts(sample_contracts(), None)) == 3

    def test_common_prefix_matches_all(self):
        assert len(filter_contracts(sample_contracts(), "C-2024")) == 3

    def test_matches_customer_name(self):
        result = filter_contracts(sample_contracts(), "النور")
        assert [c.contract_number for c in result] == ["C-2024-002"]

    def test_matches_ad_type(self):
        result = filter_contracts(sample_contracts(), "مطعم")
        assert [c.contract_number for c in result] == ["C-2024-003"]

    def test_case_insensitive(self):
        result = filter_contracts(sample_contracts(), "c-2024-001")
        assert [c.contract_number for c in result] == ["C-2024-001"]

    def test_no_match(self):
        assert filter_contracts(sample_contracts(), "zzz") == []

    def test_missing_fields_do_not_match_or_fail(self):
        contract = Contract(contract_number="X-1")
        assert not contract_matches(contract, "anything")
        assert contract_matches(contract, "x-1")

    def test_preserves_order(self):
        result = filter_contracts(sample_contracts(), "إعلان")
        assert [c.contract_number for c in result] == ["C-2024-001", "C-2024-002", "C-2024-003"]


class TestStatusColor(unittest.TestCase):
    def test_arabic_statuses(self):
        assert status_color("نشط") == "green"
        assert status_color("منتهي") == "red"
        assert status_color("معلق") == "yellow"

    def test_english_statuses_any_case(self):
        assert status_color("Active") == "green"
        assert status_color("EXPIRED") == "red"
        assert status_color(" pending ") == "yellow"

    def test_unknown_status_is_gray(self):
        assert status_color("cancelled") == "gray"
        assert status_color("") == "gray"
        assert status_color(None) == "gray"


class TestContractGalleryState(unittest.TestCase):
    def test_initial_state_shows_everything(self):
        gallery = ContractGallery(sample_contracts())
        assert len(gallery.visible) == 3
        assert not gallery.is_empty

    def test_search_then_clear(self):
        gallery = ContractGallery(sample_contracts())
        assert len(gallery.set_search_term("C-2024-003")) == 1
        assert len(gallery.set_search_term("")) == 3

    def test_search_term_kept_when_contracts_reload(self):
        gallery = ContractGallery()
        gallery.set_search_term("النور")
        assert gallery.is_empty
        gallery.set_contracts(sample_contracts())
        assert [c.contract_number for c in gallery.visible] == ["C-2024-002"]

    def test_no_match_is_empty(self):
        gallery = ContractGallery(sample_contracts())
        gallery.set_search_term("nothing here")
        assert gallery.is_empty


class TestLoadGalleryContracts(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.client = DataClient(os.path.join(self.temp_dir, "test.db"))

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_empty_store(self):
        assert load_gallery_contracts(self.client) == []

    def test_loads_seeded_contracts_with_billboards(self):
        seed_sample_data(self.client)
        contracts = load_gallery_contracts(self.client)
        assert [c.contract_number for c in contracts] == ["C-2024-001", "C-2024-002", "C-2024-003"]
        first = contracts[0]
        assert first.customer_name == "أحمد محمد الصالح"
        assert first.rent_value == 5000
        assert [b.name for b in first.billboards] == ["لوحة شارع الجمهورية"]
        assert first.customer_id


if __name__ == "__main__":
    unittest.main()
