#!/usr/bin/env python3
"""Unit tests for the customer ledger workbook export."""

import os
import shutil
import sys
import tempfile
from pathlib import Path

# Add parent directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

import unittest
from openpyxl import load_workbook

from billing.ledger_export import MONEY_FORMAT, export_ledger_xlsx
from billing.ledger_session import Totals
from data.models import Contract, LedgerEntry


class TestExportLedgerXlsx(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.temp_dir, "ledger.xlsx")
        self.contracts = [
            Contract(contract_number="C-2024-001", ad_type="إعلان تجاري", start_date="2024-01-15", total_rent="5000"),
        ]
        self.entries = [
            LedgerEntry(
                id="p1",
                customer_name="أحمد",
                contract_number="C-2024-001",
                amount=1500,
                method="نقدي",
                reference="R-1",
                paid_at="2024-02-01T00:00:00+00:00",
                entry_type="receipt",
            ),
            LedgerEntry(id="d1", customer_name="أحمد", amount="300", method="دين سابق", entry_type="debt"),
        ]

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _export(self):
        result = export_ledger_xlsx(
            self.path, "أحمد", "cust-1", self.contracts, self.entries, Totals(5000, 1800, 3200)
        )
        assert result == self.path
        return load_workbook(self.path).active

    def _rows(self, ws):
        return [[cell.value for cell in row] for row in ws.iter_rows()]

    def test_sheet_is_right_to_left(self):
        ws = self._export()
        assert ws.title == "كشف حساب"
        assert ws.sheet_view.rightToLeft

    def test_header_rows(self):
        ws = self._export()
        assert ws["A1"].value == "كشف حساب العميل"
        assert ws["B2"].value == "أحمد"
        assert ws["D2"].value == "cust-1"

    def test_contract_rent_is_numeric(self):
        rows = self._rows(self._export())
        contract_row = next(r for r in rows if r[0] == "C-2024-001" and r[1] == "إعلان تجاري")
        assert contract_row[2] == "15/1/2024"
        assert contract_row[4] == 5000

    def test_entries_listed_with_labels_and_amounts(self):
        ws = self._export()
        rows = self._rows(ws)
        receipt = next(r for r in rows if r[1] == "إيصال")
        debt = next(r for r in rows if r[1] == "دين سابق")
        assert receipt[2] == 1500
        assert receipt[5] == "1/2/2024"
        assert debt[0] == "—"
        assert debt[2] == 300

    def test_totals_rows(self):
        ws = self._export()
        totals = {r[0]: r[1] for r in self._rows(ws) if r[0] in ("إجمالي العقود", "إجمالي المدفوع", "المتبقي")}
        assert totals == {"إجمالي العقود": 5000, "إجمالي المدفوع": 1800, "المتبقي": 3200}
        assert ws.cell(ws.max_row, 2).number_format == MONEY_FORMAT

    def test_empty_ledger_still_exports(self):
        self.contracts = []
        self.entries = []
        ws = self._export()
        assert ws.cell(ws.max_row, 1).value == "المتبقي"


if __name__ == "__main__":
    unittest.main()
