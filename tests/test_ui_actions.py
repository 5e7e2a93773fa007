#!/usr/bin/env python3
"""Tests for UI action functions using a mocked app and a temporary store."""

import importlib.util
import os
import shutil
import sys
import tempfile
import threading
from pathlib import Path
from unittest.mock import MagicMock, patch

# Add parent directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

import unittest

HAS_TK = importlib.util.find_spec("tkinter") is not None

if HAS_TK:
    from billing.contract_gallery import ContractGallery
    from billing.ledger_session import EntryForm, LedgerSession
    from data.data_client import DataClient
    from data.sample_data import seed_sample_data
    from ui import ui_actions


class FakeApp:
    """Runs ``after`` callbacks immediately and records when one arrives."""

    def __init__(self):
        self.delivered = threading.Event()

    def after(self, _delay, callback):
        callback()
        self.delivered.set()


@unittest.skipUnless(HAS_TK, "tkinter not available")
class UiActionTestCase(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.client = DataClient(os.path.join(self.temp_dir, "test.db"))
        seed_sample_data(self.client)
        self.notices = []
        self.app = FakeApp()
        self.session = LedgerSession(self.client, lambda level, msg: self.notices.append((level, msg)))
        self.log_action = MagicMock()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def load(self, name="أحمد محمد الصالح"):
        self.session.set_customer(None, name)
        self.session.load_data()


class TestGalleryActions(UiActionTestCase):
    def test_refresh_loads_and_renders(self):
        gallery = ContractGallery()
        render = MagicMock()
        ui_actions.refresh_contracts_action(self.app, self.client, gallery, render, MagicMock())
        assert len(gallery.contracts) == 3
        render.assert_called_once()

    def test_refresh_failure_notifies(self):
        gallery = ContractGallery()
        render = MagicMock()
        notify = MagicMock()
        with patch("ui.ui_actions.load_gallery_contracts", side_effect=ui_actions.DataClientError("down")):
            ui_actions.refresh_contracts_action(self.app, self.client, gallery, render, notify)
        notify.assert_called_once_with("error", ui_actions.MESSAGES["load_failed"])
        render.assert_not_called()

    def test_search_filters_gallery(self):
        gallery = ContractGallery()
        ui_actions.refresh_contracts_action(self.app, self.client, gallery, MagicMock(), MagicMock())
        ui_actions.search_contracts_action(self.app, gallery, "C-2024-002", MagicMock())
        assert [c.contract_number for c in gallery.visible] == ["C-2024-002"]

    @patch("ui.ui_actions.open_print_document", return_value=True)
    def test_print_contract_logs_when_opened(self, mock_print):
        gallery = ContractGallery()
        ui_actions.refresh_contracts_action(self.app, self.client, gallery, MagicMock(), MagicMock())
        contract = gallery.contracts[0]
        assert ui_actions.print_contract_action(self.app, contract, self.log_action) is True
        assert "C-2024-001" in mock_print.call_args[0][0]
        self.log_action.assert_called_once()


class TestLedgerLoading(UiActionTestCase):
    def test_reload_delivers_snapshot_through_after(self):
        self.session.set_customer(None, "شركة النور")
        render = MagicMock()
        ui_actions.reload_ledger_action(self.app, self.session, render)
        assert self.app.delivered.wait(5)
        render.assert_called_once()
        assert [c.contract_number for c in self.session.contracts] == ["C-2024-002"]

    def test_reload_without_customer_renders_empty(self):
        render = MagicMock()
        ui_actions.reload_ledger_action(self.app, self.session, render)
        render.assert_called_once()
        assert not self.app.delivered.is_set()

    def test_stale_reload_is_not_rendered(self):
        self.session.set_customer(None, "شركة النور")
        render = MagicMock()
        release = threading.Event()
        real_fetch = self.session.fetch_snapshot

        def slow_fetch(ticket):
            release.wait(5)
            return real_fetch(ticket)

        with patch.object(self.session, "fetch_snapshot", side_effect=slow_fetch):
            ui_actions.reload_ledger_action(self.app, self.session, render)
            self.session.set_customer(None, "مطعم الأصالة")
            release.set()
            assert self.app.delivered.wait(5)
        render.assert_not_called()
        assert self.session.contracts == []

    def test_open_customer_ledger_defers_lookup(self):
        reload_cb = MagicMock()
        with patch("billing.ledger_session.resolve_identity") as mock_resolve:
            ui_actions.open_customer_ledger_action(self.app, self.session, None, "مطعم الأصالة", reload_cb)
        mock_resolve.assert_not_called()
        assert self.session.identity_path == "pending"
        assert self.session.customer_id is None
        reload_cb.assert_called_once()

    def test_identity_resolved_on_worker_and_remembered(self):
        remember = MagicMock()
        render = MagicMock()
        ui_actions.open_customer_ledger_action(
            self.app,
            self.session,
            None,
            "مطعم الأصالة",
            lambda: ui_actions.reload_ledger_action(self.app, self.session, render, identity_cb=remember),
        )
        assert self.app.delivered.wait(5)
        customer_id, customer_name = remember.call_args[0]
        assert customer_id
        assert customer_name == "مطعم الأصالة"
        assert self.session.customer_id == customer_id
        assert self.session.identity_path == "name"
        assert [c.contract_number for c in self.session.contracts] == ["C-2024-003"]
        render.assert_called_once()

    def test_load_customers(self):
        names = [c.name for c in ui_actions.load_customers_action(self.app, self.client)]
        assert len(names) == 3


class TestLedgerMutations(UiActionTestCase):
    def test_add_receipt(self):
        self.load()
        form = EntryForm(amount="500", contract_number="C-2024-001", date="2024-02-01")
        assert ui_actions.submit_add_entry_action(self.app, self.session, "receipt", form) is True
        assert self.session.total_paid == 500

    def test_add_debt_rejects_blank_amount(self):
        self.load()
        assert ui_actions.submit_debt_action(self.app, self.session, EntryForm()) is False
        assert self.notices[-1][0] == "error"

    @patch("ui.ui_actions.messagebox.askyesno", return_value=False)
    def test_delete_cancelled(self, _ask):
        self.load()
        ui_actions.submit_debt_action(self.app, self.session, EntryForm(amount="100"))
        entry = self.session.entries[0]
        assert ui_actions.delete_entry_action(self.app, self.session, entry, self.log_action) is False
        assert len(self.session.entries) == 1
        self.log_action.assert_not_called()

    @patch("ui.ui_actions.messagebox.askyesno", return_value=True)
    def test_delete_confirmed(self, _ask):
        self.load()
        ui_actions.submit_debt_action(self.app, self.session, EntryForm(amount="100"))
        entry = self.session.entries[0]
        assert ui_actions.delete_entry_action(self.app, self.session, entry, self.log_action) is True
        assert self.session.entries == []
        self.log_action.assert_called_once()


class TestLedgerDocuments(UiActionTestCase):
    @patch("ui.ui_actions.open_print_document", return_value=True)
    def test_print_statement(self, mock_print):
        self.load()
        assert ui_actions.print_statement_action(self.app, self.session, self.log_action) is True
        html = mock_print.call_args[0][0]
        assert "أحمد محمد الصالح" in html
        assert "5,000 د.ل" in html
        self.log_action.assert_called_once()

    @patch("ui.ui_actions.open_print_document", return_value=False)
    def test_print_statement_blocked_is_silent(self, _mock_print):
        self.load()
        assert ui_actions.print_statement_action(self.app, self.session, self.log_action) is False
        self.log_action.assert_not_called()

    @patch("ui.ui_actions.messagebox.showinfo")
    @patch("ui.ui_actions.open_print_document")
    def test_print_statement_needs_customer(self, mock_print, mock_info):
        assert ui_actions.print_statement_action(self.app, self.session, self.log_action) is False
        mock_print.assert_not_called()
        mock_info.assert_called_once()

    @patch("ui.ui_actions.messagebox.showinfo")
    @patch("ui.ui_actions.filedialog.asksaveasfilename")
    def test_export_ledger(self, mock_save, _info):
        self.load()
        target = os.path.join(self.temp_dir, "ledger.xlsx")
        mock_save.return_value = target
        remember_dir = MagicMock()
        ui_actions.export_ledger_action(self.app, self.session, lambda: None, remember_dir, self.log_action)
        assert os.path.exists(target)
        remember_dir.assert_called_once_with(target)

    @patch("ui.ui_actions.messagebox.showinfo")
    @patch("ui.ui_actions.filedialog.asksaveasfilename", return_value="")
    def test_export_cancelled(self, _save, _info):
        self.load()
        remember_dir = MagicMock()
        ui_actions.export_ledger_action(self.app, self.session, lambda: None, remember_dir, self.log_action)
        remember_dir.assert_not_called()


if __name__ == "__main__":
    unittest.main()
