from __future__ import annotations

import tkinter as tk
from tkinter import messagebox

from billing.dialog_state import AddDebtDialog, AddEntryDialog, DialogState, EditReceiptDialog, is_open
from billing.statement_documents import kind_label
from core.app_logging import trace
from core.config import EMPTY_PLACEHOLDER, ENTRY_KIND_INVOICE, ENTRY_KIND_RECEIPT, MESSAGES
from data.models import LedgerEntry
from dialogs.customer_picker import open_customer_picker
from dialogs.ledger_entry_dialog import open_add_entry_dialog, open_debt_dialog, open_edit_receipt_dialog
from ui.ui_helpers import clear_tree
from utils.formatting import format_date, format_money
from utils.validation import normalize_whitespace


class BillingMixin:
    # -- rendering ----------------------------------------------------------

    def _render_ledger(self):
        session = self.ledger_session
        self.ledger_title_label.configure(text=session.customer_name or session.customer_id or "")
        # Switching customer resets the session dialog; drop its window too
        if not is_open(session.active_dialog):
            self._close_ledger_dialog_window()

        totals = session.totals
        self.ledger_total_labels["rent"].configure(text=format_money(totals.total_rent))
        self.ledger_total_labels["paid"].configure(text=format_money(totals.total_paid))
        self.ledger_total_labels["balance"].configure(text=format_money(totals.balance))

        clear_tree(self.ledger_contract_tree)
        for contract in session.contracts:
            self.ledger_contract_tree.insert(
                "",
                "end",
                values=(
                    contract.contract_number,
                    contract.ad_type or "",
                    format_date(contract.start_date, EMPTY_PLACEHOLDER),
                    format_date(contract.end_date, EMPTY_PLACEHOLDER),
                    format_money(contract.total_rent),
                ),
            )
        self.ledger_contracts_empty.configure(text="" if session.contracts else MESSAGES["no_contracts"])

        clear_tree(self.ledger_entry_tree)
        self._ledger_entries_by_iid = {}
        for entry in session.entries:
            iid = self.ledger_entry_tree.insert(
                "",
                "end",
                values=(
                    entry.contract_number or EMPTY_PLACEHOLDER,
                    kind_label(entry.entry_type) or EMPTY_PLACEHOLDER,
                    format_money(entry.amount),
                    entry.method or "",
                    entry.reference or "",
                    format_date(entry.paid_at),
                    entry.notes or "",
                ),
            )
            self._ledger_entries_by_iid[iid] = entry
        self.ledger_entries_empty.configure(text="" if session.entries else MESSAGES["no_payments"])

    def _selected_ledger_entry(self) -> LedgerEntry | None:
        sel = self.ledger_entry_tree.selection()
        if not sel:
            messagebox.showwarning("لم يتم الاختيار", "اختر سجلاً من الجدول أولاً.", parent=self)
            return None
        return getattr(self, "_ledger_entries_by_iid", {}).get(sel[0])

    def _show_ledger_entry_menu(self, event: tk.Event):
        row_id = self.ledger_entry_tree.identify_row(event.y)
        if not row_id:
            return
        self.ledger_entry_tree.selection_set(row_id)
        self.ledger_entry_tree.focus(row_id)
        try:
            self.ledger_entry_menu.tk_popup(event.x_root, event.y_root)
        finally:
            self.ledger_entry_menu.grab_release()

    # -- customer selection -------------------------------------------------

    def _open_ledger_from_entry(self):
        name = normalize_whitespace(self.ledger_customer_entry.get())
        if not name:
            messagebox.showinfo("كشف الحساب", MESSAGES["no_customer"], parent=self)
            return
        self.open_customer_ledger(None, name)

    def _open_ledger_customer_picker(self):
        customers = self.load_customers()

        def on_select(customer) -> None:
            self.ledger_customer_entry.delete(0, tk.END)
            self.ledger_customer_entry.insert(0, customer.name)
            self.open_customer_ledger(customer.id, customer.name)

        open_customer_picker(self, customers, normalize_whitespace, on_select)

    # -- dialogs ------------------------------------------------------------

    def _close_ledger_dialog_window(self):
        window = getattr(self, "_ledger_dialog_window", None)
        self._ledger_dialog_window = None
        if window is not None and window.winfo_exists():
            window.destroy()

    def _on_ledger_dialog_destroyed(self, event: tk.Event, window: tk.Toplevel):
        if event.widget is not window:
            return
        if getattr(self, "_ledger_dialog_window", None) is window:
            self._ledger_dialog_window = None
            self.ledger_session.close_dialog()

    @trace
    def _show_ledger_dialog(self, state: DialogState, build_window):
        """Open ``state`` as the only ledger dialog; any dialog already open is closed first."""
        if not self.ledger_session.has_customer:
            messagebox.showinfo("كشف الحساب", MESSAGES["no_customer"], parent=self)
            return None
        self._close_ledger_dialog_window()
        self.ledger_session.open_dialog(state)
        window = build_window()
        self._ledger_dialog_window = window
        window.bind("<Destroy>", lambda e: self._on_ledger_dialog_destroyed(e, window), add="+")
        return window

    def open_add_invoice(self):
        self._open_add_entry(ENTRY_KIND_INVOICE)

    def open_add_receipt(self):
        self._open_add_entry(ENTRY_KIND_RECEIPT)

    def _open_add_entry(self, kind: str):
        session = self.ledger_session
        self._show_ledger_dialog(
            AddEntryDialog(kind),
            lambda: open_add_entry_dialog(
                self,
                kind,
                session.new_entry_form(),
                session.contract_numbers(),
                on_submit=lambda form: self.submit_add_entry(kind, form),
                date_entry_cls=self.date_entry_cls,
            ),
        )

    def open_add_debt(self):
        session = self.ledger_session
        self._show_ledger_dialog(
            AddDebtDialog(),
            lambda: open_debt_dialog(
                self,
                session.new_debt_form(),
                on_submit=self.submit_debt,
                date_entry_cls=self.date_entry_cls,
            ),
        )

    def open_edit_selected_entry(self):
        entry = self._selected_ledger_entry()
        if entry is None:
            return
        session = self.ledger_session
        self._show_ledger_dialog(
            EditReceiptDialog(entry),
            lambda: open_edit_receipt_dialog(
                self,
                session.edit_form_for(entry),
                on_submit=lambda form: self.submit_receipt_edit(entry, form),
                date_entry_cls=self.date_entry_cls,
            ),
        )

    def delete_selected_entry(self):
        entry = self._selected_ledger_entry()
        if entry is not None:
            self.delete_entry(entry)

    def print_selected_receipt(self):
        entry = self._selected_ledger_entry()
        if entry is not None:
            self.print_receipt(entry)
