#!/usr/bin/env python3

from __future__ import annotations

import tkinter as tk
from tkinter import messagebox, ttk

from app.action_wrappers import ActionWrappersMixin
from app.mixins.billing_mixin import BillingMixin
from app.mixins.contracts_tab_mixin import ContractsTabMixin
from app.mixins.lifecycle_mixin import LifecycleMixin
from app.mixins.settings_mixin import SettingsMixin
from app.widgets.date_entry import DateEntry
from billing.contract_gallery import ContractGallery
from billing.ledger_session import LedgerSession
from core.app_logging import get_app_logger, setup_all_loggers
from core.config import (
    DB_PATH,
    FONTS,
    SEED_SAMPLE_DATA,
    TAB_LABELS,
    TREE_ROW_HEIGHT,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from core.runtime_utils import enable_windows_dpi_awareness, log_action
from data.data_client import DataClient
from data.sample_data import seed_sample_data
from tabs import build_billing_tab, build_contracts_tab
from ui.toast import make_notifier

# Initialize all loggers (exception, ux_action, trace) at import time
setup_all_loggers()
logger = get_app_logger()


class App(
    ActionWrappersMixin,
    ContractsTabMixin,
    BillingMixin,
    SettingsMixin,
    LifecycleMixin,
    tk.Tk,
):
    def __init__(self):
        super().__init__()
        self.date_entry_cls = DateEntry
        self.title("لوحة إدارة اللوحات الإعلانية")
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self._configure_ui_rendering()

        try:
            self.client = DataClient(DB_PATH)
        except Exception as exc:
            messagebox.showerror("خطأ في قاعدة البيانات", f"تعذر فتح قاعدة البيانات.\n\n{exc}")
            self.destroy()
            return
        if SEED_SAMPLE_DATA and seed_sample_data(self.client):
            logger.info("Seeded sample contracts into an empty store")

        self._app_settings = self._load_app_settings()
        self._ensure_history_log_exists()
        self._log_action = log_action
        self._ledger_dialog_window = None

        self.notify = make_notifier(self)
        self.contract_gallery = ContractGallery()
        self.ledger_session = LedgerSession(self.client, notify=self.notify, reload=self.reload_ledger)

        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)

        nb = ttk.Notebook(self)
        nb.grid(row=0, column=0, sticky="nsew")
        self.main_notebook = nb

        self.tab_contracts = ttk.Frame(nb)
        self.tab_billing = ttk.Frame(nb)
        nb.add(self.tab_contracts, text=TAB_LABELS["contracts"])
        nb.add(self.tab_billing, text=TAB_LABELS["billing"])

        build_contracts_tab(self, self.tab_contracts)
        build_billing_tab(self, self.tab_billing)
        nb.bind("<<NotebookTabChanged>>", self._on_tab_changed)

        # Initial loads
        self.refresh_contracts()
        self._render_ledger()
        last_id, last_name = self._get_last_customer()
        if last_id or last_name:
            if last_name:
                self.ledger_customer_entry.insert(0, last_name)
            self.open_customer_ledger(last_id, last_name)

        self.protocol("WM_DELETE_WINDOW", self.on_close)
        self._bind_global_shortcuts()
        self.after(100, self._focus_contract_search)

    def _bind_global_shortcuts(self):
        self.bind_all("<Control-r>", self._refresh_current_tab)
        self.bind_all("<Control-R>", self._refresh_current_tab)
        self.bind_all("<Control-p>", lambda _e: self.print_statement())
        self.contract_search.bind("<Escape>", self._clear_contract_search)

    def _refresh_current_tab(self, _event=None):
        if self.main_notebook.select() == str(self.tab_billing):
            self.reload_ledger()
        else:
            self.refresh_contracts()
        return "break"

    def _configure_ui_rendering(self):
        style = ttk.Style(self)
        if "clam" in style.theme_names():
            style.theme_use("clam")
        style.configure(".", font=FONTS["base"])
        style.configure("Treeview", rowheight=TREE_ROW_HEIGHT, font=FONTS["base"])
        style.configure("Treeview.Heading", font=FONTS["label_bold"])
        style.configure("TNotebook.Tab", padding=(16, 8), font=FONTS["label_bold"])
        self.option_add("*Font", FONTS["base"])


def main() -> None:
    enable_windows_dpi_awareness()
    app = App()
    app.mainloop()


if __name__ == "__main__":
    main()
