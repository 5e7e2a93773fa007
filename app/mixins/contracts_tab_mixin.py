from __future__ import annotations

from core.config import GALLERY_COLUMNS, MESSAGES
from dialogs.contract_details_dialog import show_contract_details
from dialogs.contract_print_dialog import open_contract_print_dialog
from tabs.contracts_tab import build_contract_card


class ContractsTabMixin:
    def _on_contract_search_keyrelease(self, _event=None):
        self.search_contracts(self.contract_search.get())

    def _clear_contract_search(self, _event=None):
        if hasattr(self, "contract_search"):
            self.contract_search.delete(0, "end")
        self.search_contracts("")

    def _render_contract_cards(self):
        frame = self.contract_cards_frame
        for child in frame.winfo_children():
            child.destroy()

        if self.contract_gallery.is_empty:
            self.contract_canvas.master.grid_remove()
            message = MESSAGES["no_contracts_match"] if self.contract_gallery.search_term else MESSAGES["no_contracts"]
            self.contract_empty_label.configure(text=message)
            self.contract_empty_label.grid(row=1, column=0, pady=40)
            return

        self.contract_empty_label.grid_remove()
        self.contract_canvas.master.grid()
        for col in range(GALLERY_COLUMNS):
            frame.columnconfigure(col, weight=1, uniform="cards")
        # Cards fill right to left
        for index, contract in enumerate(self.contract_gallery.visible):
            row, col = divmod(index, GALLERY_COLUMNS)
            card = build_contract_card(
                frame,
                contract,
                on_view=self._view_contract,
                on_print=self._open_contract_print_dialog,
                on_open_ledger=self._open_ledger_for_contract,
            )
            card.grid(row=row, column=GALLERY_COLUMNS - 1 - col, sticky="nsew", padx=6, pady=6)

    def _view_contract(self, contract):
        show_contract_details(self, contract, on_print=self._open_contract_print_dialog)

    def _open_contract_print_dialog(self, contract):
        open_contract_print_dialog(self, contract, on_print=self.print_contract)

    def _open_ledger_for_contract(self, contract):
        self.main_notebook.select(self.tab_billing)
        self.open_customer_ledger(contract.customer_id, contract.customer_name)
