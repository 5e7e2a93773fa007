from __future__ import annotations

from core.app_logging import trace
from data.models import Contract, Customer, LedgerEntry
from billing.ledger_session import EntryForm
from ui.ui_actions import (
    delete_entry_action,
    export_ledger_action,
    load_customers_action,
    open_customer_ledger_action,
    print_contract_action,
    print_receipt_action,
    print_statement_action,
    refresh_contracts_action,
    reload_ledger_action,
    search_contracts_action,
    submit_add_entry_action,
    submit_debt_action,
    submit_receipt_edit_action,
)


class ActionWrappersMixin:
    @trace
    def refresh_contracts(self):
        refresh_contracts_action(
            app=self,
            client=self.client,
            gallery=self.contract_gallery,
            render_cb=self._render_contract_cards,
            notify_cb=self.notify,
        )

    def search_contracts(self, term: str):
        search_contracts_action(
            app=self,
            gallery=self.contract_gallery,
            term=term,
            render_cb=self._render_contract_cards,
        )

    def print_contract(self, contract: Contract) -> bool:
        return print_contract_action(app=self, contract=contract, log_action_cb=self._log_action)

    @trace
    def reload_ledger(self):
        reload_ledger_action(
            app=self,
            session=self.ledger_session,
            render_cb=self._render_ledger,
            identity_cb=self._remember_last_customer,
        )

    @trace
    def open_customer_ledger(self, customer_id: str | None, customer_name: str | None):
        open_customer_ledger_action(
            app=self,
            session=self.ledger_session,
            customer_id=customer_id,
            customer_name=customer_name,
            reload_cb=self.reload_ledger,
        )

    def load_customers(self) -> list[Customer]:
        return load_customers_action(app=self, client=self.client)

    def submit_add_entry(self, kind: str, form: EntryForm) -> bool:
        return submit_add_entry_action(app=self, session=self.ledger_session, kind=kind, form=form)

    def submit_debt(self, form: EntryForm) -> bool:
        return submit_debt_action(app=self, session=self.ledger_session, form=form)

    def submit_receipt_edit(self, entry: LedgerEntry, form: EntryForm) -> bool:
        return submit_receipt_edit_action(app=self, session=self.ledger_session, entry=entry, form=form)

    def delete_entry(self, entry: LedgerEntry) -> bool:
        return delete_entry_action(
            app=self,
            session=self.ledger_session,
            entry=entry,
            log_action_cb=self._log_action,
        )

    def print_statement(self) -> bool:
        return print_statement_action(app=self, session=self.ledger_session, log_action_cb=self._log_action)

    def print_receipt(self, entry: LedgerEntry) -> bool:
        return print_receipt_action(app=self, session=self.ledger_session, entry=entry)

    @trace
    def export_ledger(self):
        export_ledger_action(
            app=self,
            session=self.ledger_session,
            get_last_export_dir_cb=self._get_last_export_dir,
            set_last_export_dir_cb=self._set_last_export_dir,
            log_action_cb=self._log_action,
        )
