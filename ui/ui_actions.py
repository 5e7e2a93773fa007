from __future__ import annotations

import logging
import threading
from tkinter import filedialog, messagebox
from typing import TYPE_CHECKING, Any, Callable

from billing.contract_gallery import ContractGallery, load_gallery_contracts
from billing.ledger_export import export_ledger_xlsx
from billing.ledger_session import EntryForm, LedgerSession, LedgerSnapshot, load_customers
from billing.print_service import open_print_document
from billing.statement_documents import (
    build_contract_view,
    build_receipt_view,
    build_statement_view,
    render_contract_html,
    render_receipt_html,
    render_statement_html,
)
from core.app_logging import get_trace_logger, log_exception, log_ux_action
from core.config import MESSAGES
from core.error_handler import safe_ui_action, safe_ui_action_returning
from data.data_client import DataClientError
from data.models import Contract, Customer, LedgerEntry
from utils.formatting import today

if TYPE_CHECKING:
    from data.data_client import DataClient


logger = logging.getLogger("billboard_app")
trace_logger = get_trace_logger()


# ---------------------------------------------------------------------------
# Contract gallery
# ---------------------------------------------------------------------------

@safe_ui_action("Refresh Contracts")
def refresh_contracts_action(
    app: Any,
    client: "DataClient",
    gallery: ContractGallery,
    render_cb: Callable[[], None],
    notify_cb: Callable[[str, str], None],
) -> None:
    try:
        contracts = load_gallery_contracts(client)
    except DataClientError as exc:
        logger.error(f"Contract gallery load failed: {exc}")
        notify_cb("error", MESSAGES["load_failed"])
        return
    gallery.set_contracts(contracts)
    render_cb()


@safe_ui_action("Search Contracts")
def search_contracts_action(app: Any, gallery: ContractGallery, term: str, render_cb: Callable[[], None]) -> None:
    gallery.set_search_term(term)
    render_cb()


@safe_ui_action_returning("Print Contract", return_on_error=False)
def print_contract_action(app: Any, contract: Contract, log_action_cb: Callable[[str, str], None]) -> bool:
    html = render_contract_html(build_contract_view(contract))
    opened = open_print_document(html, f"contract_{contract.contract_number}")
    if opened:
        log_action_cb("PRINT_CONTRACT", f"Printed contract {contract.contract_number}")
    return opened


# ---------------------------------------------------------------------------
# Billing ledger: loading
# ---------------------------------------------------------------------------

@safe_ui_action("Reload Ledger")
def reload_ledger_action(
    app: Any,
    session: LedgerSession,
    render_cb: Callable[[], None],
    identity_cb: Callable[[str | None, str | None], None] | None = None,
) -> None:
    """
    Fetch the ledger on a worker thread; the result is applied on the Tk thread if still current.

    A customer opened without a lookup is resolved on the worker too, and
    ``identity_cb`` receives the resolved id and name once applied.
    """
    if not session.has_customer:
        render_cb()
        return

    ticket = session.begin_load()

    def _deliver(snapshot: LedgerSnapshot) -> None:
        if not session.apply_snapshot(snapshot):
            return
        identity = snapshot.identity
        if identity is not None:
            trace_logger.debug("Ledger customer resolved via %s: %s / %s", identity.path, identity.customer_id, identity.customer_name)
            if identity_cb is not None:
                identity_cb(identity.customer_id, identity.customer_name)
        render_cb()

    def _worker() -> None:
        try:
            snapshot = session.fetch_snapshot(ticket)
        except Exception as exc:
            log_exception("Reload Ledger", exc, context=f"customer={ticket.customer_name or ticket.customer_id}")
            snapshot = LedgerSnapshot(token=ticket.token, errors=[DataClientError(str(exc))])
        app.after(0, lambda: _deliver(snapshot))

    threading.Thread(target=_worker, daemon=True, name=f"ledger-load-{ticket.token}").start()


@safe_ui_action("Open Customer Ledger")
def open_customer_ledger_action(
    app: Any,
    session: LedgerSession,
    customer_id: str | None,
    customer_name: str | None,
    reload_cb: Callable[[], None],
) -> None:
    log_ux_action("Open Customer Ledger", details=f"id={customer_id} name={customer_name}")
    session.set_customer(customer_id, customer_name, resolve=False)
    reload_cb()


@safe_ui_action_returning("Load Customers", return_on_error=[])
def load_customers_action(app: Any, client: "DataClient") -> list[Customer]:
    try:
        return load_customers(client)
    except DataClientError as exc:
        logger.error(f"Customer list load failed: {exc}")
        return []


# ---------------------------------------------------------------------------
# Billing ledger: mutations
# ---------------------------------------------------------------------------

@safe_ui_action_returning("Add Ledger Entry", return_on_error=False)
def submit_add_entry_action(app: Any, session: LedgerSession, kind: str, form: EntryForm) -> bool:
    log_ux_action("Add Ledger Entry", details=f"kind={kind} contract={form.contract_number} amount={form.amount}")
    return session.add_entry(kind, form)


@safe_ui_action_returning("Add Debt", return_on_error=False)
def submit_debt_action(app: Any, session: LedgerSession, form: EntryForm) -> bool:
    log_ux_action("Add Debt", details=f"amount={form.amount}")
    return session.add_debt(form)


@safe_ui_action_returning("Edit Receipt", return_on_error=False)
def submit_receipt_edit_action(app: Any, session: LedgerSession, entry: LedgerEntry, form: EntryForm) -> bool:
    log_ux_action("Edit Receipt", details=f"entry={entry.id} amount={form.amount}")
    return session.save_receipt_edit(entry, form)


@safe_ui_action_returning("Delete Entry", return_on_error=False)
def delete_entry_action(
    app: Any,
    session: LedgerSession,
    entry: LedgerEntry,
    log_action_cb: Callable[[str, str], None],
) -> bool:
    log_ux_action("Delete Entry", details=f"entry={entry.id}")

    def _confirm() -> bool:
        return messagebox.askyesno("تأكيد", MESSAGES["confirm_delete"], parent=app)

    deleted = session.delete_entry(entry, _confirm)
    if deleted:
        log_action_cb(
            "DELETE_LEDGER_ENTRY",
            f"Deleted {entry.entry_type or 'entry'} {entry.id} ({entry.amount}) for {session.customer_name or session.customer_id}",
        )
    return deleted


# ---------------------------------------------------------------------------
# Billing ledger: documents
# ---------------------------------------------------------------------------

@safe_ui_action_returning("Print Statement", return_on_error=False)
def print_statement_action(app: Any, session: LedgerSession, log_action_cb: Callable[[str, str], None]) -> bool:
    if not session.has_customer:
        messagebox.showinfo("كشف الحساب", MESSAGES["no_customer"], parent=app)
        return False
    view = build_statement_view(session.customer_name, session.entries, session.totals)
    opened = open_print_document(render_statement_html(view), f"statement_{session.customer_name or 'customer'}")
    if opened:
        log_action_cb("PRINT_STATEMENT", f"Printed statement for {session.customer_name or session.customer_id}")
    return opened


@safe_ui_action_returning("Print Receipt", return_on_error=False)
def print_receipt_action(app: Any, session: LedgerSession, entry: LedgerEntry) -> bool:
    view = build_receipt_view(session.customer_name, entry)
    return open_print_document(render_receipt_html(view), f"receipt_{entry.id}")


@safe_ui_action("Export Ledger")
def export_ledger_action(
    app: Any,
    session: LedgerSession,
    get_last_export_dir_cb: Callable[[], str | None],
    set_last_export_dir_cb: Callable[[str], None],
    log_action_cb: Callable[[str, str], None],
) -> None:
    if not session.has_customer:
        messagebox.showinfo("كشف الحساب", MESSAGES["no_customer"], parent=app)
        return

    name = (session.customer_name or str(session.customer_id)).replace(" ", "_")
    file_path = filedialog.asksaveasfilename(
        title="تصدير كشف الحساب",
        defaultextension=".xlsx",
        initialfile=f"ledger_{name}_{today().isoformat()}.xlsx",
        initialdir=get_last_export_dir_cb(),
        filetypes=[("Excel Workbook", "*.xlsx")],
        parent=app,
    )
    if not file_path:
        return

    export_ledger_xlsx(
        file_path,
        session.customer_name,
        session.customer_id,
        session.contracts,
        session.entries,
        session.totals,
    )
    set_last_export_dir_cb(file_path)
    log_action_cb("EXPORT_LEDGER", f"Exported ledger for {session.customer_name or session.customer_id} to {file_path}")
    messagebox.showinfo("تم التصدير", f"{MESSAGES['exported']}\n{file_path}", parent=app)
