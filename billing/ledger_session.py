"""
Per-customer billing ledger: contracts, ledger entries, totals and the
add / edit / delete operations behind the billing tab.

The session never raises on backend failures. Every outcome the user should
see goes through ``notify(level, message)`` where ``level`` is ``"success"``
or ``"error"``; the Tk layer turns those into toasts.

Loads are split so they can run off the UI thread::

    ticket = session.begin_load()           # UI thread
    snapshot = session.fetch_snapshot(ticket)  # worker thread; resolves a pending identity first
    session.apply_snapshot(snapshot)        # UI thread; stale tickets are dropped
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from billing.dialog_state import DialogState, NoDialog
from core.app_logging import get_app_logger, get_trace_logger, log_ux_action_result, trace
from core.config import (
    DEBT_METHOD,
    ENTRY_KIND_DEBT,
    ENTRY_KIND_INVOICE,
    ENTRY_KIND_RECEIPT,
    MESSAGES,
)
from data.data_client import DataClient, DataClientError, TableQuery
from data.models import Contract, Customer, LedgerEntry
from utils.formatting import date_to_timestamp, now_iso, timestamp_date_part, today, to_number
from utils.validation import normalize_whitespace, optional_date, optional_text, parse_amount, positive_amount

logger = get_app_logger()
trace_logger = get_trace_logger()

NotifyCallback = Callable[[str, str], None]

ENTRY_KINDS = (ENTRY_KIND_INVOICE, ENTRY_KIND_RECEIPT)


@dataclass(frozen=True)
class ResolvedIdentity:
    customer_id: str | None
    customer_name: str | None
    path: str  # given | id | name | unresolved | pending


@dataclass(frozen=True)
class Totals:
    total_rent: float
    total_paid: float
    balance: float


@dataclass(frozen=True)
class LoadTicket:
    token: int
    customer_id: str | None
    customer_name: str | None
    needs_identity: bool = False


@dataclass
class LedgerSnapshot:
    token: int
    contracts: list[Contract] | None = None
    entries: list[LedgerEntry] | None = None
    contracts_path: str = "none"
    entries_path: str = "none"
    errors: list[DataClientError] = field(default_factory=list)
    identity: ResolvedIdentity | None = None


@dataclass
class EntryForm:
    amount: str = ""
    method: str = ""
    reference: str = ""
    notes: str = ""
    date: str = ""
    contract_number: str = ""


def compute_totals(contracts: list[Contract], entries: list[LedgerEntry]) -> Totals:
    total_rent = sum(to_number(c.total_rent) for c in contracts)
    total_paid = sum(to_number(e.amount) for e in entries)
    return Totals(total_rent, total_paid, max(0.0, total_rent - total_paid))


@trace
def resolve_identity(
    client: DataClient,
    customer_id: str | None,
    customer_name: str | None,
) -> ResolvedIdentity:
    """
    Fill in whichever of id / name is missing.

    An id alone is looked up by key; a name alone by case-insensitive match,
    taking the first customer when several share the name. Lookup failures
    leave the identity as given.
    """
    customer_id = normalize_whitespace(customer_id) or None
    customer_name = normalize_whitespace(customer_name) or None

    if customer_id and customer_name:
        return ResolvedIdentity(customer_id, customer_name, "given")

    if customer_id:
        result = client.table("customers").select("name").eq("id", customer_id).maybe_single().execute()
        if result.ok and result.data:
            return ResolvedIdentity(customer_id, result.data["name"] or None, "id")
        trace_logger.debug("Customer id %s not resolved: %s", customer_id, result.error)
    elif customer_name:
        result = (
            client.table("customers")
            .select("id")
            .ilike("name", customer_name)
            .order("name")
            .limit(1)
            .maybe_single()
            .execute()
        )
        if result.ok and result.data:
            return ResolvedIdentity(str(result.data["id"]), customer_name, "name")
        trace_logger.debug("Customer name %r not resolved: %s", customer_name, result.error)

    return ResolvedIdentity(customer_id, customer_name, "unresolved")


@trace
def load_customers(client: DataClient) -> list[Customer]:
    result = client.table("customers").select("*").order("name").execute()
    if not result.ok:
        raise result.error
    return [Customer.from_row(row) for row in result.data]


def _amount_text(value) -> str:
    number = to_number(value)
    if not number:
        return ""
    return str(int(number)) if number.is_integer() else str(number)


class LedgerSession:
    def __init__(
        self,
        client: DataClient,
        notify: NotifyCallback | None = None,
        reload: Callable[[], object] | None = None,
    ):
        self.client = client
        self.notify: NotifyCallback = notify or (lambda _level, _message: None)
        self._reload = reload
        self.customer_id: str | None = None
        self.customer_name: str | None = None
        self.identity_path = "unresolved"
        self.contracts: list[Contract] = []
        self.entries: list[LedgerEntry] = []
        self.contracts_path = "none"
        self.entries_path = "none"
        self.active_dialog: DialogState = NoDialog()
        self._generation = 0
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"<LedgerSession customer_id={self.customer_id!r} customer_name={self.customer_name!r}>"

    # -- identity -----------------------------------------------------------

    @trace
    def set_customer(
        self,
        customer_id: str | None = None,
        customer_name: str | None = None,
        resolve: bool = True,
    ) -> ResolvedIdentity:
        """
        Switch the ledger to another customer.

        With ``resolve=False`` the lookup is deferred to the next
        ``fetch_snapshot`` so it can run on the load worker.
        """
        if resolve:
            identity = resolve_identity(self.client, customer_id, customer_name)
        else:
            identity = ResolvedIdentity(
                normalize_whitespace(customer_id) or None,
                normalize_whitespace(customer_name) or None,
                "pending",
            )
        with self._lock:
            # In-flight loads for the previous customer become stale
            self._generation += 1
        self.customer_id = identity.customer_id
        self.customer_name = identity.customer_name
        self.identity_path = identity.path
        self.contracts = []
        self.entries = []
        self.close_dialog()
        return identity

    @property
    def has_customer(self) -> bool:
        return bool(self.customer_id or self.customer_name)

    # -- loading ------------------------------------------------------------

    def begin_load(self) -> LoadTicket:
        with self._lock:
            self._generation += 1
            token = self._generation
        return LoadTicket(token, self.customer_id, self.customer_name, self.identity_path == "pending")

    def _customer_query(self, table: str) -> TableQuery:
        query = self.client.table(table).select("*")
        if table == "customer_payments":
            return query.order("paid_at", desc=True)
        return query.order("Contract_Number")

    def _fetch_rows(self, table: str, name_column: str, ticket: LoadTicket) -> tuple[list[dict] | None, str, DataClientError | None]:
        rows: list[dict] = []
        path = "none"
        error: DataClientError | None = None

        if ticket.customer_id:
            result = self._customer_query(table).eq("customer_id", ticket.customer_id).execute()
            if result.ok:
                rows = result.data or []
                if rows:
                    path = "id"
            else:
                error = result.error

        if not rows and ticket.customer_name:
            result = self._customer_query(table).ilike(name_column, f"%{ticket.customer_name}%").execute()
            if result.ok:
                rows = result.data or []
                if rows:
                    path = "name"
            else:
                error = error or result.error

        # An empty answer is only trusted when no query in the chain failed
        if not rows and error is not None:
            return None, path, error
        return rows, path, None

    @trace
    def fetch_snapshot(self, ticket: LoadTicket) -> LedgerSnapshot:
        snapshot = LedgerSnapshot(token=ticket.token)
        if ticket.needs_identity:
            snapshot.identity = resolve_identity(self.client, ticket.customer_id, ticket.customer_name)
            ticket = LoadTicket(ticket.token, snapshot.identity.customer_id, snapshot.identity.customer_name)

        entry_rows, snapshot.entries_path, entries_error = self._fetch_rows("customer_payments", "customer_name", ticket)
        if entries_error is not None:
            snapshot.errors.append(entries_error)
        else:
            snapshot.entries = [LedgerEntry.from_row(r) for r in entry_rows]

        contract_rows, snapshot.contracts_path, contracts_error = self._fetch_rows("Contract", "Customer Name", ticket)
        if contracts_error is not None:
            snapshot.errors.append(contracts_error)
        else:
            snapshot.contracts = [Contract.from_row(r) for r in contract_rows]

        return snapshot

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._generation

    @trace
    def apply_snapshot(self, snapshot: LedgerSnapshot) -> bool:
        if not self.is_current(snapshot.token):
            trace_logger.debug("Discarding stale ledger snapshot %s", snapshot.token)
            return False

        if snapshot.identity is not None:
            self.customer_id = snapshot.identity.customer_id
            self.customer_name = snapshot.identity.customer_name
            self.identity_path = snapshot.identity.path
        if snapshot.entries is not None:
            self.entries = snapshot.entries
            self.entries_path = snapshot.entries_path
        if snapshot.contracts is not None:
            self.contracts = snapshot.contracts
            self.contracts_path = snapshot.contracts_path

        if snapshot.errors:
            for error in snapshot.errors:
                logger.error(f"Ledger load failed for {self.customer_name or self.customer_id}: {error}")
            self.notify("error", MESSAGES["load_failed"])
        return True

    @trace
    def load_data(self) -> bool:
        """Reload contracts and entries. True when both parts loaded."""
        snapshot = self.fetch_snapshot(self.begin_load())
        return self.apply_snapshot(snapshot) and not snapshot.errors

    def _after_write(self) -> None:
        if self._reload is not None:
            self._reload()
        else:
            self.load_data()

    # -- aggregates ---------------------------------------------------------

    @property
    def totals(self) -> Totals:
        return compute_totals(self.contracts, self.entries)

    @property
    def total_rent(self) -> float:
        return self.totals.total_rent

    @property
    def total_paid(self) -> float:
        return self.totals.total_paid

    @property
    def balance(self) -> float:
        return self.totals.balance

    def contract_numbers(self) -> list[str]:
        return [c.contract_number for c in self.contracts if c.contract_number]

    # -- dialogs ------------------------------------------------------------

    def open_dialog(self, state: DialogState) -> DialogState:
        """Make ``state`` the active dialog and return the one it replaces."""
        previous = self.active_dialog
        self.active_dialog = state
        return previous

    def close_dialog(self) -> None:
        self.active_dialog = NoDialog()

    def new_entry_form(self) -> EntryForm:
        numbers = self.contract_numbers()
        return EntryForm(date=today().isoformat(), contract_number=numbers[0] if numbers else "")

    def new_debt_form(self) -> EntryForm:
        return EntryForm(date=today().isoformat())

    def edit_form_for(self, entry: LedgerEntry) -> EntryForm:
        return EntryForm(
            amount=_amount_text(entry.amount),
            method=entry.method or "",
            reference=entry.reference or "",
            notes=entry.notes or "",
            date=timestamp_date_part(entry.paid_at),
            contract_number=entry.contract_number or "",
        )

    # -- mutations ----------------------------------------------------------

    def _invalid(self, message: str) -> bool:
        self.notify("error", message)
        return False

    def _paid_at(self, date_text: str, default_now: bool) -> str | None:
        chosen: date | None = optional_date(date_text)
        if chosen is not None:
            return date_to_timestamp(chosen)
        return now_iso() if default_now else None

    def _write(self, action: str, query: TableQuery, success_message: str, failure_message: str) -> bool:
        result = query.execute()
        if not result.ok or not result.data:
            logger.error(f"{action} failed for {self.customer_name or self.customer_id}: {result.error}")
            log_ux_action_result(action, False, str(result.error or "no rows affected"))
            self.notify("error", failure_message)
            return False

        log_ux_action_result(action, True, f"customer={self.customer_name or self.customer_id}")
        self.notify("success", success_message)
        self.close_dialog()
        self._after_write()
        return True

    @trace
    def add_entry(self, kind: str, form: EntryForm) -> bool:
        if kind not in ENTRY_KINDS:
            raise ValueError(f"Unsupported entry kind: {kind}")
        if not self.has_customer:
            return self._invalid(MESSAGES["no_customer"])

        contract_number = normalize_whitespace(form.contract_number)
        if not normalize_whitespace(form.amount) or not contract_number:
            return self._invalid(MESSAGES["incomplete"])
        amount = parse_amount(form.amount)
        if amount is None or not amount > 0:
            return self._invalid(MESSAGES["amount_positive"])
        try:
            paid_at = self._paid_at(form.date, default_now=True)
        except ValueError as exc:
            return self._invalid(str(exc))

        payload = {
            "customer_id": self.customer_id,
            "customer_name": self.customer_name or "",
            "contract_number": contract_number,
            "amount": amount,
            "method": optional_text(form.method),
            "reference": optional_text(form.reference),
            "notes": optional_text(form.notes),
            "paid_at": paid_at,
            "entry_type": kind,
        }
        query = self.client.table("customer_payments").insert(payload).select()
        return self._write(f"Add {kind.title()}", query, MESSAGES["saved"], MESSAGES["save_failed"])

    @trace
    def add_debt(self, form: EntryForm) -> bool:
        if not self.has_customer:
            return self._invalid(MESSAGES["no_customer"])
        try:
            amount = positive_amount(form.amount, MESSAGES["amount_required"], MESSAGES["amount_positive"])
            paid_at = self._paid_at(form.date, default_now=True)
        except ValueError as exc:
            return self._invalid(str(exc))

        payload = {
            "customer_id": self.customer_id,
            "customer_name": self.customer_name or "",
            "contract_number": None,
            "amount": amount,
            "method": DEBT_METHOD,
            "reference": None,
            "notes": optional_text(form.notes),
            "paid_at": paid_at,
            "entry_type": ENTRY_KIND_DEBT,
        }
        query = self.client.table("customer_payments").insert(payload).select()
        return self._write("Add Debt", query, MESSAGES["debt_added"], MESSAGES["save_failed"])

    @trace
    def save_receipt_edit(self, entry: LedgerEntry, form: EntryForm) -> bool:
        amount = parse_amount(form.amount)
        if amount is None or not amount > 0:
            return self._invalid(MESSAGES["amount_positive"])
        try:
            paid_at = self._paid_at(form.date, default_now=False)
        except ValueError as exc:
            return self._invalid(str(exc))

        # Entry kind and contract number are fixed once recorded
        payload = {
            "amount": amount,
            "method": optional_text(form.method),
            "reference": optional_text(form.reference),
            "notes": optional_text(form.notes),
            "paid_at": paid_at,
        }
        query = self.client.table("customer_payments").update(payload).eq("id", entry.id).select()
        return self._write("Edit Receipt", query, MESSAGES["receipt_updated"], MESSAGES["save_failed"])

    @trace
    def delete_entry(self, entry: LedgerEntry, confirm: Callable[[], bool]) -> bool:
        if not confirm():
            return False
        query = self.client.table("customer_payments").delete().eq("id", entry.id)
        return self._write("Delete Entry", query, MESSAGES["deleted"], MESSAGES["delete_failed"])
