from __future__ import annotations

from typing import Iterable

from core.app_logging import get_app_logger, trace
from core.config import STATUS_KEYS
from data.data_client import DataClient, DataClientError
from data.models import Billboard, Contract

logger = get_app_logger()

STATUS_COLORS = {
    "active": "green",
    "expired": "red",
    "pending": "yellow",
}


def status_color(status: str | None) -> str:
    key = STATUS_KEYS.get(str(status or "").strip().lower())
    return STATUS_COLORS.get(key, "gray")


def contract_matches(contract: Contract, term: str) -> bool:
    needle = term.casefold()
    haystacks = (contract.customer_name, contract.contract_number, contract.ad_type)
    return any(needle in str(value or "").casefold() for value in haystacks)


def filter_contracts(contracts: Iterable[Contract], term: str | None) -> list[Contract]:
    """Contracts whose customer name, number or ad type contains ``term``, ignoring case."""
    contracts = list(contracts)
    if not term:
        return contracts
    return [c for c in contracts if contract_matches(c, term)]


class ContractGallery:
    """Search state of the contract gallery. ``visible`` is recomputed on every change."""

    def __init__(self, contracts: Iterable[Contract] = ()):
        self.contracts: list[Contract] = list(contracts)
        self.search_term = ""
        self.visible: list[Contract] = list(self.contracts)

    def set_contracts(self, contracts: Iterable[Contract]) -> list[Contract]:
        self.contracts = list(contracts)
        return self._refilter()

    def set_search_term(self, term: str) -> list[Contract]:
        self.search_term = term or ""
        return self._refilter()

    def _refilter(self) -> list[Contract]:
        self.visible = filter_contracts(self.contracts, self.search_term)
        return self.visible

    @property
    def is_empty(self) -> bool:
        return not self.visible


@trace
def load_gallery_contracts(client: DataClient) -> list[Contract]:
    """Contracts with their billboards, ordered by contract number."""
    contracts = client.table("Contract").select("*").order("Contract_Number").execute()
    if not contracts.ok:
        raise contracts.error
    links = client.table("contract_billboards").select("*").execute()
    billboards = client.table("billboards").select("*").execute()
    if not links.ok or not billboards.ok:
        raise links.error or billboards.error or DataClientError("billboards unavailable")

    by_id = {str(row["id"]): Billboard.from_row(row) for row in billboards.data}
    per_contract: dict[str, list[Billboard]] = {}
    for link in links.data:
        billboard = by_id.get(str(link["billboard_id"]))
        if billboard is not None:
            per_contract.setdefault(str(link["contract_number"]), []).append(billboard)

    return [
        Contract.from_row(row, per_contract.get(str(row["Contract_Number"]), []))
        for row in contracts.data
    ]
