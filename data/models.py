from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from utils.formatting import to_number


def _text(row: Mapping[str, Any], key: str) -> str | None:
    value = row.get(key)
    if value is None:
        return None
    return str(value)


@dataclass
class Customer:
    id: str
    name: str
    phone: str | None = None
    company: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Customer":
        return cls(
            id=str(row["id"]),
            name=str(row.get("name") or ""),
            phone=_text(row, "phone"),
            company=_text(row, "company"),
        )


@dataclass
class Billboard:
    id: str
    name: str
    location: str | None = None
    size: str | None = None
    image: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Billboard":
        return cls(
            id=str(row["id"]),
            name=str(row.get("name") or ""),
            location=_text(row, "location"),
            size=_text(row, "size"),
            image=_text(row, "image"),
        )


@dataclass
class Contract:
    contract_number: str
    customer_name: str | None = None
    customer_id: str | None = None
    ad_type: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    total_rent: Any = None
    status: str | None = None
    phone: str | None = None
    billboards: list[Billboard] = field(default_factory=list)

    @property
    def rent_value(self) -> float:
        return to_number(self.total_rent)

    @classmethod
    def from_row(cls, row: Mapping[str, Any], billboards: list[Billboard] | None = None) -> "Contract":
        return cls(
            contract_number=str(row.get("Contract_Number") or ""),
            customer_name=_text(row, "Customer Name"),
            customer_id=_text(row, "customer_id"),
            ad_type=_text(row, "Ad Type"),
            start_date=_text(row, "Start Date"),
            end_date=_text(row, "End Date"),
            total_rent=row.get("Total Rent"),
            status=_text(row, "status"),
            phone=_text(row, "Phone"),
            billboards=list(billboards or []),
        )


@dataclass
class LedgerEntry:
    id: str
    customer_name: str
    customer_id: str | None = None
    contract_number: str | None = None
    amount: Any = None
    method: str | None = None
    reference: str | None = None
    notes: str | None = None
    paid_at: str | None = None
    entry_type: str | None = None

    @property
    def amount_value(self) -> float:
        return to_number(self.amount)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "LedgerEntry":
        return cls(
            id=str(row["id"]),
            customer_name=str(row.get("customer_name") or ""),
            customer_id=_text(row, "customer_id"),
            contract_number=_text(row, "contract_number"),
            amount=row.get("amount"),
            method=_text(row, "method"),
            reference=_text(row, "reference"),
            notes=_text(row, "notes"),
            paid_at=_text(row, "paid_at"),
            entry_type=_text(row, "entry_type"),
        )
