"""Which ledger dialog is open. Exactly one state is active at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from data.models import LedgerEntry


@dataclass(frozen=True)
class NoDialog:
    pass


@dataclass(frozen=True)
class AddEntryDialog:
    kind: str


@dataclass(frozen=True)
class EditReceiptDialog:
    entry: LedgerEntry


@dataclass(frozen=True)
class AddDebtDialog:
    pass


DialogState = Union[NoDialog, AddEntryDialog, EditReceiptDialog, AddDebtDialog]


def is_open(state: DialogState) -> bool:
    return not isinstance(state, NoDialog)
