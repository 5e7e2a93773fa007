from .billing_tab import build_billing_tab
from .contracts_tab import build_contract_card, build_contracts_tab

__all__ = [
    "build_billing_tab",
    "build_contract_card",
    "build_contracts_tab",
]
