from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable

from billing.statement_documents import build_contract_view
from core.app_logging import trace
from core.config import BUTTON_LABELS, FONTS
from data.models import Contract
from ui.ui_helpers import center_popup


@trace
def open_contract_print_dialog(
    parent: tk.Misc,
    contract: Contract,
    on_print: Callable[[Contract], bool],
) -> tk.Toplevel:
    """Preview of the printable contract sheet; the print button hands the contract to ``on_print``."""
    view = build_contract_view(contract)

    popup = tk.Toplevel(parent)
    popup.title(view.details.title)
    popup.transient(parent)
    popup.grab_set()
    center_popup(popup, parent, 600, 460)

    main = ttk.Frame(popup, padding="18")
    main.pack(fill="both", expand=True)
    main.columnconfigure(0, weight=1)

    ttk.Label(main, text=view.details.title, font=FONTS["heading"]).grid(row=0, column=0, columnspan=2, sticky="e", pady=(0, 10))
    for i, (label, value) in enumerate(view.details.rows, start=1):
        ttk.Label(main, text=label, font=FONTS["label_bold"]).grid(row=i, column=1, sticky="e", padx=(12, 0), pady=2)
        ttk.Label(main, text=value, font=FONTS["base"]).grid(row=i, column=0, sticky="e", pady=2)

    row = len(view.details.rows) + 1
    if view.billboards:
        names = "، ".join(name for name, _location, _size in view.billboards)
        ttk.Label(main, text=f"اللوحات: {names}", font=FONTS["base"], wraplength=520, justify="right").grid(
            row=row, column=0, columnspan=2, sticky="e", pady=(10, 0)
        )
        row += 1

    def _print() -> None:
        if on_print(contract):
            popup.destroy()

    btns = ttk.Frame(main)
    btns.grid(row=row, column=0, columnspan=2, sticky="ew", pady=(16, 0))
    ttk.Button(btns, text=BUTTON_LABELS["cancel"], command=popup.destroy).pack(side="left")
    ttk.Button(btns, text=BUTTON_LABELS["print"], command=_print).pack(side="left", padx=8)
    return popup
