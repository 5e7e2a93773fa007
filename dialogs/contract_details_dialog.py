from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable

from core.app_logging import trace
from core.config import BUTTON_LABELS, EMPTY_PLACEHOLDER, FONTS
from data.models import Contract
from ui.ui_helpers import center_popup
from utils.formatting import format_date, format_money


@trace
def show_contract_details(
    parent: tk.Misc,
    contract: Contract,
    on_print: Callable[[Contract], None] | None = None,
) -> tk.Toplevel:
    popup = tk.Toplevel(parent)
    popup.title(f"تفاصيل العقد {contract.contract_number}")
    popup.transient(parent)
    popup.grab_set()
    center_popup(popup, parent, 640, 520)

    main = ttk.Frame(popup, padding="18")
    main.pack(fill="both", expand=True)
    main.columnconfigure(0, weight=1)

    ttk.Label(main, text=contract.contract_number, font=FONTS["title"]).grid(row=0, column=0, columnspan=2, sticky="e")

    details = [
        ("العميل", contract.customer_name or EMPTY_PLACEHOLDER),
        ("الهاتف", contract.phone or EMPTY_PLACEHOLDER),
        ("نوع الإعلان", contract.ad_type or EMPTY_PLACEHOLDER),
        ("تاريخ البداية", format_date(contract.start_date, EMPTY_PLACEHOLDER)),
        ("تاريخ النهاية", format_date(contract.end_date, EMPTY_PLACEHOLDER)),
        ("قيمة الإيجار", format_money(contract.total_rent)),
        ("الحالة", contract.status or EMPTY_PLACEHOLDER),
    ]
    for i, (label, value) in enumerate(details, start=1):
        ttk.Label(main, text=label, font=FONTS["label_bold"]).grid(row=i, column=1, sticky="e", padx=(12, 0), pady=3)
        ttk.Label(main, text=value, font=FONTS["base"]).grid(row=i, column=0, sticky="e", pady=3)

    row = len(details) + 1
    ttk.Label(main, text="اللوحات", font=FONTS["heading"]).grid(row=row, column=0, columnspan=2, sticky="e", pady=(14, 6))
    row += 1

    cols = ("size", "location", "name")
    tree = ttk.Treeview(main, columns=cols, show="headings", height=5)
    for col, heading, width in (("size", "المقاس", 110), ("location", "الموقع", 240), ("name", "اللوحة", 200)):
        tree.heading(col, text=heading, anchor="center")
        tree.column(col, width=width, anchor="center")
    for billboard in contract.billboards:
        tree.insert("", "end", values=(billboard.size or "", billboard.location or "", billboard.name))
    tree.grid(row=row, column=0, columnspan=2, sticky="nsew")
    main.rowconfigure(row, weight=1)
    row += 1

    btns = ttk.Frame(main)
    btns.grid(row=row, column=0, columnspan=2, sticky="ew", pady=(12, 0))
    ttk.Button(btns, text=BUTTON_LABELS["close"], command=popup.destroy).pack(side="left")
    if on_print is not None:
        ttk.Button(btns, text=BUTTON_LABELS["print"], command=lambda: on_print(contract)).pack(side="left", padx=8)
    return popup
