from __future__ import annotations

from typing import Callable, Iterable
import tkinter as tk
from tkinter import ttk, messagebox
from core.app_logging import trace
from core.config import BUTTON_LABELS
from data.models import Customer
from ui.ui_helpers import center_popup, clear_tree


def filter_customers(customers: Iterable[Customer], query: str, normalize: Callable[[str], str]) -> list[Customer]:
    customers = list(customers)
    needle = normalize(query).casefold()
    if not needle:
        return customers
    return [
        customer
        for customer in customers
        if needle in customer.name.casefold()
        or needle in (customer.phone or "").casefold()
        or needle in (customer.company or "").casefold()
    ]


@trace
def open_customer_picker(
    parent: tk.Misc,
    customers: Iterable[Customer],
    normalize: Callable[[str], str],
    on_select: Callable[[Customer], None],
) -> None:
    customers = list(customers)
    if not customers:
        messagebox.showinfo("لا يوجد عملاء", "لا يوجد عملاء مسجلون.", parent=parent)
        return

    picker = tk.Toplevel(parent)
    picker.title("اختيار عميل")
    picker.minsize(560, 360)
    picker.transient(parent)
    picker.grab_set()
    center_popup(picker, parent, 680, 440)
    picker.columnconfigure(0, weight=1)
    picker.rowconfigure(1, weight=1)

    top = ttk.Frame(picker)
    top.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 8))
    top.columnconfigure(0, weight=1)
    ttk.Label(top, text=":بحث").grid(row=0, column=1, sticky="e", padx=(8, 0))
    search_entry = ttk.Entry(top, justify="right")
    search_entry.grid(row=0, column=0, sticky="ew")
    search_entry.focus()

    cols = ("company", "phone", "name")
    tree = ttk.Treeview(picker, columns=cols, show="headings", height=12, selectmode="browse")
    headings = {"name": "الاسم", "phone": "الهاتف", "company": "الشركة"}
    widths = {"name": 260, "phone": 160, "company": 200}
    for c in cols:
        tree.heading(c, text=headings[c], anchor="center")
        tree.column(c, width=widths[c], anchor="center")
    tree.grid(row=1, column=0, sticky="nsew", padx=12)

    by_iid: dict[str, Customer] = {}

    def _populate(rows: list[Customer]) -> None:
        clear_tree(tree)
        by_iid.clear()
        for customer in rows:
            iid = tree.insert("", "end", values=(customer.company or "", customer.phone or "", customer.name))
            by_iid[iid] = customer
        children = tree.get_children()
        if children:
            tree.selection_set(children[0])
            tree.focus(children[0])

    def _refresh_results(_event=None) -> None:
        _populate(filter_customers(customers, search_entry.get(), normalize))

    def _select_customer(_event=None) -> None:
        sel = tree.selection()
        if not sel:
            messagebox.showwarning("لم يتم الاختيار", "اختر عميلاً أولاً.", parent=picker)
            return
        customer = by_iid.get(sel[0])
        if customer is None:
            return
        picker.destroy()
        on_select(customer)

    def _on_tree_double_click(event) -> None:
        if tree.identify("region", event.x, event.y) != "cell":
            return
        row_id = tree.identify_row(event.y)
        if not row_id:
            return
        tree.selection_set(row_id)
        _select_customer()

    search_entry.bind("<KeyRelease>", _refresh_results)
    search_entry.bind("<Return>", _select_customer)
    tree.bind("<Double-1>", _on_tree_double_click)
    tree.bind("<Return>", _select_customer)

    btns = ttk.Frame(picker)
    btns.grid(row=2, column=0, sticky="ew", padx=12, pady=12)
    ttk.Button(btns, text=BUTTON_LABELS["open"], command=_select_customer).pack(side="left")
    ttk.Button(btns, text=BUTTON_LABELS["cancel"], command=picker.destroy).pack(side="left", padx=(8, 0))

    _populate(customers)
