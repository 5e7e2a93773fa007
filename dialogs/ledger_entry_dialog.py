"""
Entry forms for the billing ledger.

All three dialogs share one layout and hand an ``EntryForm`` to
``on_submit``; the window closes only when ``on_submit`` returns True.
Each function returns its Toplevel so the caller can close it when a
different dialog replaces it.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable

from billing.ledger_session import EntryForm
from core.app_logging import trace
from core.config import BUTTON_LABELS, DEBT_METHOD, ENTRY_KIND_INVOICE, FONTS, PAYMENT_METHODS
from ui.ui_helpers import center_popup, create_date_input, get_text_value, make_optional_date_clear_on_blur

SubmitCallback = Callable[[EntryForm], bool]


def _entry_form_window(
    parent: tk.Misc,
    title: str,
    form: EntryForm,
    on_submit: SubmitCallback,
    date_entry_cls: type | None,
    contract_numbers: list[str] | None = None,
    fixed_contract: str | None = None,
    methods: list[str] | None = None,
    fixed_method: str | None = None,
    show_reference: bool = True,
    optional_date: bool = False,
) -> tk.Toplevel:
    base_font = FONTS["base"]
    popup = tk.Toplevel(parent)
    popup.title(title)
    popup.resizable(True, True)
    popup.transient(parent)
    popup.grab_set()
    center_popup(popup, parent, 560, 460)

    main = ttk.Frame(popup, padding="18")
    main.pack(fill="both", expand=True)
    main.columnconfigure(0, weight=1)
    main.columnconfigure(1, minsize=140)

    ttk.Label(main, text=title, font=FONTS["heading"]).grid(row=0, column=0, columnspan=2, sticky="e", pady=(0, 12))
    row = 1

    def _label(text: str) -> None:
        ttk.Label(main, text=text, font=base_font).grid(row=row, column=1, sticky="e", padx=(10, 0), pady=(0, 8))

    contract_combo = None
    if contract_numbers is not None:
        _label("رقم العقد")
        contract_combo = ttk.Combobox(main, state="readonly", values=contract_numbers, font=base_font)
        contract_combo.set(form.contract_number)
        contract_combo.grid(row=row, column=0, sticky="ew", pady=(0, 8))
        row += 1
    elif fixed_contract is not None:
        _label("رقم العقد")
        ttk.Label(main, text=fixed_contract, font=base_font).grid(row=row, column=0, sticky="e", pady=(0, 8))
        row += 1

    _label("المبلغ")
    amount_entry = ttk.Entry(main, font=base_font, justify="right")
    amount_entry.insert(0, form.amount)
    amount_entry.grid(row=row, column=0, sticky="ew", pady=(0, 8), ipady=4)
    amount_entry.focus()
    row += 1

    method_combo = None
    _label("طريقة الدفع")
    if fixed_method is not None:
        ttk.Label(main, text=fixed_method, font=base_font).grid(row=row, column=0, sticky="e", pady=(0, 8))
    else:
        method_combo = ttk.Combobox(main, values=methods or PAYMENT_METHODS, font=base_font)
        method_combo.set(form.method)
        method_combo.grid(row=row, column=0, sticky="ew", pady=(0, 8))
    row += 1

    reference_entry = None
    if show_reference:
        _label("المرجع")
        reference_entry = ttk.Entry(main, font=base_font, justify="right")
        reference_entry.insert(0, form.reference)
        reference_entry.grid(row=row, column=0, sticky="ew", pady=(0, 8), ipady=4)
        row += 1

    _label("التاريخ")
    date_wrap = ttk.Frame(main)
    date_wrap.grid(row=row, column=0, sticky="e", pady=(0, 8))
    date_input = create_date_input(date_wrap, width=14, default_iso=form.date or None, date_entry_cls=date_entry_cls)
    date_input.pack(side="right")
    if optional_date:
        make_optional_date_clear_on_blur(date_input, date_entry_cls=date_entry_cls)
    row += 1

    _label("ملاحظات")
    notes_text = tk.Text(main, height=4, font=base_font)
    notes_text.insert("1.0", form.notes)
    notes_text.grid(row=row, column=0, sticky="nsew", pady=(0, 12))
    main.rowconfigure(row, weight=1)
    row += 1

    def on_save() -> None:
        submitted = EntryForm(
            amount=amount_entry.get().strip(),
            method=method_combo.get().strip() if method_combo is not None else (fixed_method or ""),
            reference=reference_entry.get() if reference_entry is not None else "",
            notes=get_text_value(notes_text),
            date=date_input.get().strip(),
            contract_number=contract_combo.get().strip() if contract_combo is not None else form.contract_number,
        )
        if on_submit(submitted) and popup.winfo_exists():
            popup.destroy()

    amount_entry.bind("<Return>", lambda _e: on_save())

    btns = ttk.Frame(main)
    btns.grid(row=row, column=0, columnspan=2, sticky="ew")
    btns.columnconfigure(0, weight=1)
    btns.columnconfigure(1, weight=1)
    ttk.Button(btns, text=BUTTON_LABELS["cancel"], command=popup.destroy).grid(row=0, column=0, sticky="ew", padx=(0, 6), ipady=6)
    ttk.Button(btns, text=BUTTON_LABELS["save"], command=on_save).grid(row=0, column=1, sticky="ew", padx=(6, 0), ipady=6)
    return popup


@trace
def open_add_entry_dialog(
    parent: tk.Misc,
    kind: str,
    form: EntryForm,
    contract_numbers: list[str],
    on_submit: SubmitCallback,
    date_entry_cls: type | None = None,
) -> tk.Toplevel:
    title = "إضافة فاتورة" if kind == ENTRY_KIND_INVOICE else "إضافة إيصال"
    return _entry_form_window(
        parent,
        title,
        form,
        on_submit,
        date_entry_cls,
        contract_numbers=contract_numbers,
    )


@trace
def open_debt_dialog(
    parent: tk.Misc,
    form: EntryForm,
    on_submit: SubmitCallback,
    date_entry_cls: type | None = None,
) -> tk.Toplevel:
    return _entry_form_window(
        parent,
        "إضافة دين سابق",
        form,
        on_submit,
        date_entry_cls,
        fixed_method=DEBT_METHOD,
        show_reference=False,
    )


@trace
def open_edit_receipt_dialog(
    parent: tk.Misc,
    form: EntryForm,
    on_submit: SubmitCallback,
    date_entry_cls: type | None = None,
) -> tk.Toplevel:
    return _entry_form_window(
        parent,
        "تعديل الإيصال",
        form,
        on_submit,
        date_entry_cls,
        fixed_contract=form.contract_number or None,
        optional_date=True,
    )
