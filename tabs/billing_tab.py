import tkinter as tk
from tkinter import ttk

from core.app_logging import trace
from core.config import BUTTON_LABELS, COLUMN_ORDER, FONTS
from ui.ui_helpers import build_tree


@trace
def build_billing_tab(app, frame):
    frame.columnconfigure(0, weight=1)
    frame.rowconfigure(4, weight=1)

    picker_row = ttk.Frame(frame)
    picker_row.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 0))
    picker_row.columnconfigure(3, weight=1)
    ttk.Button(picker_row, text=BUTTON_LABELS["refresh"], command=app.reload_ledger).grid(row=0, column=0, sticky="w")
    ttk.Button(picker_row, text="بحث عن عميل", command=app._open_ledger_customer_picker).grid(row=0, column=1, sticky="w", padx=6)
    ttk.Button(picker_row, text=BUTTON_LABELS["open"], command=app._open_ledger_from_entry).grid(row=0, column=2, sticky="w")
    app.ledger_customer_entry = ttk.Entry(picker_row, width=36, justify="right")
    app.ledger_customer_entry.grid(row=0, column=4, sticky="e", padx=6)
    app.ledger_customer_entry.bind("<Return>", lambda _e: app._open_ledger_from_entry())
    ttk.Label(picker_row, text=":اسم العميل").grid(row=0, column=5, sticky="e")

    header = ttk.Frame(frame)
    header.grid(row=1, column=0, sticky="ew", padx=10, pady=(12, 0))
    header.columnconfigure(0, weight=1)
    app.ledger_title_label = ttk.Label(header, text="", font=FONTS["title"])
    app.ledger_title_label.grid(row=0, column=1, sticky="e")

    actions = ttk.Frame(header)
    actions.grid(row=0, column=0, sticky="w")
    ttk.Button(actions, text=BUTTON_LABELS["print_statement"], command=app.print_statement).pack(side="left")
    ttk.Button(actions, text=BUTTON_LABELS["export_xlsx"], command=app.export_ledger).pack(side="left", padx=4)
    ttk.Button(actions, text=BUTTON_LABELS["add_debt"], command=app.open_add_debt).pack(side="left", padx=4)
    ttk.Button(actions, text=BUTTON_LABELS["add_invoice"], command=app.open_add_invoice).pack(side="left", padx=4)
    ttk.Button(actions, text=BUTTON_LABELS["add_receipt"], command=app.open_add_receipt).pack(side="left", padx=4)

    totals = ttk.Frame(frame)
    totals.grid(row=2, column=0, sticky="ew", padx=10, pady=(12, 0))
    for i in range(3):
        totals.columnconfigure(i, weight=1)
    app.ledger_total_labels = {}
    for i, (key, caption) in enumerate((("balance", "المتبقي"), ("paid", "إجمالي المدفوع"), ("rent", "إجمالي العقود"))):
        box = ttk.LabelFrame(totals, text=caption)
        box.grid(row=0, column=i, sticky="ew", padx=4)
        label = ttk.Label(box, text="", font=FONTS["heading"])
        label.pack(anchor="e", padx=8, pady=6)
        app.ledger_total_labels[key] = label

    contracts_box = ttk.LabelFrame(frame, text="العقود")
    contracts_box.grid(row=3, column=0, sticky="ew", padx=10, pady=(12, 0))
    contracts_box.columnconfigure(0, weight=1)
    app.ledger_contract_tree = build_tree(contracts_box, "ledger_contracts", COLUMN_ORDER["ledger_contracts"], height=5)
    app.ledger_contract_tree.grid(row=0, column=0, sticky="ew", padx=6, pady=6)
    app.ledger_contracts_empty = ttk.Label(contracts_box, text="")
    app.ledger_contracts_empty.grid(row=1, column=0, sticky="e", padx=6)

    entries_box = ttk.LabelFrame(frame, text="الدفعات والفواتير")
    entries_box.grid(row=4, column=0, sticky="nsew", padx=10, pady=(12, 0))
    entries_box.columnconfigure(0, weight=1)
    entries_box.rowconfigure(0, weight=1)
    app.ledger_entry_tree = build_tree(entries_box, "ledger_entries", COLUMN_ORDER["ledger_entries"], height=10)
    app.ledger_entry_tree.grid(row=0, column=0, sticky="nsew", padx=(6, 0), pady=6)
    entries_vsb = ttk.Scrollbar(entries_box, orient="vertical", command=app.ledger_entry_tree.yview)
    app.ledger_entry_tree.configure(yscrollcommand=entries_vsb.set)
    entries_vsb.grid(row=0, column=1, sticky="ns", pady=6)
    app.ledger_entry_tree.bind("<Double-1>", lambda _e: app.open_edit_selected_entry())
    app.ledger_entries_empty = ttk.Label(entries_box, text="")
    app.ledger_entries_empty.grid(row=1, column=0, sticky="e", padx=6)

    entry_btns = ttk.Frame(frame)
    entry_btns.grid(row=5, column=0, sticky="ew", padx=10, pady=10)
    ttk.Button(entry_btns, text=BUTTON_LABELS["delete"], command=app.delete_selected_entry).pack(side="left")
    ttk.Button(entry_btns, text=BUTTON_LABELS["edit_receipt"], command=app.open_edit_selected_entry).pack(side="left", padx=6)
    ttk.Button(entry_btns, text=BUTTON_LABELS["print_receipt"], command=app.print_selected_receipt).pack(side="left")

    app.ledger_entry_menu = tk.Menu(app, tearoff=0)
    app.ledger_entry_menu.add_command(label=BUTTON_LABELS["print_receipt"], command=app.print_selected_receipt)
    app.ledger_entry_menu.add_command(label=BUTTON_LABELS["edit_receipt"], command=app.open_edit_selected_entry)
    app.ledger_entry_menu.add_separator()
    app.ledger_entry_menu.add_command(label=BUTTON_LABELS["delete"], command=app.delete_selected_entry)
    app.ledger_entry_tree.bind("<Button-3>", app._show_ledger_entry_menu)
