import tkinter as tk
from tkinter import ttk

from billing.contract_gallery import status_color
from core.app_logging import trace
from core.config import (
    BUTTON_LABELS,
    CARD_WRAP_LENGTH,
    EMPTY_PLACEHOLDER,
    FONTS,
    MESSAGES,
    PRICE_COLOR,
    STATUS_BADGE_COLORS,
)
from utils.formatting import format_date, format_money


@trace
def build_contracts_tab(app, frame):
    frame.columnconfigure(0, weight=1)
    frame.rowconfigure(1, weight=1)

    top = ttk.Frame(frame)
    top.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 0))
    top.columnconfigure(2, weight=1)
    ttk.Button(top, text=BUTTON_LABELS["new_contract"], state="disabled").grid(row=0, column=0, sticky="w")
    ttk.Button(top, text=BUTTON_LABELS["refresh"], command=app.refresh_contracts).grid(row=0, column=1, sticky="w", padx=6)
    app.contract_search = ttk.Entry(top, width=40, justify="right")
    app.contract_search.grid(row=0, column=3, sticky="e", padx=6)
    app.contract_search.bind("<KeyRelease>", app._on_contract_search_keyrelease)
    ttk.Label(top, text=":بحث في العقود").grid(row=0, column=4, sticky="e")

    wrap = ttk.Frame(frame)
    wrap.grid(row=1, column=0, sticky="nsew", padx=10, pady=10)
    wrap.columnconfigure(0, weight=1)
    wrap.rowconfigure(0, weight=1)

    canvas = tk.Canvas(wrap, highlightthickness=0)
    canvas.grid(row=0, column=0, sticky="nsew")
    vsb = ttk.Scrollbar(wrap, orient="vertical", command=canvas.yview)
    vsb.grid(row=0, column=1, sticky="ns")
    canvas.configure(yscrollcommand=vsb.set)

    app.contract_cards_frame = ttk.Frame(canvas)
    window_id = canvas.create_window((0, 0), window=app.contract_cards_frame, anchor="nw")
    app.contract_cards_frame.bind("<Configure>", lambda _e: canvas.configure(scrollregion=canvas.bbox("all")))
    canvas.bind("<Configure>", lambda e: canvas.itemconfigure(window_id, width=e.width))
    app.contract_canvas = canvas

    app.contract_empty_label = ttk.Label(frame, text=MESSAGES["no_contracts_match"], font=FONTS["heading"])


def build_contract_card(parent, contract, on_view, on_print, on_open_ledger):
    """One gallery card; returns the card frame for the caller to place."""
    card = tk.Frame(parent, borderwidth=1, relief="solid", padx=12, pady=10, background="white")
    card.columnconfigure(0, weight=1)

    header = tk.Frame(card, background="white")
    header.grid(row=0, column=0, sticky="ew")
    header.columnconfigure(1, weight=1)
    colors = STATUS_BADGE_COLORS[status_color(contract.status)]
    tk.Label(
        header,
        text=contract.status or EMPTY_PLACEHOLDER,
        background=colors["background"],
        foreground=colors["foreground"],
        font=FONTS["card_label"],
        padx=8,
        pady=2,
    ).grid(row=0, column=0, sticky="w")
    tk.Label(header, text=contract.contract_number, font=FONTS["card_title"], background="white").grid(row=0, column=1, sticky="e")
    tk.Label(
        card,
        text=contract.customer_name or EMPTY_PLACEHOLDER,
        font=FONTS["card_value"],
        background="white",
        wraplength=CARD_WRAP_LENGTH,
        justify="right",
    ).grid(row=1, column=0, sticky="e")

    fields = (
        ("نوع الإعلان", contract.ad_type or EMPTY_PLACEHOLDER),
        ("تاريخ البداية", format_date(contract.start_date, EMPTY_PLACEHOLDER)),
        ("تاريخ النهاية", format_date(contract.end_date, EMPTY_PLACEHOLDER)),
        ("اللوحات", f"{len(contract.billboards)} لوحة"),
    )
    body = tk.Frame(card, background="white")
    body.grid(row=2, column=0, sticky="ew", pady=(8, 0))
    body.columnconfigure(0, weight=1)
    for i, (label, value) in enumerate(fields):
        tk.Label(body, text=f"{label}:", font=FONTS["card_label"], background="white").grid(row=i, column=1, sticky="e")
        tk.Label(body, text=value, font=FONTS["card_value"], background="white").grid(row=i, column=0, sticky="e", padx=(0, 6))
    tk.Label(
        card,
        text=format_money(contract.total_rent),
        font=FONTS["card_price"],
        foreground=PRICE_COLOR,
        background="white",
    ).grid(row=3, column=0, sticky="e", pady=(6, 6))

    btns = tk.Frame(card, background="white")
    btns.grid(row=4, column=0, sticky="ew")
    ttk.Button(btns, text=BUTTON_LABELS["view"], command=lambda: on_view(contract)).pack(side="right")
    ttk.Button(btns, text=BUTTON_LABELS["edit"], state="disabled").pack(side="right", padx=4)
    ttk.Button(btns, text=BUTTON_LABELS["print"], command=lambda: on_print(contract)).pack(side="right")
    ttk.Button(btns, text=BUTTON_LABELS["open_ledger"], command=lambda: on_open_ledger(contract)).pack(side="left")
    return card
