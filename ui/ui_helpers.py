from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from core.config import get_column_config
from utils.formatting import parse_ymd, today
from utils.validation import normalize_whitespace


def create_date_input(
    parent: tk.Widget,
    width: int,
    default_iso: str | None = None,
    date_entry_cls: type | None = None,
):
    if date_entry_cls is not None:
        picker = date_entry_cls(parent, width=width, date_pattern="yyyy-mm-dd")
        parsed = parse_ymd(default_iso) if default_iso else None
        if parsed:
            picker.set_date(parsed)
        else:
            picker.delete(0, tk.END)
        return picker

    plain = ttk.Entry(parent, width=width)
    if default_iso:
        plain.insert(0, default_iso)
    return plain


def make_optional_date_clear_on_blur(widget: tk.Widget, date_entry_cls: type | None = None) -> None:
    """Leave an optional date blank when the picker filled in today without the user choosing it."""

    def _on_focus_in(_event=None):
        widget._optional_prev_value = normalize_whitespace(widget.get())
        widget._optional_user_set = False

    def _mark_user_set(_event=None):
        widget._optional_user_set = True

    def _on_focus_out(_event=None):
        prev = normalize_whitespace(getattr(widget, "_optional_prev_value", ""))
        curr = normalize_whitespace(widget.get())
        if prev or getattr(widget, "_optional_user_set", False):
            return
        if curr == today().isoformat() or curr == prev:
            widget.delete(0, tk.END)

    widget.bind("<FocusIn>", _on_focus_in, add="+")
    widget.bind("<FocusOut>", _on_focus_out, add="+")
    widget.bind("<KeyRelease>", _mark_user_set, add="+")
    if date_entry_cls is not None and isinstance(widget, date_entry_cls):
        widget.bind("<<DateEntrySelected>>", _mark_user_set, add="+")


def center_popup(popup: tk.Toplevel, parent: tk.Misc, width: int, height: int) -> None:
    popup.update_idletasks()
    parent.update_idletasks()
    parent_w = parent.winfo_width()
    parent_h = parent.winfo_height()
    if parent_w > 1 and parent_h > 1:
        x = parent.winfo_rootx() + max(0, (parent_w - width) // 2)
        y = parent.winfo_rooty() + max(0, (parent_h - height) // 2)
    else:
        x = max(0, (popup.winfo_screenwidth() - width) // 2)
        y = max(0, (popup.winfo_screenheight() - height) // 2)
    popup.geometry(f"{width}x{height}+{x}+{y}")


def build_tree(parent: tk.Widget, section: str, columns: tuple[str, ...], height: int = 8) -> ttk.Treeview:
    """Headings-only Treeview laid out from the column configuration of ``section``."""
    tree = ttk.Treeview(parent, columns=columns, show="headings", height=height, selectmode="browse")
    config = get_column_config(section)
    for col in columns:
        tree.heading(col, text=config[col]["header"], anchor="center")
        tree.column(col, width=config[col]["width"], anchor=config[col]["anchor"])
    return tree


def clear_tree(tree: ttk.Treeview) -> None:
    items = tree.get_children()
    if items:
        tree.delete(*items)


def get_text_value(widget: tk.Text) -> str:
    return widget.get("1.0", tk.END).strip()
