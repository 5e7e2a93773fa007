from __future__ import annotations

import tkinter as tk
from typing import Callable

from core.app_logging import get_app_logger
from core.config import FONTS, TOAST_DURATION_MS

logger = get_app_logger()

TOAST_COLORS = {
    "success": {"background": "#dcfce7", "foreground": "#166534"},
    "error": {"background": "#fee2e2", "foreground": "#991b1b"},
    "info": {"background": "#e0f2fe", "foreground": "#075985"},
}


def show_toast(parent: tk.Misc, level: str, message: str, duration_ms: int = TOAST_DURATION_MS) -> tk.Toplevel:
    """Small borderless notice in the bottom corner of ``parent`` that disappears on its own."""
    colors = TOAST_COLORS.get(level, TOAST_COLORS["info"])
    toast = tk.Toplevel(parent)
    toast.overrideredirect(True)
    toast.attributes("-topmost", True)
    tk.Label(
        toast,
        text=message,
        font=FONTS["toast"],
        background=colors["background"],
        foreground=colors["foreground"],
        padx=16,
        pady=10,
        justify="right",
    ).pack(fill="both", expand=True)

    toast.update_idletasks()
    x = parent.winfo_rootx() + 24
    y = parent.winfo_rooty() + max(0, parent.winfo_height() - toast.winfo_reqheight() - 24)
    toast.geometry(f"+{x}+{y}")

    def _dismiss():
        if toast.winfo_exists():
            toast.destroy()

    toast.after(duration_ms, _dismiss)
    return toast


def make_notifier(parent: tk.Misc) -> Callable[[str, str], None]:
    """``notify(level, message)`` callback that logs the message and shows it as a toast."""

    def notify(level: str, message: str) -> None:
        if level == "error":
            logger.warning(f"Notice shown: {message}")
        else:
            logger.info(f"Notice shown: {message}")
        show_toast(parent, level, message)

    return notify
