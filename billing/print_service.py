from __future__ import annotations

import re
import webbrowser
from datetime import datetime
from pathlib import Path

from core.app_logging import get_app_logger, trace
from core.config import PRINT_DIR

logger = get_app_logger()

_UNSAFE = re.compile(r"[^\w\-]+", re.UNICODE)


def _document_path(stem: str, print_dir: str) -> Path:
    safe = _UNSAFE.sub("_", stem).strip("_") or "document"
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    return Path(print_dir) / f"{safe}_{stamp}.html"


@trace
def open_print_document(html: str, stem: str, print_dir: str = PRINT_DIR) -> bool:
    """
    Write ``html`` to the print folder and open it in the browser.

    The page prints itself on load. Returns False, without telling the user,
    when the file cannot be written or no browser window opens.
    """
    path = _document_path(stem, print_dir)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
    except OSError as e:
        logger.warning(f"Could not write print document {path}: {e}")
        return False

    try:
        opened = webbrowser.open(path.resolve().as_uri(), new=2)
    except webbrowser.Error as e:
        logger.warning(f"No browser available for {path}: {e}")
        return False
    if not opened:
        logger.info(f"Print window did not open for {path}")
    return bool(opened)
