from __future__ import annotations

from core.app_logging import get_app_logger, log_ux_action, trace
from core.config import HISTORY_LOG_FILE


logger = get_app_logger()


class LifecycleMixin:
    def _on_tab_changed(self, _event=None):
        selected = self.main_notebook.select()
        if selected == str(self.tab_contracts):
            log_ux_action("Tab Changed", details="contracts")
            self.after_idle(self._focus_contract_search)
        elif selected == str(self.tab_billing):
            log_ux_action("Tab Changed", details="billing")

    def _focus_contract_search(self):
        if hasattr(self, "contract_search"):
            self.contract_search.focus_set()

    def _ensure_history_log_exists(self) -> None:
        try:
            with open(HISTORY_LOG_FILE, "a+", encoding="utf-8") as f:
                f.seek(0, 2)
                if f.tell() == 0:
                    f.write("# Billboard Console History Log (auto-created)\n")
        except OSError as exc:
            logger.warning(f"Failed to ensure history log exists: {exc}")

    @trace
    def on_close(self):
        self.ledger_session.close_dialog()
        self.destroy()
