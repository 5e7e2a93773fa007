from __future__ import annotations

from core.app_logging import get_app_logger
from core.config import SETTINGS_FILE
from core.settings_service import SettingsService

logger = get_app_logger()


class SettingsMixin:
    def _settings_service(self) -> SettingsService:
        if not hasattr(self, "_settings_service_instance"):
            self._settings_service_instance = SettingsService(SETTINGS_FILE)
        return self._settings_service_instance

    def _load_app_settings(self) -> dict:
        return self._settings_service().load()

    def _save_app_settings(self) -> None:
        try:
            self._settings_service().save(self._app_settings)
        except OSError as exc:
            logger.warning(f"Failed to save app settings: {exc}")

    def _get_last_export_dir(self) -> str | None:
        return self._settings_service().get_last_export_dir(self._app_settings)

    def _set_last_export_dir(self, file_path: str) -> None:
        if self._settings_service().set_last_export_dir(self._app_settings, file_path):
            self._save_app_settings()

    def _get_last_customer(self) -> tuple[str | None, str | None]:
        return self._settings_service().get_last_customer(self._app_settings)

    def _remember_last_customer(self, customer_id: str | None, customer_name: str | None) -> None:
        self._settings_service().set_last_customer(self._app_settings, customer_id, customer_name)
        self._save_app_settings()
