from __future__ import annotations

import json
from pathlib import Path


class SettingsService:
    def __init__(self, settings_path: str):
        self._path = Path(settings_path)

    def load(self) -> dict:
        try:
            with self._path.open("r", encoding="utf-8") as file:
                data = json.load(file)
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, settings: dict) -> None:
        with self._path.open("w", encoding="utf-8") as file:
            json.dump(settings, file, ensure_ascii=False, indent=2)

    def get_last_export_dir(self, settings: dict) -> str | None:
        value = settings.get("last_export_dir")
        return value if isinstance(value, str) and value else None

    def set_last_export_dir(self, settings: dict, file_path: str) -> bool:
        path = Path(str(file_path))
        parent = str(path.parent) if str(path.parent) not in {"", "."} else None
        if not parent:
            return False
        settings["last_export_dir"] = parent
        return True

    def get_last_customer(self, settings: dict) -> tuple[str | None, str | None]:
        value = settings.get("last_customer")
        if not isinstance(value, dict):
            return None, None
        customer_id = value.get("id") or None
        customer_name = value.get("name") or None
        return customer_id, customer_name

    def set_last_customer(self, settings: dict, customer_id: str | None, customer_name: str | None) -> None:
        settings["last_customer"] = {"id": customer_id or "", "name": customer_name or ""}
