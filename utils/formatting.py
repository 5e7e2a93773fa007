from __future__ import annotations

import math
from datetime import date, datetime, time, timezone

from core.config import CURRENCY_SUFFIX


def today() -> date:
    return datetime.now().date()


def now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def parse_ymd(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO date or timestamp; a trailing ``Z`` is read as UTC."""
    if not value:
        return None
    cleaned = str(value).strip()
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(cleaned)
    except ValueError:
        parsed = parse_ymd(cleaned[:10])
        return datetime.combine(parsed, time()) if parsed else None


def date_to_timestamp(value: date) -> str:
    return datetime.combine(value, time(), tzinfo=timezone.utc).isoformat()


def timestamp_date_part(value: str | None) -> str:
    if not value:
        return ""
    return str(value).split("T")[0].strip()


def format_date(value: str | None, empty: str = "") -> str:
    parsed = parse_timestamp(value)
    if parsed is None:
        return empty
    return f"{parsed.day}/{parsed.month}/{parsed.year}"


def format_datetime(value: str | None, empty: str = "") -> str:
    parsed = parse_timestamp(value)
    if parsed is None:
        return empty
    return f"{parsed.day}/{parsed.month}/{parsed.year} {parsed.hour:02d}:{parsed.minute:02d}"


def to_number(value) -> float:
    """Numeric value of a stored amount; blanks and non-numeric text count as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(str(value).strip())
    except ValueError:
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def format_amount(value) -> str:
    text = f"{to_number(value):,.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_money(value) -> str:
    return f"{format_amount(value)} {CURRENCY_SUFFIX}"
