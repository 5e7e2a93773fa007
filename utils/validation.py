from __future__ import annotations

import math

from utils.formatting import parse_ymd


def normalize_whitespace(value: str | None) -> str:
    return " ".join(str(value or "").strip().split())


def optional_text(value: str | None, max_len: int = 500) -> str | None:
    cleaned = normalize_whitespace(value)
    if not cleaned:
        return None
    return cleaned[:max_len]


def parse_amount(value: str | None) -> float | None:
    """Amount typed by the user, or None when blank, not a number, or not finite."""
    cleaned = normalize_whitespace(value).replace(",", "")
    if not cleaned:
        return None
    try:
        number = float(cleaned)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def positive_amount(value: str | None, required_message: str, positive_message: str) -> float:
    if not normalize_whitespace(value):
        raise ValueError(required_message)
    number = parse_amount(value)
    if number is None or not number > 0:
        raise ValueError(positive_message)
    return number


def optional_date(value: str | None):
    cleaned = normalize_whitespace(value)
    if not cleaned:
        return None
    parsed = parse_ymd(cleaned)
    if parsed is None:
        raise ValueError("التاريخ يجب أن يكون بصيغة YYYY-MM-DD")
    return parsed
