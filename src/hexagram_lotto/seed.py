"""Seed composition from a calendar date, an optional time, and a call counter."""

from __future__ import annotations

import re
from datetime import date

from hexagram_lotto.errors import InputIncomplete

DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})$")
TIME_RE = re.compile(r"^([0-9]{1,2}):([0-9]{1,2})$")

QUICK_DATE_DIGITS = 8
MIN_YEAR = 1900
MAX_YEAR = 2050


def normalize_date(value: str | date | None) -> str:
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")

    text = (value or "").strip()
    if not text:
        raise InputIncomplete("Birth date is required.")

    match = DATE_RE.match(text)
    if not match:
        raise InputIncomplete(f"Date must look like YYYY-MM-DD: {text!r}")

    year, month, day = (int(part) for part in match.groups())
    if not (1 <= month <= 12 and 1 <= day <= 31):
        raise InputIncomplete(f"Date is out of range: {text!r}")
    return f"{year:04d}-{month:02d}-{day:02d}"


def normalize_time(value: str | None) -> str:
    """Return ``HH:MM`` or an empty string when no time was given."""
    text = (value or "").strip()
    if not text:
        return ""

    match = TIME_RE.match(text)
    if not match:
        raise InputIncomplete(f"Time must look like HH:MM: {text!r}")

    hour, minute = (int(part) for part in match.groups())
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InputIncomplete(f"Time is out of range: {text!r}")
    return f"{hour:02d}:{minute:02d}"


def compose_seed(birth_date: str | date | None, birth_time: str | None = None, counter: int | None = None) -> str:
    """Compose the digest input ``YYYY-MM-DD[THH:MM][|counter]``.

    Raises:
        InputIncomplete: If the date is missing, or the date or time is malformed.
    """
    base = normalize_date(birth_date)
    time_part = normalize_time(birth_time)
    seed = f"{base}T{time_part}" if time_part else base
    if counter is not None:
        seed = f"{seed}|{counter}"
    return seed


def parse_quick_date(text: str) -> str:
    """Turn loose ``yyyymmdd`` input (separators allowed) into ``YYYY-MM-DD``."""
    digits = re.sub(r"[^0-9]", "", text or "")
    if len(digits) != QUICK_DATE_DIGITS:
        raise InputIncomplete(f"Quick date needs exactly {QUICK_DATE_DIGITS} digits: {text!r}")

    year, month, day = int(digits[0:4]), int(digits[4:6]), int(digits[6:8])
    if not (MIN_YEAR <= year <= MAX_YEAR and 1 <= month <= 12 and 1 <= day <= 31):
        raise InputIncomplete(f"Quick date is out of range: {text!r}")
    return f"{digits[0:4]}-{digits[4:6]}-{digits[6:8]}"
