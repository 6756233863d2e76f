"""Datetime parsing helpers. Everything returned is timezone-aware UTC."""

import re
from datetime import date, datetime, time, timezone
from typing import Optional

DATETIME_WITH_TIMEZONE = re.compile(r"[zZ]$|[+\-]\d{2}:\d{2}$")


def has_timezone(value: str) -> bool:
    return bool(DATETIME_WITH_TIMEZONE.search(value.strip()))


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 string; naive values are read as UTC.

    Returns ``None`` for blank or unparseable input.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    if text[-1] in "zZ":
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed = datetime.combine(date.fromisoformat(text), time.min)
        except ValueError:
            return None
    return ensure_utc(parsed)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    value = ensure_utc(value)
    if value is None:
        return None
    return value.isoformat().replace("+00:00", "Z")
