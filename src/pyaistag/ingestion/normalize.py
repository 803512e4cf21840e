"""Normalization helpers.

Centralizes defensive parsing of comment block values.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000


def safe_int(value: Any) -> int | None:
    """Parse *value* as an integer, ``None`` when absent or malformed.

    Only whole numbers are accepted; ``"12.5"`` is malformed, not ``12``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_epoch_seconds(value: Any) -> datetime | None:
    """Convert an epoch timestamp (seconds **or** milliseconds) to a UTC datetime.

    Returns ``None`` when the value is ``None`` or not numeric.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    ts = safe_int(value)
    if ts is None:
        return None
    if ts >= _MS_THRESHOLD:
        ts = ts // 1000
    return datetime.fromtimestamp(ts, tz=UTC)


def to_epoch_seconds(value: datetime) -> int:
    """Whole seconds since 1970 for *value* (sub-second part dropped)."""
    return int(ensure_utc(value).timestamp())
