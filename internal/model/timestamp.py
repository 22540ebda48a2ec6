"""Timestamp helpers shared by every externally-facing payload."""

from datetime import datetime, timezone
from typing import Any, Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Best-effort parse of a datetime or ISO-8601 string; None when invalid."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def to_valid_iso(value: Any, now: Optional[datetime] = None) -> str:
    """Render ``value`` as ISO-8601, substituting ``now`` for anything unparsable."""
    parsed = parse_timestamp(value)
    if parsed is None:
        parsed = now or utc_now()
    return parsed.isoformat()


__all__ = ["utc_now", "parse_timestamp", "to_valid_iso"]
