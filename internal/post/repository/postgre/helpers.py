import uuid
from typing import Any, Dict, List, Optional, Sequence

from internal.model.timestamp import parse_timestamp

# Columns that identify a post; everything else is last-write-wins.
IDENTITY_COLUMNS = ("platform_id", "external_id")


def transform_to_post(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map a collected post onto posts table column names."""
    if hasattr(data, "to_dict"):
        data = data.to_dict()

    if not isinstance(data, dict):
        raise ValueError("Data must be a dict or have to_dict() method")

    return {
        "platform_id": data.get("platform_id"),
        "external_id": str(data.get("external_id") or ""),
        "author": data.get("author"),
        "author_id": data.get("author_id"),
        "content": data.get("content") or "",
        "url": data.get("url"),
        "posted_at": parse_timestamp(data.get("posted_at")),
        "engagement_score": float(data.get("engagement_score") or 0),
        "reply_count": int(data.get("reply_count") or 0),
        "metadata": data.get("metadata") or {},
    }


def parse_uuids(values: Sequence[Any]) -> List[uuid.UUID]:
    """Keep only well-formed UUIDs, preserving order."""
    parsed: List[uuid.UUID] = []
    for value in values:
        candidate = _to_uuid(value)
        if candidate is not None:
            parsed.append(candidate)
    return parsed


def _to_uuid(value: Any) -> Optional[uuid.UUID]:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value).strip())
    except (ValueError, AttributeError):
        return None


__all__ = ["IDENTITY_COLUMNS", "transform_to_post", "parse_uuids"]
