import uuid
from typing import Any, Optional


def to_uuid(value: Any) -> Optional[uuid.UUID]:
    if value is None or isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (ValueError, AttributeError):
        return None


def with_batch(row: dict, batch_id: Any) -> dict:
    return {**row, "batch_id": to_uuid(batch_id)}


__all__ = ["to_uuid", "with_batch"]
