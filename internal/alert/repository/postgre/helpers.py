import uuid
from typing import Any, Dict, Optional


def transform_to_alert(data: Dict[str, Any], batch_id: Optional[str]) -> Dict[str, Any]:
    if hasattr(data, "to_dict"):
        data = data.to_dict()

    return {
        "batch_id": to_uuid(batch_id),
        "alert_type": data.get("alert_type"),
        "severity": data.get("severity"),
        "title": data.get("title") or "",
        "description": data.get("description") or "",
        "related_posts": [str(i) for i in data.get("related_post_ids") or []],
        "alert_metadata": {"recommended_action": data.get("recommended_action") or ""},
    }


def to_uuid(value: Any) -> Optional[uuid.UUID]:
    if value is None or isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (ValueError, AttributeError):
        return None


__all__ = ["transform_to_alert", "to_uuid"]
