"""Request bodies and response shaping for the HTTP surface."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from internal.model.alert import Alert
from internal.model.timestamp import to_valid_iso


class AcknowledgeAlertRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    alert_id: Optional[str] = Field(default=None, alias="alertId")


def error_body(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def alert_to_dict(alert: Alert, now: datetime) -> Dict[str, Any]:
    metadata = alert.alert_metadata if isinstance(alert.alert_metadata, dict) else {}
    return {
        "id": str(alert.id),
        "batch_id": str(alert.batch_id) if alert.batch_id is not None else None,
        "alert_type": alert.alert_type,
        "severity": alert.severity,
        "title": alert.title,
        "description": alert.description,
        "related_posts": list(alert.related_posts or []),
        "metadata": metadata,
        "is_acknowledged": bool(alert.is_acknowledged),
        "acknowledged_at": (
            to_valid_iso(alert.acknowledged_at, now)
            if alert.acknowledged_at is not None
            else None
        ),
        "created_at": to_valid_iso(alert.created_at, now),
    }


__all__ = ["AcknowledgeAlertRequest", "error_body", "alert_to_dict"]
