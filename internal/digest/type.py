from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from internal.model.timestamp import to_valid_iso


@dataclass
class DigestInput:
    """Aggregated material handed to the narrative model."""

    digest_type: str
    period_start: datetime
    period_end: datetime
    post_count: int
    themes: List[Dict[str, Any]] = field(default_factory=list)
    sentiment: Dict[str, Any] = field(default_factory=dict)
    competitors: List[Dict[str, Any]] = field(default_factory=list)
    communities: List[Dict[str, Any]] = field(default_factory=list)
    alerts: List[Dict[str, Any]] = field(default_factory=list)
    enterprise: Dict[str, Any] = field(default_factory=dict)


@dataclass
class DigestContent:
    content: str
    summary: str = ""
    key_insights: List[str] = field(default_factory=list)


@dataclass
class DigestView:
    id: str
    type: str
    content: str
    summary: str
    key_insights: List[str]
    created_at: Any = None

    def to_dict(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "key_insights": list(self.key_insights),
            "content": self.content,
            "summary": self.summary,
            "created_at": to_valid_iso(self.created_at, now),
        }


__all__ = ["DigestInput", "DigestContent", "DigestView"]
