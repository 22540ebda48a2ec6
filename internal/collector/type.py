"""Data types for the collector domain."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class CollectedPost:
    """A post normalized from any platform, ready for the post store."""

    platform_id: str
    external_id: str
    content: str
    author: Optional[str] = None
    author_id: Optional[str] = None
    url: Optional[str] = None
    posted_at: Optional[datetime] = None
    engagement_score: float = 0.0
    reply_count: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.platform_id:
            raise ValueError("platform_id is required")
        if not self.external_id:
            raise ValueError("external_id is required")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["CollectedPost"]
