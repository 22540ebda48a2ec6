from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from internal.model.timestamp import to_valid_iso


@dataclass
class SaveOutput:
    """Per-batch outcome of a post upsert."""

    inserted: int = 0
    skipped: int = 0


@dataclass
class PostSummary:
    id: str
    platform_id: str
    content_snippet: str
    url: Optional[str] = None
    posted_at: Optional[datetime] = None
    author: Optional[str] = None

    def to_dict(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "platform_id": self.platform_id,
            "posted_at": to_valid_iso(self.posted_at, now),
            "content_snippet": self.content_snippet,
            "author": self.author or "",
        }


__all__ = ["SaveOutput", "PostSummary"]
