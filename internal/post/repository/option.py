from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class UpsertOptions:
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ListRecentOptions:
    since: Optional[datetime] = None
    limit: int = 0


@dataclass
class ListByIdsOptions:
    ids: List[str] = field(default_factory=list)


@dataclass
class CountByPlatformOptions:
    since: Optional[datetime] = None


__all__ = [
    "UpsertOptions",
    "ListRecentOptions",
    "ListByIdsOptions",
    "CountByPlatformOptions",
]
