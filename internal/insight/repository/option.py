from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class CreateBatchOptions:
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CreateManyOptions:
    batch_id: Optional[str] = None
    data: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class CreateSnapshotOptions:
    batch_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ListWindowOptions:
    since: Optional[datetime] = None
    until: Optional[datetime] = None
    limit: int = 0


__all__ = [
    "CreateBatchOptions",
    "CreateManyOptions",
    "CreateSnapshotOptions",
    "ListWindowOptions",
]
