from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class CreateManyOptions:
    data: List[Dict[str, Any]] = field(default_factory=list)
    batch_id: Optional[str] = None


@dataclass
class ListActiveOptions:
    limit: int = 0


@dataclass
class AcknowledgeOptions:
    id: Optional[str] = None


__all__ = ["CreateManyOptions", "ListActiveOptions", "AcknowledgeOptions"]
