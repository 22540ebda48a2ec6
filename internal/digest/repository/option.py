from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class CreateOptions:
    data: Dict[str, Any]


@dataclass
class LatestByTypeOptions:
    digest_type: str


__all__ = ["CreateOptions", "LatestByTypeOptions"]
