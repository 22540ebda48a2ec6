from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List


@dataclass
class AlertCandidate:
    """An alert about to be stored, from either the model or a rule."""

    alert_type: str
    severity: str
    title: str
    description: str = ""
    recommended_action: str = ""
    related_post_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["AlertCandidate"]
