from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class PipelineResult:
    """Summary of one pipeline invocation.

    Attributes:
        collected: Posts newly stored by this run
        analyzed: Posts covered by the persisted analysis batch
        alerts: Alerts evaluated and stored for that batch
        duration_ms: Wall-clock duration of the run
        errors: Stage-tagged failures, "<stage>: <message>"
        run_id: Trace id the run was logged under
    """

    collected: int = 0
    analyzed: int = 0
    alerts: int = 0
    duration_ms: int = 0
    errors: List[str] = field(default_factory=list)
    run_id: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "collected": self.collected,
            "analyzed": self.analyzed,
            "alerts": self.alerts,
            "duration": self.duration_ms,
            "errors": list(self.errors),
            "runId": self.run_id,
        }


__all__ = ["PipelineResult"]
