from typing import List, Optional, Protocol, Sequence, runtime_checkable

from internal.model.alert import Alert
from .type import AlertCandidate


@runtime_checkable
class IAlertUseCase(Protocol):
    async def save(
        self, candidates: Sequence[AlertCandidate], batch_id: Optional[str] = None
    ) -> int: ...

    async def list_active(self, limit: Optional[int] = None) -> List[Alert]: ...

    async def acknowledge(self, alert_id: str) -> bool: ...


__all__ = ["IAlertUseCase"]
