from typing import List, Protocol, runtime_checkable

from internal.model.alert import Alert
from .option import CreateManyOptions, ListActiveOptions, AcknowledgeOptions


@runtime_checkable
class IAlertRepository(Protocol):
    async def create_many(self, opt: CreateManyOptions) -> int: ...
    async def list_active(self, opt: ListActiveOptions) -> List[Alert]: ...
    async def acknowledge(self, opt: AcknowledgeOptions) -> bool: ...


__all__ = ["IAlertRepository"]
