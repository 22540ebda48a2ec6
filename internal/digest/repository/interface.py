from typing import Optional, Protocol, runtime_checkable

from internal.model.digest import Digest
from .option import CreateOptions, LatestByTypeOptions


@runtime_checkable
class IDigestRepository(Protocol):
    async def create(self, opt: CreateOptions) -> str: ...
    async def latest_by_type(self, opt: LatestByTypeOptions) -> Optional[Digest]: ...


__all__ = ["IDigestRepository"]
