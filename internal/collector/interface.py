from typing import List, Protocol, runtime_checkable

from .type import CollectedPost


@runtime_checkable
class ICollector(Protocol):
    """A single platform collector."""

    platform: str

    async def collect(self) -> List[CollectedPost]: ...


@runtime_checkable
class ICollectorUseCase(Protocol):
    async def collect_all(self) -> List[CollectedPost]: ...


__all__ = ["ICollector", "ICollectorUseCase"]
