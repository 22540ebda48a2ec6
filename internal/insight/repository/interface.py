from typing import Dict, List, Protocol, runtime_checkable

from internal.model import SentimentSnapshot, Theme, CompetitorMention, Community
from .option import (
    CreateBatchOptions,
    CreateManyOptions,
    CreateSnapshotOptions,
    ListWindowOptions,
)


@runtime_checkable
class IInsightRepository(Protocol):
    """Writes and windowed reads over the analysis artifact tables."""

    async def create_batch(self, opt: CreateBatchOptions) -> str: ...
    async def create_themes(self, opt: CreateManyOptions) -> int: ...
    async def create_snapshot(self, opt: CreateSnapshotOptions) -> None: ...
    async def create_competitor_mentions(self, opt: CreateManyOptions) -> int: ...
    async def create_communities(self, opt: CreateManyOptions) -> int: ...

    async def list_snapshots(self, opt: ListWindowOptions) -> List[SentimentSnapshot]: ...
    async def list_themes(self, opt: ListWindowOptions) -> List[Theme]: ...
    async def list_competitor_mentions(
        self, opt: ListWindowOptions
    ) -> List[CompetitorMention]: ...
    async def list_communities(self, opt: ListWindowOptions) -> List[Community]: ...
    async def count_communities_by_name(
        self, opt: ListWindowOptions
    ) -> Dict[str, int]: ...


__all__ = ["IInsightRepository"]
