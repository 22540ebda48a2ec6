from datetime import datetime
from typing import List, Optional, Protocol, Tuple, runtime_checkable

from internal.model.post import Post
from .option import (
    UpsertOptions,
    ListRecentOptions,
    ListByIdsOptions,
    CountByPlatformOptions,
)


@runtime_checkable
class IPostRepository(Protocol):
    async def upsert(self, opt: UpsertOptions) -> bool:
        """Upsert one post; returns True only when a new row was inserted."""
        ...

    async def list_recent(self, opt: ListRecentOptions) -> List[Post]: ...
    async def list_by_ids(self, opt: ListByIdsOptions) -> List[Post]: ...
    async def count_by_platform(
        self, opt: CountByPlatformOptions
    ) -> List[Tuple[str, int]]: ...
    async def latest_posted_at(self) -> Optional[datetime]: ...


__all__ = ["IPostRepository"]
