from datetime import datetime
from typing import List, Optional, Protocol, Sequence, runtime_checkable

from internal.model.post import Post
from internal.collector.type import CollectedPost
from .type import SaveOutput, PostSummary


@runtime_checkable
class IPostUseCase(Protocol):
    async def save(self, posts: Sequence[CollectedPost]) -> SaveOutput: ...

    async def recent(self, window_hours: int) -> List[Post]: ...

    async def get_by_ids(self, ids: Sequence[str]) -> List[PostSummary]: ...

    async def latest_post_at(self) -> Optional[datetime]: ...


__all__ = ["IPostUseCase"]
