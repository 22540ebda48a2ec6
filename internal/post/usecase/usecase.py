from datetime import datetime
from typing import List, Optional, Sequence

from pkg.logger.logger import Logger
from internal.model.post import Post
from internal.collector.type import CollectedPost

from ..repository.interface import IPostRepository
from ..interface import IPostUseCase
from ..type import SaveOutput, PostSummary
from .save import save as _save
from .recent import recent as _recent
from .get_by_ids import get_by_ids as _get_by_ids
from .latest_post_at import latest_post_at as _latest_post_at


class PostUseCase(IPostUseCase):
    def __init__(
        self,
        repository: IPostRepository,
        logger: Logger,
        max_ids: int,
    ) -> None:
        self.repository = repository
        self.logger = logger
        self.max_ids = max_ids

    async def save(self, posts: Sequence[CollectedPost]) -> SaveOutput:
        return await _save(self, posts)

    async def recent(self, window_hours: int) -> List[Post]:
        return await _recent(self, window_hours)

    async def get_by_ids(self, ids: Sequence[str]) -> List[PostSummary]:
        return await _get_by_ids(self, ids)

    async def latest_post_at(self) -> Optional[datetime]:
        return await _latest_post_at(self)
