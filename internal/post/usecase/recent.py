from datetime import timedelta
from typing import List

from internal.model.post import Post
from internal.model.timestamp import utc_now
from ..errors import ErrInvalidInput
from ..repository.option import ListRecentOptions


async def recent(self, window_hours: int) -> List[Post]:
    if window_hours <= 0:
        raise ErrInvalidInput("window_hours must be > 0")

    since = utc_now() - timedelta(hours=window_hours)
    return await self.repository.list_recent(ListRecentOptions(since=since))
