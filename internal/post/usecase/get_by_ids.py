from typing import List, Sequence

from ..constant import CONTENT_SNIPPET_LENGTH
from ..type import PostSummary
from ..repository.option import ListByIdsOptions
from ..repository.postgre.helpers import parse_uuids


async def get_by_ids(self, ids: Sequence[str]) -> List[PostSummary]:
    valid_ids = [str(i) for i in parse_uuids(ids)][: self.max_ids]
    if not valid_ids:
        return []

    posts = await self.repository.list_by_ids(ListByIdsOptions(ids=valid_ids))

    return [
        PostSummary(
            id=str(post.id),
            platform_id=post.platform_id,
            content_snippet=(post.content or "")[:CONTENT_SNIPPET_LENGTH],
            url=post.url,
            posted_at=post.posted_at,
            author=post.author,
        )
        for post in posts
    ]
