from typing import Any, Dict, List, Optional

from ..constant import (
    PLATFORM_BLUESKY,
    BLUESKY_API_URL,
    BLUESKY_SEARCH_PATH,
    BLUESKY_PROFILE_URL,
)
from ..errors import ErrSourceUnavailable
from ..type import CollectedPost
from .base import BaseCollector
from .helpers import dedupe_by_external_id, matches_keywords, parse_iso


class BlueskyCollector(BaseCollector):
    """Searches the public Bluesky API for the leading tracked keywords.

    Search is fuzzy and queries overlap, so results are keyword-filtered again
    and deduplicated by post URI.
    """

    platform = PLATFORM_BLUESKY

    async def collect(self) -> List[CollectedPost]:
        posts: List[CollectedPost] = []
        keywords = self.config.keywords[: self.config.bluesky_keyword_limit]

        for index, keyword in enumerate(keywords):
            if index > 0:
                await self.sleep(self.config.bluesky_pause_seconds)

            try:
                data = await self._get_json(
                    f"{BLUESKY_API_URL}{BLUESKY_SEARCH_PATH}",
                    params={"q": keyword, "limit": self.config.bluesky_limit},
                )
            except ErrSourceUnavailable as exc:
                self._warn("bluesky.collect", f"query {keyword!r} skipped: {exc}")
                continue

            for entry in (data or {}).get("posts") or []:
                post = self._normalize(entry)
                if post is not None:
                    posts.append(post)

        return dedupe_by_external_id(posts)

    def _normalize(self, entry: Any) -> Optional[CollectedPost]:
        if not isinstance(entry, dict):
            return None
        post: Dict[str, Any] = entry.get("post") or entry
        uri = post.get("uri")
        if not uri:
            return None

        author = post.get("author") or {}
        record = post.get("record") or {}
        text = record.get("text") or ""
        if not matches_keywords(text, self.config.keywords):
            return None

        handle = author.get("handle") or ""
        images = ((record.get("embed") or {}).get("images")) or []
        return CollectedPost(
            platform_id=PLATFORM_BLUESKY,
            external_id=uri,
            author=author.get("displayName") or handle,
            author_id=author.get("did"),
            content=text,
            url=f"{BLUESKY_PROFILE_URL}/{handle}/post/{uri.rsplit('/', 1)[-1]}",
            posted_at=parse_iso(record.get("createdAt")),
            engagement_score=float(
                (post.get("likeCount") or 0) + (post.get("repostCount") or 0)
            ),
            reply_count=int(post.get("replyCount") or 0),
            metadata={
                "handle": handle,
                "display_name": author.get("displayName"),
                "has_images": bool(images),
            },
        )


__all__ = ["BlueskyCollector"]
