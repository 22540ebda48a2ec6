from typing import Any, Dict, List, Optional

from ..constant import (
    PLATFORM_HACKERNEWS,
    HACKERNEWS_API_URL,
    HACKERNEWS_ITEM_URL,
    HACKERNEWS_UNKNOWN_AUTHOR,
)
from ..errors import ErrSourceUnavailable
from ..type import CollectedPost
from .base import BaseCollector
from .helpers import dedupe_by_external_id, from_unix, join_text, matches_keywords


class HackerNewsCollector(BaseCollector):
    """Unions the story id lists, then fetches and filters every item."""

    platform = PLATFORM_HACKERNEWS

    async def collect(self) -> List[CollectedPost]:
        story_ids = await self._collect_story_ids()

        posts: List[CollectedPost] = []
        for story_id in story_ids:
            try:
                item = await self._get_json(f"{HACKERNEWS_API_URL}/item/{story_id}.json")
            except ErrSourceUnavailable as exc:
                if self.logger:
                    self.logger.debug(
                        f"internal.collector.source.hackernews.collect: item {story_id} skipped: {exc}"
                    )
                continue

            post = self._normalize(item)
            if post is not None:
                posts.append(post)

        return dedupe_by_external_id(posts)

    async def _collect_story_ids(self) -> List[int]:
        # Insertion-ordered union across endpoints
        ids: Dict[int, None] = {}
        limit = self.config.hackernews_ids_per_endpoint

        for index, endpoint in enumerate(self.config.hackernews_endpoints):
            if index > 0:
                await self.sleep(self.config.hackernews_pause_seconds)

            try:
                data = await self._get_json(f"{HACKERNEWS_API_URL}/{endpoint}.json")
            except ErrSourceUnavailable as exc:
                self._warn("hackernews.collect", f"{endpoint} skipped: {exc}")
                continue

            if not isinstance(data, list):
                self._warn("hackernews.collect", f"{endpoint} returned no id list")
                continue

            for story_id in data[:limit]:
                ids.setdefault(story_id, None)

        return list(ids)

    def _normalize(self, item: Any) -> Optional[CollectedPost]:
        if not isinstance(item, dict) or item.get("id") is None:
            return None
        if item.get("deleted") or item.get("dead"):
            return None

        title = item.get("title") or ""
        text = item.get("text") or ""
        if not matches_keywords(f"{title} {text}", self.config.keywords):
            return None

        author = item.get("by") or HACKERNEWS_UNKNOWN_AUTHOR
        return CollectedPost(
            platform_id=PLATFORM_HACKERNEWS,
            external_id=str(item["id"]),
            author=author,
            author_id=author,
            content=join_text(title, text),
            url=f"{HACKERNEWS_ITEM_URL}{item['id']}",
            posted_at=from_unix(item.get("time")),
            engagement_score=float(item.get("score") or 0),
            reply_count=int(item.get("descendants") or 0),
            metadata={
                "title": title,
                "type": item.get("type"),
                "link_url": item.get("url"),
            },
        )


__all__ = ["HackerNewsCollector"]
