from typing import Any, Dict, List, Optional

from ..constant import PLATFORM_REDDIT, REDDIT_BASE_URL, REDDIT_POST_URL_PREFIX
from ..errors import ErrSourceUnavailable
from ..type import CollectedPost
from .base import BaseCollector
from .helpers import dedupe_by_external_id, from_unix, join_text, matches_keywords


class RedditCollector(BaseCollector):
    """Reads the newest posts of each configured subreddit."""

    platform = PLATFORM_REDDIT

    async def collect(self) -> List[CollectedPost]:
        posts: List[CollectedPost] = []

        for index, subreddit in enumerate(self.config.subreddits):
            if index > 0:
                await self.sleep(self.config.reddit_pause_seconds)

            try:
                data = await self._get_json(
                    f"{REDDIT_BASE_URL}/r/{subreddit}/new.json",
                    params={"limit": self.config.reddit_limit},
                )
            except ErrSourceUnavailable as exc:
                self._warn("reddit.collect", f"r/{subreddit} skipped: {exc}")
                continue

            children = ((data or {}).get("data") or {}).get("children") or []
            for child in children:
                post = self._normalize((child or {}).get("data") or {})
                if post is not None:
                    posts.append(post)

        return dedupe_by_external_id(posts)

    def _normalize(self, item: Dict[str, Any]) -> Optional[CollectedPost]:
        title = item.get("title") or ""
        selftext = item.get("selftext") or ""
        if not item.get("id"):
            return None
        if not matches_keywords(f"{title} {selftext}", self.config.keywords):
            return None

        return CollectedPost(
            platform_id=PLATFORM_REDDIT,
            external_id=str(item["id"]),
            author=item.get("author"),
            author_id=item.get("author_fullname") or item.get("author"),
            content=join_text(title, selftext),
            url=f"{REDDIT_POST_URL_PREFIX}{item.get('permalink', '')}",
            posted_at=from_unix(item.get("created_utc")),
            engagement_score=float(item.get("score") or 0),
            reply_count=int(item.get("num_comments") or 0),
            metadata={
                "subreddit": item.get("subreddit"),
                "title": title,
                "is_self": bool(item.get("is_self")),
                "flair": item.get("link_flair_text"),
            },
        )


__all__ = ["RedditCollector"]
