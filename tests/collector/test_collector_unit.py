"""Unit tests for the platform collectors.

Tests cover:
- Keyword filtering and normalization per platform
- Per-source failure isolation (one sub-source down, the rest still collected)
- Politeness pause between sub-requests
- Deduplication by external id
- Concurrent collect_all with a failing platform
"""

from typing import Any, Callable, Dict, List
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from config.config import CollectorConfig
from internal.collector import (
    BlueskyCollector,
    CollectedPost,
    HackerNewsCollector,
    NewCollectorUseCase,
    RedditCollector,
)
from internal.collector.source.helpers import join_text, matches_keywords


# ============================================================================
# Test Fixtures & Helpers
# ============================================================================


def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def reddit_listing(*children: Dict[str, Any]) -> Dict[str, Any]:
    return {"data": {"children": [{"data": c} for c in children]}}


@pytest.fixture
def sleep():
    return AsyncMock()


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def config():
    return CollectorConfig(
        keywords=["claude", "anthropic"],
        subreddits=["ClaudeAI", "LocalLLaMA"],
        hackernews_endpoints=["topstories", "newstories"],
        hackernews_ids_per_endpoint=3,
        bluesky_keyword_limit=2,
    )


class FakeCollector:
    def __init__(self, platform: str, posts: List[CollectedPost] = None, error: Exception = None):
        self.platform = platform
        self.posts = posts or []
        self.error = error

    async def collect(self) -> List[CollectedPost]:
        if self.error:
            raise self.error
        return self.posts


# ============================================================================
# Helpers
# ============================================================================


class TestHelpers:
    """Tests for keyword matching and text joining."""

    def test_keyword_match_is_case_insensitive_substring(self):
        assert matches_keywords("Trying CLAUDE today", ["claude"])
        assert matches_keywords("anthropic's new model", ["Anthropic"])
        assert not matches_keywords("nothing relevant", ["claude"])

    def test_empty_keywords_never_match(self):
        assert not matches_keywords("claude", [])
        assert not matches_keywords("claude", [""])

    def test_join_text_drops_trailing_separator(self):
        assert join_text("Title", "") == "Title"
        assert join_text("Title", "Body") == "Title\n\nBody"


# ============================================================================
# Reddit
# ============================================================================


class TestRedditCollector:
    """Tests for RedditCollector."""

    @pytest.mark.asyncio
    async def test_failed_subreddit_does_not_abort_collection(self, config, sleep, logger):
        """A 500 on one subreddit is logged; the other subreddit still counts."""

        def handler(request: httpx.Request) -> httpx.Response:
            if "/r/ClaudeAI/" in request.url.path:
                return httpx.Response(500)
            return httpx.Response(
                200,
                json=reddit_listing(
                    {
                        "id": "abc",
                        "title": "Claude is great",
                        "selftext": "",
                        "author": "alice",
                        "permalink": "/r/LocalLLaMA/comments/abc",
                        "created_utc": 1700000000,
                        "score": 12,
                        "num_comments": 4,
                        "subreddit": "LocalLLaMA",
                    }
                ),
            )

        async with make_client(handler) as client:
            collector = RedditCollector(client, config, logger=logger, sleep=sleep)
            posts = await collector.collect()

        assert len(posts) == 1
        post = posts[0]
        assert post.platform_id == "reddit"
        assert post.external_id == "abc"
        assert post.url == "https://reddit.com/r/LocalLLaMA/comments/abc"
        assert post.author_id == "alice"
        assert post.engagement_score == 12.0
        assert post.reply_count == 4
        assert post.metadata["subreddit"] == "LocalLLaMA"
        logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_pauses_between_subreddits(self, config, sleep):
        async with make_client(lambda r: httpx.Response(200, json=reddit_listing())) as client:
            await RedditCollector(client, config, sleep=sleep).collect()

        assert sleep.await_count == len(config.subreddits) - 1

    @pytest.mark.asyncio
    async def test_filters_by_keyword_and_dedupes(self, config, sleep):
        """The same post seen in two subreddits is returned once."""
        listing = reddit_listing(
            {"id": "dup", "title": "Anthropic ships", "selftext": "details"},
            {"id": "off", "title": "Cooking tips", "selftext": "no match here"},
        )

        async with make_client(lambda r: httpx.Response(200, json=listing)) as client:
            posts = await RedditCollector(client, config, sleep=sleep).collect()

        assert [p.external_id for p in posts] == ["dup"]
        assert posts[0].content == "Anthropic ships\n\ndetails"


# ============================================================================
# Hacker News
# ============================================================================


class TestHackerNewsCollector:
    """Tests for HackerNewsCollector."""

    @pytest.mark.asyncio
    async def test_unions_ids_and_skips_bad_items(self, config, sleep, logger):
        items = {
            1: {"id": 1, "title": "Claude 4 released", "by": "pg", "score": 100, "descendants": 7, "time": 1700000000},
            2: {"id": 2, "title": "Claude deleted", "deleted": True},
            3: {"id": 3, "title": "Rust tips"},
            5: {"id": 5, "title": "Ask HN: Anthropic API?", "text": "help"},
        }
        requested: List[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            path = request.url.path
            requested.append(path)
            if path.endswith("/topstories.json"):
                return httpx.Response(200, json=[1, 2, 3, 99])
            if path.endswith("/newstories.json"):
                return httpx.Response(200, json=[3, 4, 5])
            item_id = int(path.rsplit("/", 1)[-1].split(".")[0])
            if item_id == 4:
                return httpx.Response(503)
            return httpx.Response(200, json=items[item_id])

        async with make_client(handler) as client:
            collector = HackerNewsCollector(client, config, logger=logger, sleep=sleep)
            posts = await collector.collect()

        assert [p.external_id for p in posts] == ["1", "5"]
        assert posts[0].url == "https://news.ycombinator.com/item?id=1"
        assert posts[0].reply_count == 7
        assert posts[1].author == "unknown"
        # Only the first N ids per endpoint are fetched
        assert not any(p.endswith("/item/99.json") for p in requested)
        # Each id fetched once even though 3 appears in both lists
        assert sum(p.endswith("/item/3.json") for p in requested) == 1
        assert sleep.await_count == 1

    @pytest.mark.asyncio
    async def test_endpoint_failure_is_not_fatal(self, config, sleep, logger):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/topstories.json"):
                raise httpx.ConnectError("boom", request=request)
            if request.url.path.endswith("/newstories.json"):
                return httpx.Response(200, json=[7])
            return httpx.Response(200, json={"id": 7, "title": "claude"})

        async with make_client(handler) as client:
            posts = await HackerNewsCollector(client, config, logger=logger, sleep=sleep).collect()

        assert [p.external_id for p in posts] == ["7"]
        logger.warning.assert_called_once()


# ============================================================================
# Bluesky
# ============================================================================


class TestBlueskyCollector:
    """Tests for BlueskyCollector."""

    @staticmethod
    def entry(uri: str, text: str) -> Dict[str, Any]:
        return {
            "uri": uri,
            "author": {"handle": "bob.bsky.social", "displayName": "Bob", "did": "did:plc:bob"},
            "record": {"text": text, "createdAt": "2024-05-01T10:00:00.000Z"},
            "likeCount": 3,
            "repostCount": 2,
            "replyCount": 1,
        }

    @pytest.mark.asyncio
    async def test_overlapping_queries_are_deduplicated(self, config, sleep):
        shared = self.entry("at://did:plc:bob/app.bsky.feed.post/xyz", "Claude and Anthropic")
        queries: List[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            queries.append(request.url.params["q"])
            return httpx.Response(200, json={"posts": [shared]})

        async with make_client(handler) as client:
            posts = await BlueskyCollector(client, config, sleep=sleep).collect()

        assert queries == ["claude", "anthropic"]
        assert len(posts) == 1
        post = posts[0]
        assert post.engagement_score == 5.0
        assert post.author == "Bob"
        assert post.url == "https://bsky.app/profile/bob.bsky.social/post/xyz"
        assert post.posted_at.year == 2024
        assert sleep.await_count == 1

    @pytest.mark.asyncio
    async def test_fuzzy_matches_are_refiltered(self, config, sleep):
        off_topic = self.entry("at://did:plc:bob/app.bsky.feed.post/1", "weekend hiking")

        async with make_client(lambda r: httpx.Response(200, json={"posts": [off_topic]})) as client:
            posts = await BlueskyCollector(client, config, sleep=sleep).collect()

        assert posts == []


# ============================================================================
# collect_all
# ============================================================================


class TestCollectAll:
    """Tests for the concurrent collect_all use case."""

    @pytest.mark.asyncio
    async def test_one_platform_failing_keeps_the_others(self, config, logger):
        reddit_post = CollectedPost(platform_id="reddit", external_id="r1", content="claude")
        bsky_post = CollectedPost(platform_id="bluesky", external_id="b1", content="claude")
        usecase = NewCollectorUseCase(
            client=MagicMock(),
            config=config,
            logger=logger,
            collectors=[
                FakeCollector("reddit", [reddit_post]),
                FakeCollector("hackernews", error=RuntimeError("down")),
                FakeCollector("bluesky", [bsky_post]),
            ],
        )

        posts = await usecase.collect_all()

        assert posts == [reddit_post, bsky_post]
        logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_all_empty_is_not_an_error(self, config, logger):
        usecase = NewCollectorUseCase(
            client=MagicMock(),
            config=config,
            logger=logger,
            collectors=[FakeCollector("reddit"), FakeCollector("bluesky")],
        )

        assert await usecase.collect_all() == []
        logger.error.assert_not_called()

    def test_default_collectors_cover_every_platform(self, config, logger):
        usecase = NewCollectorUseCase(client=MagicMock(), config=config, logger=logger)

        assert [c.platform for c in usecase.collectors] == ["reddit", "hackernews", "bluesky"]
