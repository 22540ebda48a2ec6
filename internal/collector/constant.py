from typing import Final

from internal.model.constant import PLATFORM_REDDIT, PLATFORM_HACKERNEWS, PLATFORM_BLUESKY

# Reddit
REDDIT_BASE_URL: Final[str] = "https://www.reddit.com"
REDDIT_POST_URL_PREFIX: Final[str] = "https://reddit.com"

# Hacker News
HACKERNEWS_API_URL: Final[str] = "https://hacker-news.firebaseio.com/v0"
HACKERNEWS_ITEM_URL: Final[str] = "https://news.ycombinator.com/item?id="
HACKERNEWS_UNKNOWN_AUTHOR: Final[str] = "unknown"

# Bluesky
BLUESKY_API_URL: Final[str] = "https://public.api.bsky.app"
BLUESKY_SEARCH_PATH: Final[str] = "/xrpc/app.bsky.feed.searchPosts"
BLUESKY_PROFILE_URL: Final[str] = "https://bsky.app/profile"

__all__ = [
    "PLATFORM_REDDIT",
    "PLATFORM_HACKERNEWS",
    "PLATFORM_BLUESKY",
    "REDDIT_BASE_URL",
    "REDDIT_POST_URL_PREFIX",
    "HACKERNEWS_API_URL",
    "HACKERNEWS_ITEM_URL",
    "HACKERNEWS_UNKNOWN_AUTHOR",
    "BLUESKY_API_URL",
    "BLUESKY_SEARCH_PATH",
    "BLUESKY_PROFILE_URL",
]
