from .base import BaseCollector
from .reddit import RedditCollector
from .hackernews import HackerNewsCollector
from .bluesky import BlueskyCollector
from .helpers import matches_keywords, dedupe_by_external_id

__all__ = [
    "BaseCollector",
    "RedditCollector",
    "HackerNewsCollector",
    "BlueskyCollector",
    "matches_keywords",
    "dedupe_by_external_id",
]
