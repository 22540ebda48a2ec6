from .interface import ICollector, ICollectorUseCase
from .type import CollectedPost
from .errors import ErrSourceUnavailable
from .source import RedditCollector, HackerNewsCollector, BlueskyCollector
from .usecase.new import New as NewCollectorUseCase

__all__ = [
    "ICollector",
    "ICollectorUseCase",
    "CollectedPost",
    "ErrSourceUnavailable",
    "RedditCollector",
    "HackerNewsCollector",
    "BlueskyCollector",
    "NewCollectorUseCase",
]
