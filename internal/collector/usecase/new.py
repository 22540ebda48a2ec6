import asyncio
from typing import Optional, Sequence

import httpx

from pkg.logger.logger import Logger
from config.config import CollectorConfig
from ..interface import ICollector, ICollectorUseCase
from ..source import RedditCollector, HackerNewsCollector, BlueskyCollector
from ..source.base import SleepFunc
from .usecase import CollectorUseCase


def New(
    client: httpx.AsyncClient,
    config: CollectorConfig,
    logger: Logger,
    sleep: SleepFunc = asyncio.sleep,
    collectors: Optional[Sequence[ICollector]] = None,
) -> ICollectorUseCase:
    if collectors is None:
        collectors = [
            cls(client=client, config=config, logger=logger, sleep=sleep)
            for cls in (RedditCollector, HackerNewsCollector, BlueskyCollector)
        ]
    return CollectorUseCase(collectors=collectors, logger=logger)


__all__ = ["New"]
