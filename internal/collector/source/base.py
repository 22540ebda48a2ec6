import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from pkg.logger.logger import Logger
from config.config import CollectorConfig
from ..errors import ErrSourceUnavailable

SleepFunc = Callable[[float], Awaitable[None]]


class BaseCollector:
    """Shared HTTP plumbing for platform collectors.

    Sub-requests are issued sequentially; ``sleep`` is the politeness pause
    between them and can be swapped out in tests.
    """

    platform: str = ""

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: CollectorConfig,
        logger: Optional[Logger] = None,
        sleep: SleepFunc = asyncio.sleep,
    ):
        self.client = client
        self.config = config
        self.logger = logger
        self.sleep = sleep

    async def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = await self.client.get(
                url,
                params=params,
                headers={"User-Agent": self.config.user_agent},
                timeout=self.config.request_timeout_seconds,
            )
        except httpx.HTTPError as exc:
            raise ErrSourceUnavailable(f"{url}: {exc}") from exc

        if response.status_code >= 400:
            raise ErrSourceUnavailable(f"{url}: HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as exc:
            raise ErrSourceUnavailable(f"{url}: invalid JSON body") from exc

    def _warn(self, where: str, message: str) -> None:
        if self.logger:
            self.logger.warning(f"internal.collector.source.{where}: {message}")


__all__ = ["BaseCollector", "SleepFunc"]
