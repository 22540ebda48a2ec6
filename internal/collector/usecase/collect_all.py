import asyncio
from typing import List

from ..type import CollectedPost


async def collect_all(self) -> List[CollectedPost]:
    """Run every platform collector concurrently and concatenate the results.

    A collector that raises is logged and dropped; the others still count.
    """
    results = await asyncio.gather(
        *(collector.collect() for collector in self.collectors),
        return_exceptions=True,
    )

    posts: List[CollectedPost] = []
    counts: List[str] = []
    for collector, result in zip(self.collectors, results):
        if isinstance(result, asyncio.CancelledError):
            raise result
        if isinstance(result, BaseException):
            self.logger.error(
                f"internal.collector.usecase.collect_all: {collector.platform} failed: {result}"
            )
            counts.append(f"{collector.platform}(failed)")
            continue

        counts.append(f"{collector.platform}({len(result)})")
        posts.extend(result)

    self.logger.info(
        f"internal.collector.usecase.collect_all: collected {len(posts)} posts: {', '.join(counts)}"
    )
    return posts
