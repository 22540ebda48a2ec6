from typing import Awaitable, Sequence

from internal.analysis.type import AnalysisResult
from internal.model.post import Post
from internal.model.timestamp import utc_now
from ..helpers import (
    build_batch_row,
    build_theme_rows,
    build_snapshot_row,
    build_competitor_rows,
    build_community_rows,
)
from ..repository.option import (
    CreateBatchOptions,
    CreateManyOptions,
    CreateSnapshotOptions,
)
from ..repository.errors import RepositoryError


async def save_batch(self, result: AnalysisResult, posts: Sequence[Post]) -> str:
    """Persist an analysis batch and its artifacts.

    The batch row is required and its failure propagates. Themes, snapshot,
    competitor mentions and communities are written separately; a failed
    write is logged and the rest still run. Nothing is rolled back.
    """
    now = utc_now()
    batch_id = await self.repository.create_batch(
        CreateBatchOptions(data=build_batch_row(result, posts))
    )

    await _guarded(
        self,
        "themes",
        self.repository.create_themes(
            CreateManyOptions(batch_id=batch_id, data=build_theme_rows(result, now))
        ),
    )
    await _guarded(
        self,
        "sentiment_snapshot",
        self.repository.create_snapshot(
            CreateSnapshotOptions(
                batch_id=batch_id, data=build_snapshot_row(result, len(posts), now)
            )
        ),
    )
    await _guarded(
        self,
        "competitor_mentions",
        self.repository.create_competitor_mentions(
            CreateManyOptions(batch_id=batch_id, data=build_competitor_rows(result, now))
        ),
    )
    await _guarded(
        self,
        "communities",
        self.repository.create_communities(
            CreateManyOptions(batch_id=batch_id, data=build_community_rows(result, now))
        ),
    )

    self.logger.info(
        f"internal.insight.usecase.save_batch: batch {batch_id} saved ({len(posts)} posts)"
    )
    return batch_id


async def _guarded(self, name: str, write: Awaitable) -> None:
    try:
        await write
    except RepositoryError as exc:
        self.logger.error(f"internal.insight.usecase.save_batch: {name} write failed: {exc}")
