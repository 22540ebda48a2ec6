from __future__ import annotations

from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from internal.model import (
    AnalysisBatch,
    SentimentSnapshot,
    Theme,
    CompetitorMention,
    Community,
)
from ..interface import IInsightRepository
from ..option import (
    CreateBatchOptions,
    CreateManyOptions,
    CreateSnapshotOptions,
    ListWindowOptions,
)
from ..errors import ErrFailedToCreate, ErrFailedToGet
from .insight_query import (
    build_list_snapshots_query,
    build_list_themes_query,
    build_list_competitor_mentions_query,
    build_list_communities_query,
    build_count_communities_by_name_query,
)
from .helpers import to_uuid, with_batch


class InsightPostgresRepository(IInsightRepository):

    def __init__(self, db: PostgresDatabase, logger: Logger):
        self.db = db
        self.logger = logger

    async def create_batch(self, opt: CreateBatchOptions) -> str:
        data = dict(opt.data)
        data["post_ids"] = [i for i in map(to_uuid, data.get("post_ids") or []) if i]

        try:
            async with self.db.get_session() as session:
                record = AnalysisBatch(**data)
                session.add(record)
                await session.commit()
                await session.refresh(record)
                return str(record.id)

        except SQLAlchemyError as exc:
            self.logger.error(
                f"internal.insight.repository.postgre.insight.create_batch: {exc}"
            )
            raise ErrFailedToCreate(exc) from exc

    async def create_themes(self, opt: CreateManyOptions) -> int:
        return await self._create_many(Theme, opt, "create_themes")

    async def create_snapshot(self, opt: CreateSnapshotOptions) -> None:
        try:
            async with self.db.get_session() as session:
                session.add(SentimentSnapshot(**with_batch(opt.data, opt.batch_id)))
                await session.commit()

        except SQLAlchemyError as exc:
            self.logger.error(
                f"internal.insight.repository.postgre.insight.create_snapshot: {exc}"
            )
            raise ErrFailedToCreate(exc) from exc

    async def create_competitor_mentions(self, opt: CreateManyOptions) -> int:
        return await self._create_many(CompetitorMention, opt, "create_competitor_mentions")

    async def create_communities(self, opt: CreateManyOptions) -> int:
        return await self._create_many(Community, opt, "create_communities")

    async def _create_many(self, model, opt: CreateManyOptions, op: str) -> int:
        if not opt.data:
            return 0

        try:
            async with self.db.get_session() as session:
                session.add_all([model(**with_batch(row, opt.batch_id)) for row in opt.data])
                await session.commit()
                return len(opt.data)

        except SQLAlchemyError as exc:
            self.logger.error(f"internal.insight.repository.postgre.insight.{op}: {exc}")
            raise ErrFailedToCreate(exc) from exc

    async def list_snapshots(self, opt: ListWindowOptions) -> List[SentimentSnapshot]:
        return await self._list(build_list_snapshots_query(opt), "list_snapshots")

    async def list_themes(self, opt: ListWindowOptions) -> List[Theme]:
        return await self._list(build_list_themes_query(opt), "list_themes")

    async def list_competitor_mentions(
        self, opt: ListWindowOptions
    ) -> List[CompetitorMention]:
        return await self._list(
            build_list_competitor_mentions_query(opt), "list_competitor_mentions"
        )

    async def list_communities(self, opt: ListWindowOptions) -> List[Community]:
        return await self._list(build_list_communities_query(opt), "list_communities")

    async def count_communities_by_name(self, opt: ListWindowOptions) -> Dict[str, int]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_count_communities_by_name_query(opt))
                return {key: int(count) for key, count in result.all()}

        except SQLAlchemyError as exc:
            self.logger.error(
                f"internal.insight.repository.postgre.insight.count_communities_by_name: {exc}"
            )
            raise ErrFailedToGet(exc) from exc

    async def _list(self, stmt, op: str) -> list:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(stmt)
                return list(result.scalars().all())

        except SQLAlchemyError as exc:
            self.logger.error(f"internal.insight.repository.postgre.insight.{op}: {exc}")
            raise ErrFailedToGet(exc) from exc


__all__ = ["InsightPostgresRepository"]
