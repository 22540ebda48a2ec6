from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from internal.model.post import Post
from ..interface import IPostRepository
from ..option import (
    UpsertOptions,
    ListRecentOptions,
    ListByIdsOptions,
    CountByPlatformOptions,
)
from ..errors import ErrFailedToGet, ErrFailedToUpsert, ErrInvalidData
from .post_query import (
    build_upsert_query,
    build_list_recent_query,
    build_list_by_ids_query,
    build_count_by_platform_query,
    build_latest_posted_at_query,
)
from .helpers import transform_to_post, parse_uuids


class PostPostgresRepository(IPostRepository):

    def __init__(self, db: PostgresDatabase, logger: Logger):
        self.db = db
        self.logger = logger

    async def upsert(self, opt: UpsertOptions) -> bool:
        values = transform_to_post(opt.data)
        if not values["platform_id"] or not values["external_id"]:
            raise ErrInvalidData("platform_id and external_id are required")

        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_upsert_query(values))
                row = result.one()
                await session.commit()
                return bool(row.inserted)

        except SQLAlchemyError as exc:
            self.logger.error(f"internal.post.repository.postgre.post.upsert: {exc}")
            raise ErrFailedToUpsert(exc) from exc

    async def list_recent(self, opt: ListRecentOptions) -> List[Post]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_recent_query(opt))
                return list(result.scalars().all())

        except SQLAlchemyError as exc:
            self.logger.error(f"internal.post.repository.postgre.post.list_recent: {exc}")
            raise ErrFailedToGet(exc) from exc

    async def list_by_ids(self, opt: ListByIdsOptions) -> List[Post]:
        if not parse_uuids(opt.ids):
            return []

        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_by_ids_query(opt))
                return list(result.scalars().all())

        except SQLAlchemyError as exc:
            self.logger.error(f"internal.post.repository.postgre.post.list_by_ids: {exc}")
            raise ErrFailedToGet(exc) from exc

    async def count_by_platform(
        self, opt: CountByPlatformOptions
    ) -> List[Tuple[str, int]]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_count_by_platform_query(opt))
                return [(platform, int(count)) for platform, count in result.all()]

        except SQLAlchemyError as exc:
            self.logger.error(
                f"internal.post.repository.postgre.post.count_by_platform: {exc}"
            )
            raise ErrFailedToGet(exc) from exc

    async def latest_posted_at(self) -> Optional[datetime]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_latest_posted_at_query())
                return result.scalar_one_or_none()

        except SQLAlchemyError as exc:
            self.logger.error(
                f"internal.post.repository.postgre.post.latest_posted_at: {exc}"
            )
            raise ErrFailedToGet(exc) from exc


__all__ = ["PostPostgresRepository"]
