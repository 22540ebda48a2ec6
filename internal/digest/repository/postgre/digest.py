from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from internal.model.digest import Digest
from ..interface import IDigestRepository
from ..option import CreateOptions, LatestByTypeOptions
from ..errors import ErrFailedToCreate, ErrFailedToGet
from .digest_query import build_latest_by_type_query


class DigestPostgresRepository(IDigestRepository):

    def __init__(self, db: PostgresDatabase, logger: Logger):
        self.db = db
        self.logger = logger

    async def create(self, opt: CreateOptions) -> str:
        try:
            async with self.db.get_session() as session:
                record = Digest(**opt.data)
                session.add(record)
                await session.commit()
                await session.refresh(record)
                return str(record.id)

        except SQLAlchemyError as exc:
            self.logger.error(f"internal.digest.repository.postgre.digest.create: {exc}")
            raise ErrFailedToCreate(exc) from exc

    async def latest_by_type(self, opt: LatestByTypeOptions) -> Optional[Digest]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_latest_by_type_query(opt))
                return result.scalars().first()

        except SQLAlchemyError as exc:
            self.logger.error(
                f"internal.digest.repository.postgre.digest.latest_by_type: {exc}"
            )
            raise ErrFailedToGet(exc) from exc


__all__ = ["DigestPostgresRepository"]
