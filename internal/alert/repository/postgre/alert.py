from __future__ import annotations

from typing import List

from sqlalchemy.exc import SQLAlchemyError

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from internal.model.alert import Alert
from ..interface import IAlertRepository
from ..option import CreateManyOptions, ListActiveOptions, AcknowledgeOptions
from ..errors import ErrFailedToCreate, ErrFailedToGet, ErrFailedToUpdate
from .alert_query import build_list_active_query, build_acknowledge_query
from .helpers import transform_to_alert, to_uuid


class AlertPostgresRepository(IAlertRepository):

    def __init__(self, db: PostgresDatabase, logger: Logger):
        self.db = db
        self.logger = logger

    async def create_many(self, opt: CreateManyOptions) -> int:
        if not opt.data:
            return 0

        records = [Alert(**transform_to_alert(item, opt.batch_id)) for item in opt.data]

        try:
            async with self.db.get_session() as session:
                session.add_all(records)
                await session.commit()
                return len(records)

        except SQLAlchemyError as exc:
            self.logger.error(f"internal.alert.repository.postgre.alert.create_many: {exc}")
            raise ErrFailedToCreate(exc) from exc

    async def list_active(self, opt: ListActiveOptions) -> List[Alert]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_active_query(opt))
                return list(result.scalars().all())

        except SQLAlchemyError as exc:
            self.logger.error(f"internal.alert.repository.postgre.alert.list_active: {exc}")
            raise ErrFailedToGet(exc) from exc

    async def acknowledge(self, opt: AcknowledgeOptions) -> bool:
        alert_id = to_uuid(opt.id)
        if alert_id is None:
            return False

        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_acknowledge_query(alert_id))
                await session.commit()
                return result.rowcount > 0

        except SQLAlchemyError as exc:
            self.logger.error(f"internal.alert.repository.postgre.alert.acknowledge: {exc}")
            raise ErrFailedToUpdate(exc) from exc


__all__ = ["AlertPostgresRepository"]
