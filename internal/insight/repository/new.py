from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.insight import InsightPostgresRepository


def New(
    db: PostgresDatabase,
    logger: Logger,
) -> InsightPostgresRepository:
    return InsightPostgresRepository(db=db, logger=logger)


__all__ = ["New"]
