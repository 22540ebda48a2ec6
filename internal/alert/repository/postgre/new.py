from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .alert import AlertPostgresRepository


def New(
    db: PostgresDatabase,
    logger: Logger,
) -> AlertPostgresRepository:
    return AlertPostgresRepository(db=db, logger=logger)


__all__ = ["New"]
