from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.digest import DigestPostgresRepository


def New(
    db: PostgresDatabase,
    logger: Logger,
) -> DigestPostgresRepository:
    return DigestPostgresRepository(db=db, logger=logger)


__all__ = ["New"]
