from contextlib import asynccontextmanager
from typing import AsyncGenerator

from loguru import logger
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from .interface import IDatabase
from .type import PostgresConfig
from .constant import *


def to_asyncpg_url(url: str) -> str:
    """Rewrite plain PostgreSQL URLs to the asyncpg driver."""
    for prefix in PLAIN_URL_PREFIXES:
        if url.startswith(prefix):
            return ASYNCPG_URL_PREFIX + url[len(prefix):]
    return url


class PostgresDatabase(IDatabase):
    """Async engine and session factory shared by every repository.

    One instance is created at process start. The schema from the config is
    placed first on the search_path of each session.
    """

    def __init__(self, config: PostgresConfig):
        self.config = config
        self.engine = create_async_engine(
            to_asyncpg_url(config.database_url), **self._engine_options()
        )
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=True,
        )
        logger.info(f"PostgreSQL engine initialized (schema={config.schema})")

    def _engine_options(self) -> dict:
        options = {
            "echo": self.config.echo,
            "pool_pre_ping": self.config.pool_pre_ping,
            "pool_recycle": self.config.pool_recycle,
        }
        # SQL echo is a debugging mode; connections are not pooled there
        if self.config.echo:
            options["poolclass"] = NullPool
        else:
            options["pool_size"] = self.config.pool_size
            options["max_overflow"] = self.config.max_overflow
        return options

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session; it is rolled back if the block raises.

        Raises:
            RuntimeError: If the database has been closed
        """
        if self.session_factory is None:
            raise RuntimeError(ERROR_DATABASE_NOT_INITIALIZED)

        async with self.session_factory() as session:
            try:
                if self.config.schema != DEFAULT_SCHEMA:
                    await session.execute(
                        text(f"SET search_path TO {self.config.schema}, {DEFAULT_SCHEMA}")
                    )
                yield session
            except Exception as e:
                logger.error(f"Database session error: {e}")
                await session.rollback()
                raise

    async def health_check(self) -> bool:
        try:
            async with self.get_session() as session:
                result = await session.execute(text("SELECT 1"))
                return result.scalar() == 1
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
            self.session_factory = None
            logger.info("PostgreSQL engine closed")


__all__ = [
    "PostgresDatabase",
    "to_asyncpg_url",
]
