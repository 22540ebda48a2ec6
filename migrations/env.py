"""Alembic environment: runs migrations over the async engine."""

import asyncio
import os

from alembic import context
from sqlalchemy.ext.asyncio import create_async_engine

from internal.model import Base

target_metadata = Base.metadata


def _database_url() -> str:
    url = os.getenv("SOCIAL_DATABASE_URL") or context.config.get_main_option(
        "sqlalchemy.url"
    )
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def run_migrations_offline() -> None:
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def _run(connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(_database_url())
    async with engine.connect() as connection:
        await connection.run_sync(_run)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
