import httpx

from pkg.logger.logger import Logger, LoggerConfig
from pkg.postgre.postgres import PostgresDatabase
from pkg.postgre.type import PostgresConfig
from pkg.llm.llm import OpenAILLM
from pkg.llm.type import LLMConfig
from config.config import Config
from .type import Dependencies


async def init_dependencies(config: Config) -> Dependencies:
    """Initialize all service dependencies.

    Args:
        config: Application configuration

    Returns:
        Dependencies struct with all initialized instances

    Raises:
        RuntimeError: If the database is unreachable
    """
    logger = Logger(
        LoggerConfig(
            level=config.logging.level,
            colorize=config.logging.colorize,
        )
    )
    logger.info("Logger initialized")

    db = PostgresDatabase(
        PostgresConfig(
            database_url=config.database.url,
            schema=config.database.schema,
            pool_size=config.database.pool_size,
            max_overflow=config.database.max_overflow,
        )
    )
    if not await db.health_check():
        raise RuntimeError("PostgreSQL health check failed")
    logger.info("PostgreSQL connection verified")

    http_client = httpx.AsyncClient(
        timeout=config.collector.request_timeout_seconds,
        headers={"User-Agent": config.collector.user_agent},
        follow_redirects=True,
    )
    logger.info("HTTP client initialized")

    llm = OpenAILLM(
        LLMConfig(
            api_key=config.llm.api_key,
            model=config.llm.model,
            base_url=config.llm.base_url,
            max_tokens=config.llm.max_tokens,
            timeout_seconds=config.llm.timeout_seconds,
        )
    )
    logger.info("LLM client initialized")

    return Dependencies(
        logger=logger,
        db=db,
        http_client=http_client,
        llm=llm,
        config=config,
    )


async def close_dependencies(deps: Dependencies) -> None:
    """Release network resources; each close is attempted independently."""
    logger = deps.logger
    for name, close in (
        ("HTTP client", deps.http_client.aclose),
        ("LLM client", deps.llm.close),
        ("PostgreSQL", deps.db.close),
    ):
        try:
            await close()
        except Exception as e:
            logger.error(f"Error closing {name}: {e}")


__all__ = ["init_dependencies", "close_dependencies"]
