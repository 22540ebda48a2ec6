from dataclasses import dataclass

import httpx

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from pkg.llm.llm import OpenAILLM
from config.config import Config


@dataclass
class Dependencies:
    """Dependencies container shared by the API and the pipeline CLI.

    Attributes:
        logger: Logger instance for structured logging
        db: PostgreSQL database instance
        http_client: Shared HTTP client for the platform collectors
        llm: Text-generation client for analysis and digests
        config: Application configuration
    """

    logger: Logger
    db: PostgresDatabase
    http_client: httpx.AsyncClient
    llm: OpenAILLM
    config: Config


__all__ = ["Dependencies"]
