"""Unit tests for the config loader, logger, database and LLM client adapters."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import OpenAIError

from config.config import ConfigLoader
from pkg.llm.llm import LLMError, OpenAILLM
from pkg.llm.type import LLMConfig
from pkg.logger.logger import Logger
from pkg.logger.type import LoggerConfig
from pkg.postgre.postgres import PostgresDatabase, to_asyncpg_url
from pkg.postgre.type import PostgresConfig


class TestConfigLoader:
    """Layering: defaults < YAML < environment."""

    @pytest.fixture
    def workdir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SOCIAL_LLM_API_KEY", "sk-test")
        return tmp_path

    def _loader(self):
        loader = ConfigLoader()
        loader.config_paths = ["."]
        return loader

    def test_defaults(self, workdir):
        config = self._loader().read_config()

        assert config.llm.api_key == "sk-test"
        assert config.pipeline.analysis_window_hours == 1
        assert "claude" in config.collector.keywords
        assert config.api.cron_secret is None

    def test_yaml_then_env(self, workdir, monkeypatch):
        (workdir / "config.yaml").write_text(
            "pipeline:\n  analysis_window_hours: 3\napi:\n  port: 9000\n"
        )
        monkeypatch.setenv("SOCIAL_API_PORT", "9100")
        monkeypatch.setenv("SOCIAL_COLLECTOR_SUBREDDITS", "ClaudeAI, LocalLLaMA")

        config = self._loader().read_config()

        assert config.pipeline.analysis_window_hours == 3
        assert config.api.port == 9100
        assert config.collector.subreddits == ["ClaudeAI", "LocalLLaMA"]

    def test_missing_api_key_fails(self, workdir, monkeypatch):
        monkeypatch.delenv("SOCIAL_LLM_API_KEY")

        with pytest.raises(ValueError, match="llm.api_key is required"):
            self._loader().read_config()


class TestLogger:
    def test_trace_context_scopes_trace_id(self):
        logger = Logger(LoggerConfig(level="DEBUG", enable_console=False))

        assert logger.get_trace_id() is None
        with logger.trace_context("run-1"):
            assert logger.get_trace_id() == "run-1"
        assert logger.get_trace_id() is None

    def test_warn_alias(self):
        assert LoggerConfig(level="warn").level.value == "WARNING"

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            LoggerConfig(level="LOUD")


class TestPostgresDatabase:
    """URL handling, config validation and health reporting; no server needed."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("postgresql://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
            ("postgres://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
            ("postgresql+asyncpg://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
        ],
    )
    def test_asyncpg_url(self, url, expected):
        assert to_asyncpg_url(url) == expected

    @pytest.mark.parametrize(
        "overrides",
        [
            {"database_url": ""},
            {"database_url": "mysql://u:p@h/db"},
            {"pool_size": 0},
            {"max_overflow": -1},
            {"schema": " "},
        ],
    )
    def test_invalid_config(self, overrides):
        options = {"database_url": "postgresql://u:p@h/db", **overrides}

        with pytest.raises(ValueError):
            PostgresConfig(**options)

    @pytest.mark.asyncio
    async def test_closed_database_is_unhealthy(self):
        db = PostgresDatabase(PostgresConfig(database_url="postgresql://u:p@localhost/db"))

        await db.close()

        assert await db.health_check() is False
        with pytest.raises(RuntimeError):
            async with db.get_session():
                pass


class TestOpenAILLM:
    """Single-call generation with errors mapped to LLMError."""

    def _llm(self, create, timeout=5.0):
        client = MagicMock()
        client.chat.completions.create = create
        return OpenAILLM(LLMConfig(api_key="sk", timeout_seconds=timeout), client=client)

    def _response(self, text):
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=text))]
        )

    @pytest.mark.asyncio
    async def test_generate(self):
        create = AsyncMock(return_value=self._response("hello"))
        llm = self._llm(create)

        assert await llm.generate("sys", "prompt") == "hello"
        messages = create.await_args.kwargs["messages"]
        assert messages[0] == {"role": "system", "content": "sys"}
        assert messages[1] == {"role": "user", "content": "prompt"}

    @pytest.mark.asyncio
    async def test_empty_response(self):
        llm = self._llm(AsyncMock(return_value=SimpleNamespace(choices=[])))

        with pytest.raises(LLMError):
            await llm.generate("sys", "prompt")

    @pytest.mark.asyncio
    async def test_provider_error(self):
        llm = self._llm(AsyncMock(side_effect=OpenAIError("rate limited")))

        with pytest.raises(LLMError, match="rate limited"):
            await llm.generate("sys", "prompt")

    @pytest.mark.asyncio
    async def test_timeout(self):
        async def slow(**kwargs):
            await asyncio.sleep(1)

        llm = self._llm(slow, timeout=0.01)

        with pytest.raises(LLMError, match="timed out"):
            await llm.generate("sys", "prompt")

    def test_config_validation(self):
        with pytest.raises(ValueError):
            LLMConfig(api_key="")
