import asyncio

from loguru import logger
from openai import AsyncOpenAI, OpenAIError

from .interface import ITextGeneration
from .type import LLMConfig
from .constant import *


class LLMError(Exception):
    """Raised when a generation call fails, times out or returns nothing."""


class OpenAILLM(ITextGeneration):
    """Chat-completions client for OpenAI-compatible endpoints.

    Each ``generate`` call is a single request with no internal retry;
    retry policy belongs to the caller.
    """

    def __init__(self, config: LLMConfig, client: AsyncOpenAI = None):
        self.config = config
        self.client = client or AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            max_retries=0,
        )
        logger.info(f"LLM client initialized (model={config.model})")

    async def generate(self, system: str, prompt: str) -> str:
        try:
            response = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=self.config.model,
                    max_tokens=self.config.max_tokens,
                    temperature=self.config.temperature,
                    messages=[
                        {"role": "system", "content": system},
                        {"role": "user", "content": prompt},
                    ],
                ),
                timeout=self.config.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise LLMError(
                f"generation timed out after {self.config.timeout_seconds}s"
            ) from exc
        except OpenAIError as exc:
            raise LLMError(f"generation failed: {exc}") from exc

        choices = response.choices or []
        text = choices[0].message.content if choices else None
        if not text:
            raise LLMError(ERROR_EMPTY_RESPONSE)

        return text

    async def close(self) -> None:
        await self.client.close()


__all__ = [
    "OpenAILLM",
    "LLMError",
]
