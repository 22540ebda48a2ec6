from dataclasses import dataclass
from typing import Optional

from .constant import *


@dataclass
class LLMConfig:
    """Configuration for the text-generation client.

    Attributes:
        api_key: Provider API key
        model: Model identifier sent with every request
        base_url: Optional OpenAI-compatible endpoint override
        max_tokens: Completion token cap
        temperature: Sampling temperature
        timeout_seconds: Hard ceiling for a single generation call
    """

    api_key: str
    model: str = DEFAULT_MODEL
    base_url: Optional[str] = None
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self):
        if not self.api_key:
            raise ValueError(ERROR_API_KEY_EMPTY)
        if not self.model or not self.model.strip():
            raise ValueError(ERROR_MODEL_EMPTY)
        if self.max_tokens <= 0:
            raise ValueError(ERROR_MAX_TOKENS_POSITIVE)
        if self.timeout_seconds <= 0:
            raise ValueError(ERROR_TIMEOUT_POSITIVE)


__all__ = ["LLMConfig"]
