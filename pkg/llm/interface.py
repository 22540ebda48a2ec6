"""Interface for text generation."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ITextGeneration(Protocol):
    """Protocol for a system-instruction + prompt -> text capability."""

    async def generate(self, system: str, prompt: str) -> str:
        """Return the model's text response.

        Raises:
            LLMError: If the call fails, times out or yields no text
        """
        ...


__all__ = ["ITextGeneration"]
