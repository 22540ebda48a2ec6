from typing import Optional, Protocol, runtime_checkable

from .type import DigestView


@runtime_checkable
class IDigestUseCase(Protocol):
    async def generate(self, digest_type: str) -> str:
        """Generate and persist a digest, returning its id."""
        ...

    async def latest(self, digest_type: str) -> Optional[DigestView]:
        """Most recently generated digest of the given type, if any."""
        ...


__all__ = ["IDigestUseCase"]
