from typing import Protocol, Sequence, runtime_checkable

from internal.model.post import Post
from .type import AnalysisResult


@runtime_checkable
class IAnalysisUseCase(Protocol):
    async def analyze(self, posts: Sequence[Post]) -> AnalysisResult: ...


__all__ = ["IAnalysisUseCase"]
