from typing import Protocol, Sequence, runtime_checkable

from internal.analysis.type import AnalysisResult
from internal.model.post import Post


@runtime_checkable
class IInsightUseCase(Protocol):
    async def save_batch(self, result: AnalysisResult, posts: Sequence[Post]) -> str: ...


__all__ = ["IInsightUseCase"]
