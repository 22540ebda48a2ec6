from typing import Sequence

from pkg.logger.logger import Logger
from internal.analysis.type import AnalysisResult
from internal.model.post import Post
from ..repository.interface import IInsightRepository
from ..interface import IInsightUseCase
from .save_batch import save_batch as _save_batch


class InsightUseCase(IInsightUseCase):
    def __init__(self, repository: IInsightRepository, logger: Logger) -> None:
        self.repository = repository
        self.logger = logger

    async def save_batch(self, result: AnalysisResult, posts: Sequence[Post]) -> str:
        return await _save_batch(self, result, posts)
