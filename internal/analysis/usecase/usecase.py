from typing import Sequence

from pkg.logger.logger import Logger
from pkg.llm.interface import ITextGeneration
from internal.model.post import Post
from ..interface import IAnalysisUseCase
from ..type import AnalysisResult
from .analyze import analyze as _analyze


class AnalysisUseCase(IAnalysisUseCase):
    def __init__(
        self,
        llm: ITextGeneration,
        logger: Logger,
        content_char_budget: int,
    ) -> None:
        self.llm = llm
        self.logger = logger
        self.content_char_budget = content_char_budget

    async def analyze(self, posts: Sequence[Post]) -> AnalysisResult:
        return await _analyze(self, posts)
