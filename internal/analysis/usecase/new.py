from pkg.logger.logger import Logger
from pkg.llm.interface import ITextGeneration
from ..interface import IAnalysisUseCase
from ..constant import DEFAULT_CONTENT_CHAR_BUDGET
from .usecase import AnalysisUseCase


def New(
    llm: ITextGeneration,
    logger: Logger,
    content_char_budget: int = DEFAULT_CONTENT_CHAR_BUDGET,
) -> IAnalysisUseCase:
    if content_char_budget <= 0:
        raise ValueError("content_char_budget must be > 0")
    return AnalysisUseCase(
        llm=llm, logger=logger, content_char_budget=content_char_budget
    )


__all__ = ["New"]
