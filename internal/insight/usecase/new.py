from pkg.logger.logger import Logger
from ..repository.interface import IInsightRepository
from ..interface import IInsightUseCase
from .usecase import InsightUseCase


def New(repository: IInsightRepository, logger: Logger) -> IInsightUseCase:
    return InsightUseCase(repository=repository, logger=logger)


__all__ = ["New"]
