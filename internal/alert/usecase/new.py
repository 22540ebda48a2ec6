from pkg.logger.logger import Logger
from ..repository.interface import IAlertRepository
from ..interface import IAlertUseCase
from .usecase import AlertUseCase


def New(repository: IAlertRepository, logger: Logger) -> IAlertUseCase:
    return AlertUseCase(repository=repository, logger=logger)


__all__ = ["New"]
