from pkg.llm.interface import ITextGeneration
from pkg.logger.logger import Logger
from internal.dashboard.interface import IDashboardUseCase
from ..interface import IDigestUseCase
from ..repository.interface import IDigestRepository
from .usecase import DigestUseCase


def New(
    repository: IDigestRepository,
    dashboard_usecase: IDashboardUseCase,
    llm: ITextGeneration,
    logger: Logger,
) -> IDigestUseCase:
    return DigestUseCase(
        repository=repository,
        dashboard_usecase=dashboard_usecase,
        llm=llm,
        logger=logger,
    )


__all__ = ["New"]
