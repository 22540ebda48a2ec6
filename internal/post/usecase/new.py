from pkg.logger.logger import Logger
from ..repository.interface import IPostRepository
from ..interface import IPostUseCase
from ..constant import DEFAULT_MAX_IDS
from .usecase import PostUseCase


def New(
    repository: IPostRepository,
    logger: Logger,
    max_ids: int = DEFAULT_MAX_IDS,
) -> IPostUseCase:
    return PostUseCase(repository=repository, logger=logger, max_ids=max_ids)


__all__ = ["New"]
