from typing import Optional

from config.config import DashboardConfig
from pkg.logger.logger import Logger
from internal.insight.repository.interface import IInsightRepository
from internal.post.repository.interface import IPostRepository
from internal.alert.interface import IAlertUseCase
from ..interface import IDashboardUseCase
from .usecase import DashboardUseCase


def New(
    insight_repository: IInsightRepository,
    post_repository: IPostRepository,
    alert_usecase: IAlertUseCase,
    logger: Logger,
    config: Optional[DashboardConfig] = None,
) -> IDashboardUseCase:
    return DashboardUseCase(
        insight_repository=insight_repository,
        post_repository=post_repository,
        alert_usecase=alert_usecase,
        config=config or DashboardConfig(),
        logger=logger,
    )


__all__ = ["New"]
