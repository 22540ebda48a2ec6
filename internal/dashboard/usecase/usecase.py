from config.config import DashboardConfig
from pkg.logger.logger import Logger
from internal.insight.repository.interface import IInsightRepository
from internal.post.repository.interface import IPostRepository
from internal.alert.interface import IAlertUseCase
from ..interface import IDashboardUseCase
from ..type import DashboardData
from .get_dashboard_data import get_dashboard_data as _get_dashboard_data


class DashboardUseCase(IDashboardUseCase):
    def __init__(
        self,
        insight_repository: IInsightRepository,
        post_repository: IPostRepository,
        alert_usecase: IAlertUseCase,
        config: DashboardConfig,
        logger: Logger,
    ) -> None:
        self.insight_repository = insight_repository
        self.post_repository = post_repository
        self.alert_usecase = alert_usecase
        self.config = config
        self.logger = logger

    async def get_dashboard_data(self) -> DashboardData:
        return await _get_dashboard_data(self)
