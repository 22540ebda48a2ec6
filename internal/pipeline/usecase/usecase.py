from typing import List, Optional, Sequence

from pkg.logger.logger import Logger
from internal.model.alert import Alert
from internal.collector.interface import ICollectorUseCase
from internal.post.interface import IPostUseCase
from internal.post.type import PostSummary
from internal.analysis.interface import IAnalysisUseCase
from internal.insight.interface import IInsightUseCase
from internal.alert.interface import IAlertUseCase
from internal.dashboard.interface import IDashboardUseCase
from internal.dashboard.type import DashboardData
from internal.digest.interface import IDigestUseCase
from internal.digest.type import DigestView
from ..interface import IPipelineUseCase
from ..type import PipelineResult
from .run import run as _run
from .run_digest import run_daily_digest as _run_daily_digest
from .run_digest import run_weekly_digest as _run_weekly_digest


class PipelineUseCase(IPipelineUseCase):
    def __init__(
        self,
        collector_usecase: ICollectorUseCase,
        post_usecase: IPostUseCase,
        analysis_usecase: IAnalysisUseCase,
        insight_usecase: IInsightUseCase,
        alert_usecase: IAlertUseCase,
        dashboard_usecase: IDashboardUseCase,
        digest_usecase: IDigestUseCase,
        logger: Logger,
        window_hours: int,
    ) -> None:
        self.collector_usecase = collector_usecase
        self.post_usecase = post_usecase
        self.analysis_usecase = analysis_usecase
        self.insight_usecase = insight_usecase
        self.alert_usecase = alert_usecase
        self.dashboard_usecase = dashboard_usecase
        self.digest_usecase = digest_usecase
        self.logger = logger
        self.window_hours = window_hours

    async def run(self) -> PipelineResult:
        return await _run(self)

    async def run_daily_digest(self) -> str:
        return await _run_daily_digest(self)

    async def run_weekly_digest(self) -> str:
        return await _run_weekly_digest(self)

    async def get_dashboard_data(self) -> DashboardData:
        return await self.dashboard_usecase.get_dashboard_data()

    async def get_active_alerts(self, limit: Optional[int] = None) -> List[Alert]:
        return await self.alert_usecase.list_active(limit)

    async def acknowledge_alert(self, alert_id: str) -> bool:
        return await self.alert_usecase.acknowledge(alert_id)

    async def get_posts_by_ids(self, ids: Sequence[str]) -> List[PostSummary]:
        return await self.post_usecase.get_by_ids(ids)

    async def get_latest_digest(self, digest_type: str) -> Optional[DigestView]:
        return await self.digest_usecase.latest(digest_type)
