from pkg.logger.logger import Logger
from internal.collector.interface import ICollectorUseCase
from internal.post.interface import IPostUseCase
from internal.analysis.interface import IAnalysisUseCase
from internal.insight.interface import IInsightUseCase
from internal.alert.interface import IAlertUseCase
from internal.dashboard.interface import IDashboardUseCase
from internal.digest.interface import IDigestUseCase
from ..constant import DEFAULT_ANALYSIS_WINDOW_HOURS
from ..interface import IPipelineUseCase
from .usecase import PipelineUseCase


def New(
    collector_usecase: ICollectorUseCase,
    post_usecase: IPostUseCase,
    analysis_usecase: IAnalysisUseCase,
    insight_usecase: IInsightUseCase,
    alert_usecase: IAlertUseCase,
    dashboard_usecase: IDashboardUseCase,
    digest_usecase: IDigestUseCase,
    logger: Logger,
    window_hours: int = DEFAULT_ANALYSIS_WINDOW_HOURS,
) -> IPipelineUseCase:
    if window_hours <= 0:
        raise ValueError("window_hours must be > 0")

    return PipelineUseCase(
        collector_usecase=collector_usecase,
        post_usecase=post_usecase,
        analysis_usecase=analysis_usecase,
        insight_usecase=insight_usecase,
        alert_usecase=alert_usecase,
        dashboard_usecase=dashboard_usecase,
        digest_usecase=digest_usecase,
        logger=logger,
        window_hours=window_hours,
    )


__all__ = ["New"]
