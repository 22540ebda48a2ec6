from typing import Optional

from internal.bootstrap.type import Dependencies
from internal.collector import NewCollectorUseCase
from internal.post import NewPostUseCase
from internal.post.repository import New as NewPostRepository
from internal.analysis import NewAnalysisUseCase
from internal.insight import NewInsightUseCase
from internal.insight.repository import New as NewInsightRepository
from internal.alert import NewAlertUseCase
from internal.alert.repository import New as NewAlertRepository
from internal.dashboard import NewDashboardUseCase
from internal.digest import NewDigestUseCase
from internal.digest.repository import New as NewDigestRepository
from internal.pipeline import NewPipelineUseCase, IPipelineUseCase


class ServiceRegistry:
    """Wires repositories and use cases into the pipeline use case."""

    def __init__(self, deps: Dependencies):
        self.deps = deps
        self.logger = deps.logger
        self.config = deps.config
        self._pipeline: Optional[IPipelineUseCase] = None

    def initialize(self) -> IPipelineUseCase:
        if self._pipeline is not None:
            self.logger.debug("Returning cached pipeline")
            return self._pipeline

        db, logger = self.deps.db, self.logger

        post_repository = NewPostRepository(db=db, logger=logger)
        insight_repository = NewInsightRepository(db=db, logger=logger)
        alert_repository = NewAlertRepository(db=db, logger=logger)
        digest_repository = NewDigestRepository(db=db, logger=logger)
        self.logger.info("Repositories initialized")

        collector_usecase = NewCollectorUseCase(
            client=self.deps.http_client,
            config=self.config.collector,
            logger=logger,
        )
        post_usecase = NewPostUseCase(
            repository=post_repository,
            logger=logger,
            max_ids=self.config.dashboard.max_post_ids,
        )
        analysis_usecase = NewAnalysisUseCase(
            llm=self.deps.llm,
            logger=logger,
            content_char_budget=self.config.pipeline.content_char_budget,
        )
        insight_usecase = NewInsightUseCase(repository=insight_repository, logger=logger)
        alert_usecase = NewAlertUseCase(repository=alert_repository, logger=logger)
        dashboard_usecase = NewDashboardUseCase(
            insight_repository=insight_repository,
            post_repository=post_repository,
            alert_usecase=alert_usecase,
            logger=logger,
            config=self.config.dashboard,
        )
        digest_usecase = NewDigestUseCase(
            repository=digest_repository,
            dashboard_usecase=dashboard_usecase,
            llm=self.deps.llm,
            logger=logger,
        )
        self.logger.info("Use cases initialized")

        self._pipeline = NewPipelineUseCase(
            collector_usecase=collector_usecase,
            post_usecase=post_usecase,
            analysis_usecase=analysis_usecase,
            insight_usecase=insight_usecase,
            alert_usecase=alert_usecase,
            dashboard_usecase=dashboard_usecase,
            digest_usecase=digest_usecase,
            logger=logger,
            window_hours=self.config.pipeline.analysis_window_hours,
        )
        return self._pipeline


__all__ = ["ServiceRegistry"]
