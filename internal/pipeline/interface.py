from datetime import datetime
from typing import List, Optional, Protocol, Sequence, runtime_checkable

from internal.model.alert import Alert
from internal.dashboard.type import DashboardData
from internal.digest.type import DigestView
from internal.post.type import PostSummary
from .type import PipelineResult


@runtime_checkable
class IPipelineUseCase(Protocol):
    """Orchestration entry point and the read surface behind the HTTP layer."""

    async def run(self) -> PipelineResult: ...

    async def run_daily_digest(self) -> str: ...

    async def run_weekly_digest(self) -> str: ...

    async def get_dashboard_data(self) -> DashboardData: ...

    async def get_active_alerts(self, limit: Optional[int] = None) -> List[Alert]: ...

    async def acknowledge_alert(self, alert_id: str) -> bool: ...

    async def get_posts_by_ids(self, ids: Sequence[str]) -> List[PostSummary]: ...

    async def get_latest_digest(self, digest_type: str) -> Optional[DigestView]: ...


__all__ = ["IPipelineUseCase"]
