from datetime import timedelta
from typing import Awaitable, TypeVar

from internal.model.timestamp import utc_now
from internal.insight.repository.option import ListWindowOptions
from internal.insight.repository.errors import RepositoryError as InsightRepositoryError
from internal.post.repository.option import CountByPlatformOptions
from internal.post.repository.errors import RepositoryError as PostRepositoryError
from internal.alert.repository.errors import RepositoryError as AlertRepositoryError
from ..helpers import (
    aggregate_competitor_stats,
    aggregate_platform_counts,
    count_by_key,
    to_sentiment_trend,
    to_theme_views,
    to_alert_views,
    to_community_summaries,
)
from ..type import DashboardData

T = TypeVar("T")

_READ_ERRORS = (InsightRepositoryError, PostRepositoryError, AlertRepositoryError)


async def get_dashboard_data(self) -> DashboardData:
    """Build the dashboard snapshot.

    A section whose read fails is logged and rendered empty; the snapshot
    itself is always returned.
    """
    now = utc_now()
    lookback = timedelta(days=self.config.lookback_days)
    since = now - lookback

    snapshots = await _section(
        self,
        "sentiment_trend",
        self.insight_repository.list_snapshots(ListWindowOptions(since=since)),
        [],
    )
    themes = await _section(
        self,
        "themes",
        self.insight_repository.list_themes(
            ListWindowOptions(since=since, limit=self.config.max_themes)
        ),
        [],
    )
    mentions = await _section(
        self,
        "competitor_stats",
        self.insight_repository.list_competitor_mentions(ListWindowOptions(since=since)),
        [],
    )
    alerts = await _section(
        self, "alerts", self.alert_usecase.list_active(limit=self.config.max_alerts), []
    )
    platform_rows = await _section(
        self,
        "platform_counts",
        self.post_repository.count_by_platform(
            CountByPlatformOptions(
                since=now - timedelta(hours=self.config.platform_window_hours)
            )
        ),
        [],
    )
    communities = await _section(
        self,
        "communities",
        self.insight_repository.list_communities(ListWindowOptions(since=since)),
        [],
    )
    previous_counts = await _section(
        self,
        "communities.previous",
        self.insight_repository.count_communities_by_name(
            ListWindowOptions(since=since - lookback, until=since)
        ),
        {},
    )
    latest_post_at = await _section(
        self, "latest_post_at", self.post_repository.latest_posted_at(), None
    )

    return DashboardData(
        sentiment_trend=to_sentiment_trend(snapshots),
        themes=to_theme_views(themes),
        competitor_stats=aggregate_competitor_stats(
            (m.competitor, m.sentiment) for m in mentions
        ),
        alerts=to_alert_views(alerts),
        platform_counts=aggregate_platform_counts(platform_rows),
        communities=to_community_summaries(
            communities, count_by_key(communities), previous_counts
        ),
        last_updated=now,
        latest_post_at=latest_post_at,
    )


async def _section(self, name: str, read: Awaitable[T], empty: T) -> T:
    try:
        result = await read
    except _READ_ERRORS as exc:
        self.logger.error(
            f"internal.dashboard.usecase.get_dashboard_data: {name} unavailable: {exc}"
        )
        return empty
    return result if result is not None else empty
