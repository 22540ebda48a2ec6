"""Unit tests for the dashboard aggregation.

Tests cover:
- Community trend and volume classification
- Community merge by normalized name, last activity wins
- Competitor and platform aggregation
- Timestamp sanitation in the payload
- Degradation when the store is empty or a section read fails
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from config.config import DashboardConfig
from internal.dashboard import (
    DashboardData,
    NewDashboardUseCase,
    aggregate_competitor_stats,
    aggregate_platform_counts,
    classify_trend,
    classify_volume,
    merge_communities,
    to_valid_iso,
)
from internal.dashboard.helpers import count_by_key, to_community_summaries
from internal.dashboard.type import AlertView
from internal.insight.repository.errors import ErrFailedToGet

NOW = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)


def community(name: str, activity, size: str = "medium", **overrides) -> SimpleNamespace:
    fields = {
        "id": f"id-{name}-{activity}",
        "name": name,
        "description": "desc",
        "primary_platform": "reddit",
        "audience_type": "developer",
        "estimated_size": size,
        "key_topics": ["latency"],
        "sentiment_toward_claude": 0.1,
        "last_activity_at": activity,
        "notes": {"key_concerns": ["latency"], "opportunities": [], "gathering_places": []},
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestClassification:
    """Tests for trend and volume labels."""

    @pytest.mark.parametrize(
        "current,previous,expected",
        [(5, 2, "growing"), (2, 5, "shrinking"), (3, 3, "stable"), (0, 0, "stable")],
    )
    def test_trend(self, current, previous, expected):
        assert classify_trend(current, previous) == expected

    @pytest.mark.parametrize(
        "size,current,expected",
        [
            ("large", 0, "loud"),
            ("medium", 3, "loud"),
            ("small", 1, "quiet"),
            ("small", 2, "medium"),
            ("medium", 2, "medium"),
            (None, 0, "medium"),
        ],
    )
    def test_volume(self, size, current, expected):
        assert classify_volume(size, current) == expected


class TestCommunityMerge:
    """Tests for merging community rows across batches."""

    def test_latest_activity_wins_per_normalized_name(self):
        old = community("r/LocalLLaMA", NOW - timedelta(days=2), size="small")
        new = community(" r/localllama ", NOW - timedelta(hours=1), size="large")
        other = community("HN", NOW - timedelta(days=1))

        merged = merge_communities([old, other, new])

        assert [c.id for c in merged] == [new.id, other.id]

    def test_unparsable_activity_loses(self):
        bad = community("HN", "not a date")
        good = community("hn", NOW)

        assert merge_communities([bad, good]) == [good]

    def test_summaries_classify_against_previous_window(self):
        rows = [community("HN", NOW - timedelta(hours=h)) for h in range(1, 6)]

        summaries = to_community_summaries(rows, count_by_key(rows), {"hn": 2})

        assert len(summaries) == 1
        assert summaries[0].trend == "growing"
        assert summaries[0].volume_indicator == "loud"
        assert summaries[0].notes_parsed["key_concerns"] == ["latency"]


class TestAggregation:
    """Tests for competitor and platform aggregation."""

    def test_competitor_stats_mean_and_order(self):
        stats = aggregate_competitor_stats(
            [("openai", 0.5), ("google", -1.0), ("openai", -0.1), ("google", 0.0), ("openai", 0.2)]
        )

        assert [(s.competitor, s.mentions) for s in stats] == [("openai", 3), ("google", 2)]
        assert stats[0].avg_sentiment == pytest.approx(0.2)
        assert stats[0].to_dict()["avgSentiment"] == pytest.approx(0.2)

    def test_platform_counts_fold_missing_platform(self):
        counts = aggregate_platform_counts([("reddit", 4), (None, 1), ("bluesky", 2)])

        assert counts == {"reddit": 4, "unknown": 1, "bluesky": 2}


class TestSanitation:
    """Tests for timestamp rendering."""

    def test_invalid_timestamp_becomes_now(self):
        assert to_valid_iso("garbage", NOW) == NOW.isoformat()
        assert to_valid_iso(None, NOW) == NOW.isoformat()

    def test_valid_timestamp_is_kept(self):
        assert to_valid_iso("2024-05-01T10:00:00Z", NOW) == "2024-05-01T10:00:00+00:00"

    def test_payload_never_carries_invalid_dates(self):
        data = DashboardData(
            alerts=[
                AlertView(
                    id="a1",
                    alert_type="pr_risk",
                    severity="high",
                    title="t",
                    description="d",
                    created_at="not-a-date",
                )
            ]
        )

        payload = data.to_dict()

        created = payload["alerts"][0]["created_at"]
        assert datetime.fromisoformat(created).tzinfo is not None
        assert payload["latestPostAt"] is None

    def test_latest_post_at_null_only_when_absent(self):
        kept = DashboardData(latest_post_at="2024-05-01T10:00:00Z").to_dict()
        sanitized = DashboardData(latest_post_at="not-a-date").to_dict()

        assert kept["latestPostAt"] == "2024-05-01T10:00:00+00:00"
        assert datetime.fromisoformat(sanitized["latestPostAt"]).tzinfo is not None


class TestGetDashboardData:
    """Tests for the dashboard use case."""

    @pytest.fixture
    def insight_repository(self):
        repo = AsyncMock()
        repo.list_snapshots.return_value = []
        repo.list_themes.return_value = []
        repo.list_competitor_mentions.return_value = []
        repo.list_communities.return_value = []
        repo.count_communities_by_name.return_value = {}
        return repo

    @pytest.fixture
    def post_repository(self):
        repo = AsyncMock()
        repo.count_by_platform.return_value = []
        repo.latest_posted_at.return_value = None
        return repo

    @pytest.fixture
    def alert_usecase(self):
        usecase = AsyncMock()
        usecase.list_active.return_value = []
        return usecase

    @pytest.fixture
    def usecase(self, insight_repository, post_repository, alert_usecase, logger):
        return NewDashboardUseCase(
            insight_repository=insight_repository,
            post_repository=post_repository,
            alert_usecase=alert_usecase,
            logger=logger,
            config=DashboardConfig(),
        )

    @pytest.mark.asyncio
    async def test_empty_store_yields_empty_sections(self, usecase):
        payload = (await usecase.get_dashboard_data()).to_dict()

        for key in ("sentimentTrend", "themes", "competitorStats", "alerts", "communities"):
            assert payload[key] == []
        assert payload["platformCounts"] == {}
        assert payload["latestPostAt"] is None
        assert payload["lastUpdated"]

    @pytest.mark.asyncio
    async def test_failing_section_degrades_to_empty(
        self, usecase, insight_repository, post_repository, logger
    ):
        insight_repository.list_themes.side_effect = ErrFailedToGet("themes table gone")
        post_repository.count_by_platform.return_value = [("reddit", 3)]

        data = await usecase.get_dashboard_data()

        assert data.themes == []
        assert data.platform_counts == {"reddit": 3}
        logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_windows_passed_to_reads(self, usecase, insight_repository, alert_usecase):
        await usecase.get_dashboard_data()

        themes_opt = insight_repository.list_themes.await_args.args[0]
        assert themes_opt.limit == 10
        previous_opt = insight_repository.count_communities_by_name.await_args.args[0]
        assert previous_opt.until - previous_opt.since == timedelta(days=7)
        alert_usecase.list_active.assert_awaited_once_with(limit=10)
