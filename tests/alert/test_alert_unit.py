"""Unit tests for the alert rule engine and alert store.

Tests cover:
- Sentiment spike thresholds (strict comparisons, severity tiers)
- Emerging theme rule (frequency floor, severity tiers)
- Ordering of rule alerts before model alerts, no deduplication
- Acknowledge idempotence and list ordering query
"""

import uuid
from types import SimpleNamespace
from typing import Dict
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.dialects import postgresql

from internal.alert import ErrInvalidInput, NewAlertUseCase, evaluate
from internal.alert.repository.postgre.alert_query import (
    build_acknowledge_query,
    build_list_active_query,
)
from internal.alert.repository.postgre.helpers import transform_to_alert
from internal.alert.repository.option import ListActiveOptions
from internal.alert.type import AlertCandidate


def emerging_theme(frequency: int, sentiment: float, **overrides) -> Dict:
    theme = {
        "name": "Rate limits",
        "description": "Users hitting limits",
        "frequency": frequency,
        "sentiment": sentiment,
        "audience_type": "developer",
        "is_emerging": True,
        "example_post_ids": ["p9"],
        "why_it_matters": "Churn risk",
    }
    theme.update(overrides)
    return theme


def breakdown(overall: float) -> Dict:
    return {
        "overall": overall,
        "positive_count": 0,
        "neutral_count": 0,
        "negative_count": 3,
        "key_drivers": ["outage", "pricing"],
    }


# ============================================================================
# Rules
# ============================================================================


class TestSentimentSpikeRule:
    """Tests for the overall-sentiment rule."""

    def test_medium_between_thresholds(self, make_result):
        alerts = evaluate(make_result(sentiment_breakdown=breakdown(-0.4), themes=[]))

        assert len(alerts) == 1
        alert = alerts[0]
        assert alert.alert_type == "sentiment_spike"
        assert alert.severity == "medium"
        assert alert.title == "Negative Sentiment Spike Detected"
        assert alert.description == (
            "Overall sentiment dropped to -0.40. Key drivers: outage, pricing"
        )
        assert alert.recommended_action == (
            "Review negative posts and assess if response is needed"
        )
        assert alert.related_post_ids == []

    def test_high_below_lower_threshold(self, make_result):
        alerts = evaluate(make_result(sentiment_breakdown=breakdown(-0.6), themes=[]))

        assert [a.severity for a in alerts] == ["high"]

    def test_thresholds_are_strict(self, make_result):
        assert evaluate(make_result(sentiment_breakdown=breakdown(-0.3), themes=[])) == []

        alerts = evaluate(make_result(sentiment_breakdown=breakdown(-0.5), themes=[]))
        assert [a.severity for a in alerts] == ["medium"]


class TestEmergingThemeRule:
    """Tests for the emerging theme rule."""

    def test_frequency_three_negative_is_high(self, make_result):
        alerts = evaluate(make_result(themes=[emerging_theme(3, -0.3)]))

        assert len(alerts) == 1
        alert = alerts[0]
        assert alert.alert_type == "emerging_theme"
        assert alert.severity == "high"
        assert alert.title == "Emerging Theme: Rate limits"
        assert alert.description == "Users hitting limits"
        assert alert.recommended_action == "Churn risk"
        assert alert.related_post_ids == ["p9"]

    def test_mild_sentiment_is_medium(self, make_result):
        alerts = evaluate(make_result(themes=[emerging_theme(5, -0.2)]))

        assert [a.severity for a in alerts] == ["medium"]

    def test_below_frequency_floor_is_ignored(self, make_result):
        assert evaluate(make_result(themes=[emerging_theme(2, -0.9)])) == []

    def test_non_emerging_is_ignored(self, make_result):
        themes = [emerging_theme(10, -0.9, is_emerging=False)]
        assert evaluate(make_result(themes=themes)) == []


class TestEvaluate:
    """Tests for combining rule and model alerts."""

    def test_rule_alerts_precede_model_alerts_without_dedup(self, make_result):
        model_alert = {
            "type": "sentiment_spike",
            "severity": "critical",
            "title": "Model sees a spike",
            "description": "Same event",
            "recommended_action": "Escalate",
            "related_post_ids": ["p1"],
        }
        result = make_result(
            sentiment_breakdown=breakdown(-0.6),
            themes=[emerging_theme(4, 0.1)],
            alerts=[model_alert],
        )

        alerts = evaluate(result)

        assert [(a.alert_type, a.severity) for a in alerts] == [
            ("sentiment_spike", "high"),
            ("emerging_theme", "medium"),
            ("sentiment_spike", "critical"),
        ]
        assert alerts[2].recommended_action == "Escalate"

    def test_evaluate_does_not_mutate_result(self, make_result):
        result = make_result(sentiment_breakdown=breakdown(-0.6))
        before = result.model_dump()

        evaluate(result)

        assert result.model_dump() == before


# ============================================================================
# Use case and queries
# ============================================================================


class FakeAlertRepository:
    """Alert store honoring the flip-once acknowledge rule."""

    def __init__(self) -> None:
        self.rows: Dict[str, SimpleNamespace] = {}

    async def create_many(self, opt) -> int:
        for item in opt.data:
            row = SimpleNamespace(id=uuid.uuid4(), is_acknowledged=False, **transform_to_alert(item, opt.batch_id))
            self.rows[str(row.id)] = row
        return len(opt.data)

    async def acknowledge(self, opt) -> bool:
        row = self.rows.get(opt.id)
        if row is None or row.is_acknowledged:
            return False
        row.is_acknowledged = True
        return True

    async def list_active(self, opt) -> list:
        return [r for r in self.rows.values() if not r.is_acknowledged]


class TestAlertUseCase:
    """Tests for saving, listing and acknowledging alerts."""

    @pytest.fixture
    def repository(self):
        return FakeAlertRepository()

    @pytest.fixture
    def usecase(self, repository, logger):
        return NewAlertUseCase(repository=repository, logger=logger)

    @pytest.mark.asyncio
    async def test_save_keeps_recommended_action_in_metadata(self, usecase, repository):
        batch_id = str(uuid.uuid4())
        candidate = AlertCandidate(
            alert_type="pr_risk",
            severity="high",
            title="Outage",
            recommended_action="Post status update",
            related_post_ids=["p1"],
        )

        assert await usecase.save([candidate], batch_id=batch_id) == 1

        row = next(iter(repository.rows.values()))
        assert row.alert_metadata == {"recommended_action": "Post status update"}
        assert str(row.batch_id) == batch_id
        assert row.related_posts == ["p1"]

    @pytest.mark.asyncio
    async def test_save_nothing(self, usecase):
        assert await usecase.save([]) == 0

    @pytest.mark.asyncio
    async def test_acknowledge_twice_is_a_noop(self, usecase, repository):
        await usecase.save([AlertCandidate(alert_type="pr_risk", severity="low", title="x")])
        alert_id = next(iter(repository.rows))

        assert await usecase.acknowledge(alert_id) is True
        assert await usecase.acknowledge(alert_id) is False
        assert repository.rows[alert_id].is_acknowledged is True
        assert await usecase.list_active() == []

    @pytest.mark.asyncio
    async def test_unknown_id_is_a_noop(self, usecase):
        assert await usecase.acknowledge(str(uuid.uuid4())) is False

    @pytest.mark.asyncio
    async def test_non_positive_limit_is_rejected(self):
        usecase = NewAlertUseCase(repository=AsyncMock(), logger=AsyncMock())

        with pytest.raises(ErrInvalidInput):
            await usecase.list_active(limit=0)


class TestAlertQueries:
    """Tests for the alert SQL statements."""

    def test_list_active_orders_by_severity_rank_then_recency(self):
        sql = str(
            build_list_active_query(ListActiveOptions(limit=10)).compile(
                dialect=postgresql.dialect()
            )
        )

        assert "alerts.is_acknowledged IS false" in sql
        order_by = sql.split("ORDER BY", 1)[1]
        assert order_by.index("CASE") < order_by.index("alerts.created_at DESC")
        assert "LIMIT" in sql

    def test_acknowledge_only_touches_unacknowledged_rows(self):
        sql = str(build_acknowledge_query(uuid.uuid4()).compile(dialect=postgresql.dialect()))

        assert sql.startswith("UPDATE alerts SET")
        assert "alerts.is_acknowledged IS false" in sql
        assert "acknowledged_at=now()" in sql
