"""Unit tests for the HTTP surface.

The pipeline use case is an AsyncMock; these tests cover request parsing,
cron authorization and response shapes only.
"""

import uuid
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from config.config import APIConfig
from internal.api.main import create_app
from internal.pipeline.type import PipelineResult

SECRET = "s3cret"
AUTH = {"Authorization": f"Bearer {SECRET}"}


@pytest.fixture
def pipeline():
    mock = AsyncMock()
    mock.run.return_value = PipelineResult(
        collected=4, analyzed=2, alerts=1, duration_ms=150, run_id="abc"
    )
    mock.run_daily_digest.return_value = "digest-daily"
    mock.run_weekly_digest.return_value = "digest-weekly"
    mock.get_latest_digest.return_value = None
    mock.get_posts_by_ids.return_value = []
    mock.get_active_alerts.return_value = []
    return mock


@pytest.fixture
def client(pipeline, logger):
    app = create_app(pipeline, logger, APIConfig(cron_secret=SECRET))
    return TestClient(app, raise_server_exceptions=False)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
        assert response.headers["X-Request-ID"]

    def test_missing_pipeline_is_unavailable(self, logger):
        client = TestClient(create_app(None, logger))

        response = client.get("/api/dashboard")

        assert response.status_code == 503
        assert response.json()["success"] is False


class TestPipelineRoute:
    """Tests for the lenient cron check on the run trigger."""

    def test_run_without_header(self, client, pipeline):
        response = client.post("/api/pipeline/run")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "collected": 4,
            "analyzed": 2,
            "alerts": 1,
            "duration": 150,
            "errors": [],
            "runId": "abc",
        }
        pipeline.run.assert_awaited_once()

    def test_run_via_get_with_secret(self, client):
        response = client.get("/api/pipeline/run", headers=AUTH)

        assert response.status_code == 200

    def test_wrong_secret_is_rejected(self, client, pipeline):
        response = client.post(
            "/api/pipeline/run", headers={"Authorization": "Bearer nope"}
        )

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Unauthorized"}
        pipeline.run.assert_not_called()

    def test_unhandled_error_returns_500_body(self, client, pipeline):
        pipeline.run.side_effect = RuntimeError("boom")

        response = client.post("/api/pipeline/run")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "boom"}


class TestPostsRoute:
    def test_ids_required(self, client):
        response = client.get("/api/posts")

        assert response.status_code == 400
        assert "ids query parameter required" in response.json()["error"]

    def test_blank_ids_return_empty_list(self, client, pipeline):
        response = client.get("/api/posts", params={"ids": " , ,"})

        assert response.status_code == 200
        assert response.json() == []
        pipeline.get_posts_by_ids.assert_not_called()

    def test_ids_are_trimmed_and_capped(self, client, pipeline):
        ids = ",".join(f" id{i} " for i in range(60))

        client.get("/api/posts", params={"ids": ids})

        wanted = pipeline.get_posts_by_ids.await_args.args[0]
        assert len(wanted) == 50
        assert wanted[0] == "id0"


class TestAlertsRoute:
    def test_list_alerts(self, client, pipeline):
        created = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        alert_id = uuid.uuid4()
        pipeline.get_active_alerts.return_value = [
            SimpleNamespace(
                id=alert_id,
                batch_id=None,
                alert_type="sentiment_spike",
                severity="high",
                title="Negative sentiment spike detected",
                description="Overall sentiment dropped",
                related_posts=[],
                alert_metadata={"recommended_action": "Investigate"},
                is_acknowledged=False,
                acknowledged_at=None,
                created_at=created,
            )
        ]

        response = client.get("/api/alerts")

        body = response.json()
        assert body["success"] is True
        assert body["alerts"][0]["id"] == str(alert_id)
        assert body["alerts"][0]["metadata"] == {"recommended_action": "Investigate"}
        assert body["alerts"][0]["created_at"] == "2024-05-01T12:00:00+00:00"

    def test_acknowledge(self, client, pipeline):
        response = client.post("/api/alerts", json={"alertId": "a1"})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        pipeline.acknowledge_alert.assert_awaited_once_with("a1")

    def test_acknowledge_requires_id(self, client, pipeline):
        response = client.post("/api/alerts", json={})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "alertId required"}
        pipeline.acknowledge_alert.assert_not_called()


class TestDigestsRoute:
    def test_latest_defaults_to_daily(self, client, pipeline):
        response = client.get("/api/digests")

        assert response.status_code == 200
        assert response.json() is None
        pipeline.get_latest_digest.assert_awaited_once_with("daily")

    def test_invalid_type(self, client):
        response = client.get("/api/digests", params={"type": "monthly"})

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_generate_requires_secret(self, client, pipeline):
        response = client.post("/api/digests/generate")

        assert response.status_code == 401
        pipeline.run_daily_digest.assert_not_called()

    def test_generate_weekly(self, client):
        response = client.post(
            "/api/digests/generate", params={"type": "weekly"}, headers=AUTH
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "digestId": "digest-weekly",
            "type": "weekly",
        }

    def test_generate_open_without_configured_secret(self, pipeline, logger):
        client = TestClient(create_app(pipeline, logger, APIConfig()))

        response = client.post("/api/digests/generate")

        assert response.status_code == 200
        assert response.json()["digestId"] == "digest-daily"
