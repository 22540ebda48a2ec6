"""Unit tests for analysis batch persistence.

Tests cover:
- Row mapping for batch, themes, snapshot, competitors and communities
- Batch row failure propagates; artifact write failures are isolated
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from internal.insight import NewInsightUseCase
from internal.insight.helpers import (
    build_batch_row,
    build_community_rows,
    build_competitor_rows,
    build_snapshot_row,
    time_range,
)
from internal.insight.repository.errors import ErrFailedToCreate

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


class TestRowMapping:
    """Tests for the pure row builders."""

    def test_batch_row(self, make_result, make_stored_post):
        early = make_stored_post(posted_at=datetime(2024, 5, 1, tzinfo=timezone.utc))
        late = make_stored_post(posted_at=datetime(2024, 5, 2, tzinfo=timezone.utc))

        row = build_batch_row(make_result(), [late, early])

        assert row["post_count"] == 2
        assert row["post_ids"] == [late.id, early.id]
        assert row["time_range_start"] == early.posted_at
        assert row["time_range_end"] == late.posted_at
        assert row["raw_analysis"] == "{}"
        assert row["enterprise_signals"]["topics"] == ["SSO"]

    def test_time_range_ignores_missing_timestamps(self, make_stored_post):
        assert time_range([make_stored_post(posted_at=None)]) == (None, None)

    def test_snapshot_volume_is_batch_size(self, make_result):
        row = build_snapshot_row(make_result(), volume=7, now=NOW)

        assert row["volume"] == 7
        assert row["overall_sentiment"] == 0.2
        assert (row["positive_count"], row["neutral_count"], row["negative_count"]) == (5, 3, 1)

    def test_one_competitor_row_per_comparison_post(self, make_result):
        rows = build_competitor_rows(make_result(), NOW)

        assert [(r["competitor"], r["post_id"]) for r in rows] == [
            ("openai", "p1"),
            ("openai", "p3"),
        ]
        assert all(r["is_comparison"] for r in rows)

    def test_community_notes(self, make_result):
        rows = build_community_rows(make_result(), NOW)

        assert rows[0]["estimated_size"] == "large"
        assert rows[0]["key_topics"] == ["privacy"]
        assert rows[0]["notes"] == {
            "key_concerns": ["privacy"],
            "opportunities": ["docs"],
            "gathering_places": ["r/LocalLLaMA"],
        }


class TestSaveBatch:
    """Tests for the save_batch use case."""

    @pytest.fixture
    def repository(self):
        repo = AsyncMock()
        repo.create_batch.return_value = "batch-1"
        return repo

    @pytest.mark.asyncio
    async def test_all_artifacts_written_with_batch_id(
        self, repository, make_result, make_stored_post, logger
    ):
        usecase = NewInsightUseCase(repository=repository, logger=logger)

        batch_id = await usecase.save_batch(make_result(), [make_stored_post()])

        assert batch_id == "batch-1"
        for method in (
            repository.create_themes,
            repository.create_snapshot,
            repository.create_competitor_mentions,
            repository.create_communities,
        ):
            method.assert_awaited_once()
            assert method.await_args.args[0].batch_id == "batch-1"

    @pytest.mark.asyncio
    async def test_artifact_failure_does_not_stop_the_rest(
        self, repository, make_result, make_stored_post, logger
    ):
        repository.create_themes.side_effect = ErrFailedToCreate("themes down")
        usecase = NewInsightUseCase(repository=repository, logger=logger)

        batch_id = await usecase.save_batch(make_result(), [make_stored_post()])

        assert batch_id == "batch-1"
        repository.create_snapshot.assert_awaited_once()
        repository.create_competitor_mentions.assert_awaited_once()
        repository.create_communities.assert_awaited_once()
        logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_batch_failure_propagates(
        self, repository, make_result, make_stored_post, logger
    ):
        repository.create_batch.side_effect = ErrFailedToCreate("db down")
        usecase = NewInsightUseCase(repository=repository, logger=logger)

        with pytest.raises(ErrFailedToCreate):
            await usecase.save_batch(make_result(), [make_stored_post()])
        repository.create_themes.assert_not_called()
