"""Shared fixtures for unit tests.

Nothing here touches a network or a database; repositories and the model
client are replaced with fakes or AsyncMock instances.
"""

import copy
import uuid
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

from internal.analysis.type import AnalysisResult

VALID_ANALYSIS: Dict[str, Any] = {
    "summary": "Developers are broadly positive about the latest release.",
    "themes": [
        {
            "name": "Coding assistance",
            "description": "Using assistants for refactoring",
            "frequency": 4,
            "sentiment": 0.4,
            "audience_type": "developer",
            "is_emerging": False,
            "example_post_ids": ["p1", "p2"],
            "why_it_matters": "Core use case",
        }
    ],
    "sentiment_breakdown": {
        "overall": 0.2,
        "positive_count": 5,
        "neutral_count": 3,
        "negative_count": 1,
        "key_drivers": ["speed", "quality"],
    },
    "competitor_analysis": [
        {
            "competitor": "openai",
            "mention_count": 2,
            "sentiment": 0.1,
            "key_narratives": ["pricing"],
            "comparison_posts": ["p1", "p3"],
        }
    ],
    "communities_identified": [
        {
            "name": "r/LocalLLaMA",
            "description": "Local model enthusiasts",
            "primary_platform": "reddit",
            "audience_type": "hobbyist",
            "size_indicator": "large",
            "sentiment_toward_claude": 0.3,
            "key_concerns": ["privacy"],
            "opportunities": ["docs"],
            "gathering_places": ["r/LocalLLaMA"],
        }
    ],
    "alerts": [],
    "enterprise_signals": {
        "count": 1,
        "topics": ["SSO"],
        "pain_points": [],
        "evaluation_criteria": ["security"],
    },
}


@pytest.fixture
def analysis_payload() -> Dict[str, Any]:
    """A fresh, mutable copy of a valid analysis document."""
    return copy.deepcopy(VALID_ANALYSIS)


@pytest.fixture
def make_result(analysis_payload):
    """Build an AnalysisResult from the valid payload plus overrides."""

    def _make(**overrides: Any) -> AnalysisResult:
        data = {**analysis_payload, **overrides}
        return AnalysisResult.model_validate(
            {**data, "raw_response": "{}", "processing_time_ms": 12}
        )

    return _make


@pytest.fixture
def make_stored_post():
    """Build an object shaped like a stored Post row."""

    def _make(**overrides: Any) -> SimpleNamespace:
        fields = {
            "id": uuid.uuid4(),
            "platform_id": "reddit",
            "external_id": "abc",
            "author": "alice",
            "content": "Claude helped me refactor",
            "url": "https://reddit.com/r/x/abc",
            "posted_at": datetime(2024, 5, 1, 12, tzinfo=timezone.utc),
            "engagement_score": 10.0,
            "reply_count": 2,
            "post_metadata": {"subreddit": "x"},
        }
        fields.update(overrides)
        return SimpleNamespace(**fields)

    return _make


@pytest.fixture
def logger():
    return MagicMock()
