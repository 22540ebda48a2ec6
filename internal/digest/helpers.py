"""Digest input assembly, prompt rendering and metadata extraction."""

import json
from datetime import datetime, timedelta
from typing import Any, Dict, List, Tuple

from internal.model.constant import SIZE_MEDIUM
from internal.model.timestamp import to_valid_iso
from internal.dashboard.type import DashboardData
from .constant import *
from .errors import ErrInvalidDigestType
from .type import DigestInput, DigestContent


def period_for(digest_type: str, now: datetime) -> Tuple[datetime, datetime]:
    hours = PERIOD_HOURS.get(digest_type)
    if hours is None:
        raise ErrInvalidDigestType(f"unknown digest type: {digest_type!r}")
    return now - timedelta(hours=hours), now


def build_digest_input(
    dashboard: DashboardData, digest_type: str, now: datetime
) -> DigestInput:
    """Reshape a dashboard snapshot into the narrative model's input."""
    period_start, period_end = period_for(digest_type, now)

    trend = dashboard.sentiment_trend
    overall = sum(item.avg_sentiment for item in trend) / len(trend) if trend else 0.0

    return DigestInput(
        digest_type=digest_type,
        period_start=period_start,
        period_end=period_end,
        post_count=sum(dashboard.platform_counts.values()),
        themes=[theme.to_dict(now) for theme in dashboard.themes],
        sentiment={
            "overall": overall,
            "positive_count": 0,
            "neutral_count": 0,
            "negative_count": 0,
            "key_drivers": [],
        },
        competitors=[
            {
                "competitor": stat.competitor,
                "mention_count": stat.mentions,
                "sentiment": stat.avg_sentiment,
                "key_narratives": [],
                "comparison_posts": [],
            }
            for stat in dashboard.competitor_stats
        ],
        communities=[
            {
                "name": c.name,
                "description": c.description or "",
                "primary_platform": c.primary_platform,
                "audience_type": c.audience_type,
                "size_indicator": c.estimated_size or SIZE_MEDIUM,
                "sentiment_toward_claude": c.sentiment_toward_claude or 0.0,
                "key_concerns": c.notes_parsed.get("key_concerns", []),
                "opportunities": c.notes_parsed.get("opportunities", []),
            }
            for c in dashboard.communities
        ],
        alerts=[alert.to_dict(now) for alert in dashboard.alerts],
        enterprise={
            "count": 0,
            "topics": [],
            "pain_points": [],
            "evaluation_criteria": [],
        },
    )


def build_digest_prompt(data: DigestInput) -> str:
    return DIGEST_USER_PROMPT.format(
        digest_type=data.digest_type,
        period_start=to_valid_iso(data.period_start),
        period_end=to_valid_iso(data.period_end),
        post_count=data.post_count,
        themes=_dump(data.themes),
        sentiment=_dump(data.sentiment),
        competitors=_dump(data.competitors),
        communities=_dump(data.communities),
        alerts=_dump(data.alerts),
        enterprise=_dump(data.enterprise),
        period_label=PERIOD_LABELS.get(data.digest_type, "Period"),
    )


def extract_digest_metadata(text: str) -> DigestContent:
    """Split the trailing JSON block off a generated digest.

    A missing or unparsable block yields an empty summary and no insights;
    the narrative body is kept either way.
    """
    match = METADATA_BLOCK_PATTERN.search(text or "")
    if not match:
        return DigestContent(content=(text or "").strip())

    content = (text[: match.start()] + text[match.end():]).strip()
    try:
        metadata = json.loads(match.group(1))
    except json.JSONDecodeError:
        return DigestContent(content=content)

    if not isinstance(metadata, dict):
        return DigestContent(content=content)

    summary = metadata.get("summary")
    insights = metadata.get("key_insights")
    return DigestContent(
        content=content,
        summary=summary if isinstance(summary, str) else "",
        key_insights=[str(i) for i in insights] if isinstance(insights, list) else [],
    )


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, default=str)


__all__ = [
    "period_for",
    "build_digest_input",
    "build_digest_prompt",
    "extract_digest_metadata",
]
