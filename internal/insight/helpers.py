"""Pure mapping from an analysis result onto artifact table rows."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from internal.analysis.type import AnalysisResult
from internal.model.post import Post
from internal.model.timestamp import parse_timestamp


def time_range(posts: Sequence[Post]) -> Tuple[Optional[datetime], Optional[datetime]]:
    stamps = [t for t in (parse_timestamp(p.posted_at) for p in posts) if t is not None]
    if not stamps:
        return None, None
    return min(stamps), max(stamps)


def build_batch_row(result: AnalysisResult, posts: Sequence[Post]) -> Dict[str, Any]:
    start, end = time_range(posts)
    return {
        "post_ids": [p.id for p in posts],
        "post_count": len(posts),
        "time_range_start": start,
        "time_range_end": end,
        "summary": result.summary,
        "enterprise_signals": result.enterprise_signals.model_dump(),
        "raw_analysis": result.raw_response,
        "processing_time_ms": result.processing_time_ms,
    }


def build_theme_rows(result: AnalysisResult, now: datetime) -> List[Dict[str, Any]]:
    return [
        {
            "name": theme.name,
            "description": theme.description,
            "frequency": theme.frequency,
            "sentiment_avg": theme.sentiment,
            "audience_type": theme.audience_type,
            "is_emerging": theme.is_emerging,
            "example_posts": list(theme.example_post_ids),
            "last_seen_at": now,
        }
        for theme in result.themes
    ]


def build_snapshot_row(result: AnalysisResult, volume: int, now: datetime) -> Dict[str, Any]:
    breakdown = result.sentiment_breakdown
    return {
        "overall_sentiment": breakdown.overall,
        "positive_count": breakdown.positive_count,
        "neutral_count": breakdown.neutral_count,
        "negative_count": breakdown.negative_count,
        "volume": volume,
        "timestamp": now,
    }


def build_competitor_rows(result: AnalysisResult, now: datetime) -> List[Dict[str, Any]]:
    """One row per competitor and cited comparison post."""
    return [
        {
            "post_id": post_id,
            "competitor": competitor.competitor,
            "sentiment": competitor.sentiment,
            "is_comparison": True,
            "mentioned_at": now,
        }
        for competitor in result.competitor_analysis
        for post_id in competitor.comparison_posts
    ]


def build_community_rows(result: AnalysisResult, now: datetime) -> List[Dict[str, Any]]:
    return [
        {
            "name": community.name,
            "description": community.description,
            "primary_platform": community.primary_platform,
            "audience_type": community.audience_type,
            "estimated_size": community.size_indicator,
            "key_topics": list(community.key_concerns),
            "sentiment_toward_claude": community.sentiment_toward_claude,
            "notes": {
                "key_concerns": list(community.key_concerns),
                "opportunities": list(community.opportunities),
                "gathering_places": list(community.gathering_places),
            },
            "last_activity_at": now,
        }
        for community in result.communities_identified
    ]


__all__ = [
    "time_range",
    "build_batch_row",
    "build_theme_rows",
    "build_snapshot_row",
    "build_competitor_rows",
    "build_community_rows",
]
