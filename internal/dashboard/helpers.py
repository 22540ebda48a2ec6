"""Pure aggregation helpers behind the dashboard snapshot."""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from internal.model import Alert, Community, SentimentSnapshot, Theme
from internal.model.constant import SIZE_LARGE, SIZE_SMALL
from internal.model.timestamp import parse_timestamp, to_valid_iso
from .constant import *
from .type import (
    SentimentTrendItem,
    ThemeView,
    CompetitorStat,
    AlertView,
    CommunitySummary,
)


def aggregate_competitor_stats(
    mentions: Iterable[Tuple[str, float]],
) -> List[CompetitorStat]:
    """Group (competitor, sentiment) pairs; mean sentiment, most mentioned first."""
    totals: Dict[str, List[float]] = {}
    for competitor, sentiment in mentions:
        bucket = totals.setdefault(competitor, [0, 0.0])
        bucket[0] += 1
        bucket[1] += float(sentiment or 0.0)

    stats = [
        CompetitorStat(competitor=name, mentions=int(count), avg_sentiment=total / count)
        for name, (count, total) in totals.items()
    ]
    # sorted() is stable, so ties keep first-seen order
    return sorted(stats, key=lambda s: s.mentions, reverse=True)


def aggregate_platform_counts(rows: Iterable[Tuple[Optional[str], int]]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for platform, count in rows:
        key = platform or UNKNOWN_PLATFORM
        counts[key] = counts.get(key, 0) + int(count or 0)
    return counts


def classify_trend(current: int, previous: int) -> str:
    if current > previous:
        return TREND_GROWING
    if current < previous:
        return TREND_SHRINKING
    return TREND_STABLE


def classify_volume(estimated_size: Optional[str], current: int) -> str:
    size = (estimated_size or "").strip().lower()
    if size == SIZE_LARGE or current >= LOUD_MIN_OCCURRENCES:
        return VOLUME_LOUD
    if size == SIZE_SMALL and current <= QUIET_MAX_OCCURRENCES:
        return VOLUME_QUIET
    return VOLUME_MEDIUM


def community_key(name: Optional[str]) -> str:
    """Logical identity of a community across batches."""
    return (name or "").strip().lower()


def merge_communities(rows: Iterable[Community]) -> List[Community]:
    """Keep the most recently active row per logical key.

    Output is ordered by last activity, newest first. Rows with unparsable
    activity timestamps lose to any row with a valid one.
    """
    latest: Dict[str, Community] = {}
    for row in rows:
        key = community_key(row.name)
        if not key:
            continue
        current = latest.get(key)
        if current is None or _activity(row) > _activity(current):
            latest[key] = row

    return sorted(latest.values(), key=_activity, reverse=True)


def count_by_key(rows: Iterable[Community]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for row in rows:
        key = community_key(row.name)
        if key:
            counts[key] = counts.get(key, 0) + 1
    return counts


def to_sentiment_trend(snapshots: Sequence[SentimentSnapshot]) -> List[SentimentTrendItem]:
    return [
        SentimentTrendItem(
            hour=s.timestamp,
            platform_id=s.platform_id or UNKNOWN_PLATFORM,
            avg_sentiment=float(s.overall_sentiment or 0.0),
            total_volume=int(s.volume or 0),
        )
        for s in snapshots
    ]


def to_theme_views(themes: Sequence[Theme]) -> List[ThemeView]:
    return [
        ThemeView(
            name=t.name,
            description=t.description or "",
            frequency=int(t.frequency or 0),
            sentiment_avg=float(t.sentiment_avg or 0.0),
            audience_type=t.audience_type or "general",
            is_emerging=bool(t.is_emerging),
            example_post_ids=list(t.example_posts or []),
            last_seen_at=t.last_seen_at,
        )
        for t in themes
    ]


def to_alert_views(alerts: Sequence[Alert]) -> List[AlertView]:
    return [
        AlertView(
            id=str(a.id) if a.id is not None else "",
            alert_type=a.alert_type or "",
            severity=a.severity or "medium",
            title=a.title or "",
            description=a.description or "",
            created_at=a.created_at,
        )
        for a in alerts
    ]


def to_community_summaries(
    rows: Sequence[Community],
    current_counts: Mapping[str, int],
    previous_counts: Mapping[str, int],
) -> List[CommunitySummary]:
    summaries = []
    for row in merge_communities(rows):
        key = community_key(row.name)
        current = current_counts.get(key, 0)
        previous = previous_counts.get(key, 0)
        summaries.append(
            CommunitySummary(
                id=str(row.id) if row.id is not None else "",
                name=row.name,
                description=row.description,
                primary_platform=row.primary_platform,
                audience_type=row.audience_type or "general",
                estimated_size=row.estimated_size,
                key_topics=list(row.key_topics or []),
                sentiment_toward_claude=row.sentiment_toward_claude,
                last_activity_at=row.last_activity_at,
                notes_parsed=parse_notes(row.notes),
                trend=classify_trend(current, previous),
                volume_indicator=classify_volume(row.estimated_size, current),
            )
        )
    return summaries


def parse_notes(notes: Any) -> Dict[str, List[str]]:
    notes = notes if isinstance(notes, dict) else {}
    parsed = {}
    for key in ("key_concerns", "opportunities", "gathering_places"):
        value = notes.get(key)
        parsed[key] = [str(v) for v in value] if isinstance(value, list) else []
    return parsed


def _activity(row: Community) -> datetime:
    return parse_timestamp(row.last_activity_at) or datetime.min.replace(
        tzinfo=timezone.utc
    )


__all__ = [
    "aggregate_competitor_stats",
    "aggregate_platform_counts",
    "classify_trend",
    "classify_volume",
    "community_key",
    "merge_communities",
    "count_by_key",
    "to_sentiment_trend",
    "to_theme_views",
    "to_alert_views",
    "to_community_summaries",
    "parse_notes",
    "to_valid_iso",
]
