"""Read-optimized dashboard snapshot.

Every list section is always present (possibly empty) and every timestamp is
rendered through ``to_valid_iso`` so consumers never see an unparsable date.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from internal.model.timestamp import to_valid_iso, utc_now


@dataclass
class SentimentTrendItem:
    hour: Any
    platform_id: str
    avg_sentiment: float
    total_volume: int

    def to_dict(self, now: datetime) -> Dict[str, Any]:
        return {
            "hour": to_valid_iso(self.hour, now),
            "platform_id": self.platform_id,
            "avg_sentiment": self.avg_sentiment,
            "total_volume": self.total_volume,
        }


@dataclass
class ThemeView:
    name: str
    description: str
    frequency: int
    sentiment_avg: float
    audience_type: str
    is_emerging: bool
    example_post_ids: List[str] = field(default_factory=list)
    last_seen_at: Any = None

    def to_dict(self, now: datetime) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "frequency": self.frequency,
            "sentiment_avg": self.sentiment_avg,
            "audience_type": self.audience_type,
            "is_emerging": self.is_emerging,
            "example_post_ids": list(self.example_post_ids),
            "last_seen_at": to_valid_iso(self.last_seen_at, now),
        }


@dataclass
class CompetitorStat:
    competitor: str
    mentions: int
    avg_sentiment: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "competitor": self.competitor,
            "mentions": self.mentions,
            "avgSentiment": self.avg_sentiment,
        }


@dataclass
class AlertView:
    id: str
    alert_type: str
    severity: str
    title: str
    description: str
    created_at: Any = None

    def to_dict(self, now: datetime) -> Dict[str, Any]:
        return {
            "id": self.id,
            "alert_type": self.alert_type,
            "severity": self.severity,
            "title": self.title,
            "description": self.description,
            "created_at": to_valid_iso(self.created_at, now),
        }


@dataclass
class CommunitySummary:
    id: str
    name: str
    description: Optional[str]
    primary_platform: Optional[str]
    audience_type: str
    estimated_size: Optional[str]
    key_topics: List[str]
    sentiment_toward_claude: Optional[float]
    last_activity_at: Any
    notes_parsed: Dict[str, List[str]]
    trend: str
    volume_indicator: str

    def to_dict(self, now: datetime) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "primary_platform": self.primary_platform,
            "audience_type": self.audience_type,
            "estimated_size": self.estimated_size,
            "key_topics": list(self.key_topics),
            "sentiment_toward_claude": self.sentiment_toward_claude,
            "last_activity_at": to_valid_iso(self.last_activity_at, now),
            "notes_parsed": self.notes_parsed,
            "trend": self.trend,
            "volume_indicator": self.volume_indicator,
        }


@dataclass
class DashboardData:
    sentiment_trend: List[SentimentTrendItem] = field(default_factory=list)
    themes: List[ThemeView] = field(default_factory=list)
    competitor_stats: List[CompetitorStat] = field(default_factory=list)
    alerts: List[AlertView] = field(default_factory=list)
    platform_counts: Dict[str, int] = field(default_factory=dict)
    communities: List[CommunitySummary] = field(default_factory=list)
    last_updated: datetime = field(default_factory=utc_now)
    latest_post_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        now = utc_now()
        return {
            "sentimentTrend": [item.to_dict(now) for item in self.sentiment_trend],
            "themes": [theme.to_dict(now) for theme in self.themes],
            "competitorStats": [stat.to_dict() for stat in self.competitor_stats],
            "alerts": [alert.to_dict(now) for alert in self.alerts],
            "platformCounts": dict(self.platform_counts),
            "communities": [c.to_dict(now) for c in self.communities],
            "lastUpdated": to_valid_iso(self.last_updated, now),
            # No posts stored yet is reported as null, not as the current time
            "latestPostAt": (
                to_valid_iso(self.latest_post_at, now)
                if self.latest_post_at is not None
                else None
            ),
        }


__all__ = [
    "SentimentTrendItem",
    "ThemeView",
    "CompetitorStat",
    "AlertView",
    "CommunitySummary",
    "DashboardData",
]
