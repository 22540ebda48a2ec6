from .interface import IDashboardUseCase
from .type import (
    SentimentTrendItem,
    ThemeView,
    CompetitorStat,
    AlertView,
    CommunitySummary,
    DashboardData,
)
from .helpers import (
    aggregate_competitor_stats,
    aggregate_platform_counts,
    classify_trend,
    classify_volume,
    merge_communities,
    to_valid_iso,
)
from .usecase.new import New as NewDashboardUseCase

__all__ = [
    "IDashboardUseCase",
    "SentimentTrendItem",
    "ThemeView",
    "CompetitorStat",
    "AlertView",
    "CommunitySummary",
    "DashboardData",
    "aggregate_competitor_stats",
    "aggregate_platform_counts",
    "classify_trend",
    "classify_volume",
    "merge_communities",
    "to_valid_iso",
    "NewDashboardUseCase",
]
