"""Validated shape of a model analysis response.

The model is asked for a fixed JSON document; these schemas decode it and
reject anything that does not fit instead of letting partially-undefined
fields flow downstream.
"""

from typing import Annotated, Any, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, Field, field_validator

from internal.model.constant import COMPETITORS


def _stringify_ids(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [str(v) for v in value if v is not None]
    return value


def _lower(value: Any) -> Any:
    return value.strip().lower() if isinstance(value, str) else value


def _empty_list(value: Any) -> Any:
    return [] if value is None else value


IdList = Annotated[List[str], BeforeValidator(_stringify_ids)]
TextList = Annotated[List[str], BeforeValidator(_empty_list)]
Sentiment = Annotated[float, Field(ge=-1.0, le=1.0)]

AudienceType = Annotated[
    Literal["enterprise", "developer", "hobbyist", "researcher", "general"],
    BeforeValidator(_lower),
]
AlertType = Annotated[
    Literal[
        "sentiment_spike", "emerging_theme", "viral_post", "competitor_news", "pr_risk"
    ],
    BeforeValidator(_lower),
]
Severity = Annotated[Literal["low", "medium", "high", "critical"], BeforeValidator(_lower)]
SizeIndicator = Annotated[Literal["small", "medium", "large"], BeforeValidator(_lower)]


class AnalysisTheme(BaseModel):
    name: str
    description: str = ""
    frequency: int = Field(ge=0)
    sentiment: Sentiment
    audience_type: AudienceType = "general"
    is_emerging: bool = False
    example_post_ids: IdList = Field(default_factory=list)
    why_it_matters: str = ""


class SentimentBreakdown(BaseModel):
    overall: Sentiment
    positive_count: int = Field(default=0, ge=0)
    neutral_count: int = Field(default=0, ge=0)
    negative_count: int = Field(default=0, ge=0)
    key_drivers: TextList = Field(default_factory=list)


class CompetitorAnalysis(BaseModel):
    competitor: str
    mention_count: int = Field(default=0, ge=0)
    sentiment: Sentiment
    key_narratives: TextList = Field(default_factory=list)
    comparison_posts: IdList = Field(default_factory=list)

    @field_validator("competitor", mode="before")
    @classmethod
    def normalize_competitor(cls, value: Any) -> Any:
        # Anything outside the tracked set is bucketed as "other"
        if not isinstance(value, str):
            return value
        name = value.strip().lower()
        return name if name in COMPETITORS else "other"


class IdentifiedCommunity(BaseModel):
    name: str
    description: str = ""
    primary_platform: Optional[str] = None
    audience_type: AudienceType = "general"
    size_indicator: Optional[SizeIndicator] = None
    sentiment_toward_claude: Optional[Sentiment] = None
    key_concerns: TextList = Field(default_factory=list)
    opportunities: TextList = Field(default_factory=list)
    gathering_places: TextList = Field(default_factory=list)


class ProposedAlert(BaseModel):
    type: AlertType
    severity: Severity
    title: str
    description: str = ""
    recommended_action: str = ""
    related_post_ids: IdList = Field(default_factory=list)


class EnterpriseSignals(BaseModel):
    count: int = Field(default=0, ge=0)
    topics: TextList = Field(default_factory=list)
    pain_points: TextList = Field(default_factory=list)
    evaluation_criteria: TextList = Field(default_factory=list)


class AnalysisPayload(BaseModel):
    """The JSON document the model must return."""

    summary: str
    themes: List[AnalysisTheme]
    sentiment_breakdown: SentimentBreakdown
    competitor_analysis: List[CompetitorAnalysis]
    communities_identified: List[IdentifiedCommunity]
    alerts: List[ProposedAlert]
    enterprise_signals: EnterpriseSignals


class AnalysisResult(AnalysisPayload):
    """A validated payload stamped with the raw response and wall-clock duration."""

    raw_response: str
    processing_time_ms: int = Field(ge=0)


__all__ = [
    "AnalysisTheme",
    "SentimentBreakdown",
    "CompetitorAnalysis",
    "IdentifiedCommunity",
    "ProposedAlert",
    "EnterpriseSignals",
    "AnalysisPayload",
    "AnalysisResult",
]
