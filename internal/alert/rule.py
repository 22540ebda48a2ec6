"""Deterministic alert rules layered over a model analysis."""

from typing import List, Optional

from internal.analysis.type import AnalysisResult, AnalysisTheme, ProposedAlert
from internal.model.constant import (
    ALERT_TYPE_SENTIMENT_SPIKE,
    ALERT_TYPE_EMERGING_THEME,
    SEVERITY_HIGH,
    SEVERITY_MEDIUM,
)
from .constant import *
from .type import AlertCandidate


def evaluate(result: AnalysisResult) -> List[AlertCandidate]:
    """Rule alerts followed by every model-proposed alert, undeduplicated.

    Pure: reads ``result`` and returns a new list.
    """
    alerts: List[AlertCandidate] = []

    spike = sentiment_spike_rule(result)
    if spike is not None:
        alerts.append(spike)

    alerts.extend(emerging_theme_rule(result.themes))
    alerts.extend(from_proposed(a) for a in result.alerts)
    return alerts


def sentiment_spike_rule(result: AnalysisResult) -> Optional[AlertCandidate]:
    breakdown = result.sentiment_breakdown
    overall = breakdown.overall
    if overall >= SENTIMENT_SPIKE_THRESHOLD:
        return None

    severity = SEVERITY_HIGH if overall < SENTIMENT_SPIKE_HIGH_THRESHOLD else SEVERITY_MEDIUM
    drivers = KEY_DRIVER_SEPARATOR.join(breakdown.key_drivers)
    return AlertCandidate(
        alert_type=ALERT_TYPE_SENTIMENT_SPIKE,
        severity=severity,
        title=SENTIMENT_SPIKE_TITLE,
        description=f"Overall sentiment dropped to {overall:.2f}. Key drivers: {drivers}",
        recommended_action=SENTIMENT_SPIKE_ACTION,
        related_post_ids=[],
    )


def emerging_theme_rule(themes: List[AnalysisTheme]) -> List[AlertCandidate]:
    alerts = []
    for theme in themes:
        if not theme.is_emerging or theme.frequency < EMERGING_THEME_MIN_FREQUENCY:
            continue
        severity = (
            SEVERITY_HIGH
            if theme.sentiment < EMERGING_THEME_HIGH_THRESHOLD
            else SEVERITY_MEDIUM
        )
        alerts.append(
            AlertCandidate(
                alert_type=ALERT_TYPE_EMERGING_THEME,
                severity=severity,
                title=f"{EMERGING_THEME_TITLE_PREFIX}{theme.name}",
                description=theme.description,
                recommended_action=theme.why_it_matters,
                related_post_ids=list(theme.example_post_ids),
            )
        )
    return alerts


def from_proposed(alert: ProposedAlert) -> AlertCandidate:
    return AlertCandidate(
        alert_type=alert.type,
        severity=alert.severity,
        title=alert.title,
        description=alert.description,
        recommended_action=alert.recommended_action,
        related_post_ids=list(alert.related_post_ids),
    )


__all__ = [
    "evaluate",
    "sentiment_spike_rule",
    "emerging_theme_rule",
    "from_proposed",
]
