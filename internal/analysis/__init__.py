from .interface import IAnalysisUseCase
from .type import (
    AnalysisTheme,
    SentimentBreakdown,
    CompetitorAnalysis,
    IdentifiedCommunity,
    ProposedAlert,
    EnterpriseSignals,
    AnalysisPayload,
    AnalysisResult,
)
from .errors import ErrInvalidInput, ErrAnalysisFailed, ErrMalformedAnalysisPayload
from .helpers import extract_json_payload, parse_analysis_payload
from .usecase.new import New as NewAnalysisUseCase

__all__ = [
    "IAnalysisUseCase",
    "AnalysisTheme",
    "SentimentBreakdown",
    "CompetitorAnalysis",
    "IdentifiedCommunity",
    "ProposedAlert",
    "EnterpriseSignals",
    "AnalysisPayload",
    "AnalysisResult",
    "ErrInvalidInput",
    "ErrAnalysisFailed",
    "ErrMalformedAnalysisPayload",
    "extract_json_payload",
    "parse_analysis_payload",
    "NewAnalysisUseCase",
]
