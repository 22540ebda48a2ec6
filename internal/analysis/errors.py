"""Module-specific errors for the analysis domain."""


class ErrInvalidInput(Exception):
    """Raised when the batch to analyze is empty."""

    pass


class ErrAnalysisFailed(Exception):
    """Raised when the text-generation call itself fails."""

    pass


class ErrMalformedAnalysisPayload(Exception):
    """Raised when the model response is not valid JSON or fails the schema."""

    pass


__all__ = [
    "ErrInvalidInput",
    "ErrAnalysisFailed",
    "ErrMalformedAnalysisPayload",
]
