from typing import Final

# Sentiment spike rule
SENTIMENT_SPIKE_THRESHOLD: Final[float] = -0.3
SENTIMENT_SPIKE_HIGH_THRESHOLD: Final[float] = -0.5
SENTIMENT_SPIKE_TITLE: Final[str] = "Negative Sentiment Spike Detected"
SENTIMENT_SPIKE_ACTION: Final[str] = (
    "Review negative posts and assess if response is needed"
)

# Emerging theme rule
EMERGING_THEME_MIN_FREQUENCY: Final[int] = 3
EMERGING_THEME_HIGH_THRESHOLD: Final[float] = -0.2
EMERGING_THEME_TITLE_PREFIX: Final[str] = "Emerging Theme: "

KEY_DRIVER_SEPARATOR: Final[str] = ", "
