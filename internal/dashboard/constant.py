from typing import Final

TREND_GROWING: Final[str] = "growing"
TREND_SHRINKING: Final[str] = "shrinking"
TREND_STABLE: Final[str] = "stable"

VOLUME_LOUD: Final[str] = "loud"
VOLUME_MEDIUM: Final[str] = "medium"
VOLUME_QUIET: Final[str] = "quiet"

LOUD_MIN_OCCURRENCES: Final[int] = 3
QUIET_MAX_OCCURRENCES: Final[int] = 1

UNKNOWN_PLATFORM: Final[str] = "unknown"

DEFAULT_LOOKBACK_DAYS: Final[int] = 7
DEFAULT_PLATFORM_WINDOW_HOURS: Final[int] = 24
DEFAULT_MAX_THEMES: Final[int] = 10
DEFAULT_MAX_ALERTS: Final[int] = 10
