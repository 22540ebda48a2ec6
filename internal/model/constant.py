from typing import Dict, Final, List

# Platforms
PLATFORM_REDDIT: Final[str] = "reddit"
PLATFORM_HACKERNEWS: Final[str] = "hackernews"
PLATFORM_BLUESKY: Final[str] = "bluesky"
PLATFORMS: Final[List[str]] = [PLATFORM_REDDIT, PLATFORM_HACKERNEWS, PLATFORM_BLUESKY]

# Audience categories
AUDIENCE_TYPES: Final[List[str]] = [
    "enterprise",
    "developer",
    "hobbyist",
    "researcher",
    "general",
]

# Tracked competitors
COMPETITORS: Final[List[str]] = [
    "claude",
    "chatgpt",
    "gemini",
    "llama",
    "mistral",
    "other",
]

# Alerts
ALERT_TYPE_SENTIMENT_SPIKE: Final[str] = "sentiment_spike"
ALERT_TYPE_EMERGING_THEME: Final[str] = "emerging_theme"
ALERT_TYPES: Final[List[str]] = [
    ALERT_TYPE_SENTIMENT_SPIKE,
    ALERT_TYPE_EMERGING_THEME,
    "viral_post",
    "competitor_news",
    "pr_risk",
]

SEVERITY_LOW: Final[str] = "low"
SEVERITY_MEDIUM: Final[str] = "medium"
SEVERITY_HIGH: Final[str] = "high"
SEVERITY_CRITICAL: Final[str] = "critical"
SEVERITY_RANK: Final[Dict[str, int]] = {
    SEVERITY_LOW: 0,
    SEVERITY_MEDIUM: 1,
    SEVERITY_HIGH: 2,
    SEVERITY_CRITICAL: 3,
}

# Community size estimate
SIZE_SMALL: Final[str] = "small"
SIZE_MEDIUM: Final[str] = "medium"
SIZE_LARGE: Final[str] = "large"
SIZE_INDICATORS: Final[List[str]] = [SIZE_SMALL, SIZE_MEDIUM, SIZE_LARGE]

# Digests
DIGEST_DAILY: Final[str] = "daily"
DIGEST_WEEKLY: Final[str] = "weekly"
DIGEST_TYPES: Final[List[str]] = [DIGEST_DAILY, DIGEST_WEEKLY]
