from .base import Base
from .post import Post
from .analysis_batch import AnalysisBatch
from .theme import Theme
from .sentiment_snapshot import SentimentSnapshot
from .competitor_mention import CompetitorMention
from .alert import Alert
from .community import Community
from .digest import Digest

__all__ = [
    "Base",
    "Post",
    "AnalysisBatch",
    "Theme",
    "SentimentSnapshot",
    "CompetitorMention",
    "Alert",
    "Community",
    "Digest",
]
