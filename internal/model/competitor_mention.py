from sqlalchemy import Column, String, Float, Boolean, DateTime, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from .base import Base


class CompetitorMention(Base):
    """One row per (batch, competitor, cited post)."""

    __tablename__ = "competitor_mentions"
    __table_args__ = (
        Index("idx_competitor_mentions_mentioned_at", "mentioned_at"),
        Index("idx_competitor_mentions_competitor", "competitor"),
    )

    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    batch_id = Column(UUID(as_uuid=True), nullable=False)
    post_id = Column(String(255), nullable=True)
    competitor = Column(String(50), nullable=False)
    sentiment = Column(Float, nullable=False, server_default="0")
    is_comparison = Column(Boolean, nullable=False, server_default="false")
    mentioned_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


__all__ = ["CompetitorMention"]
