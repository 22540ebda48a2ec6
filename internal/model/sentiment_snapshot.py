from sqlalchemy import Column, String, Integer, Float, DateTime, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from .base import Base


class SentimentSnapshot(Base):
    """Append-only per-batch sentiment reading; trends are derived on read."""

    __tablename__ = "sentiment_snapshots"
    __table_args__ = (Index("idx_sentiment_snapshots_timestamp", "timestamp"),)

    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    batch_id = Column(UUID(as_uuid=True), nullable=False)
    platform_id = Column(String(50), nullable=True)
    overall_sentiment = Column(Float, nullable=False, server_default="0")
    positive_count = Column(Integer, nullable=False, server_default="0")
    neutral_count = Column(Integer, nullable=False, server_default="0")
    negative_count = Column(Integer, nullable=False, server_default="0")
    volume = Column(Integer, nullable=False, server_default="0")
    timestamp = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


__all__ = ["SentimentSnapshot"]
