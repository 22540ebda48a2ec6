from sqlalchemy import Column, String, Integer, Float, Boolean, Text, DateTime, Index
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.sql import func

from .base import Base


class Theme(Base):
    """One theme occurrence per (batch, name); names recur across batches."""

    __tablename__ = "themes"
    __table_args__ = (
        Index("idx_themes_last_seen", "last_seen_at"),
        Index("idx_themes_batch", "batch_id"),
    )

    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    batch_id = Column(UUID(as_uuid=True), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    frequency = Column(Integer, nullable=False, server_default="0")
    sentiment_avg = Column(Float, nullable=False, server_default="0")
    audience_type = Column(String(50), nullable=False, server_default="general")
    is_emerging = Column(Boolean, nullable=False, server_default="false")
    example_posts = Column(ARRAY(String), nullable=False, server_default="{}")
    last_seen_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


__all__ = ["Theme"]
