from sqlalchemy import Column, String, Float, Text, DateTime, Index
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID
from sqlalchemy.sql import func

from .base import Base


class Community(Base):
    """Audience segment identified in a batch.

    Names are a soft key: the same community recurs across batches and the
    dashboard merges rows by normalized name.
    """

    __tablename__ = "communities"
    __table_args__ = (
        Index("idx_communities_last_activity", "last_activity_at"),
        Index("idx_communities_name", "name"),
    )

    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    batch_id = Column(UUID(as_uuid=True), nullable=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    primary_platform = Column(String(50), nullable=True)
    audience_type = Column(String(50), nullable=False, server_default="general")
    estimated_size = Column(String(20), nullable=True)
    key_topics = Column(ARRAY(String), nullable=False, server_default="{}")
    sentiment_toward_claude = Column(Float, nullable=True)
    notes = Column(JSONB, nullable=False, server_default="{}")
    last_activity_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


__all__ = ["Community"]
