"""ORM model for the posts table.

One row per (platform_id, external_id). Rows are written by the collectors
through an upsert and are never deleted.
"""

from sqlalchemy import (
    Column,
    String,
    Integer,
    Float,
    Text,
    DateTime,
    Index,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.sql import func

from .base import Base


class Post(Base):
    __tablename__ = "posts"
    __table_args__ = (
        UniqueConstraint("platform_id", "external_id", name="uq_posts_platform_external"),
        Index("idx_posts_collected_at", "collected_at"),
        Index("idx_posts_posted_at", "posted_at"),
    )

    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    platform_id = Column(String(50), nullable=False)
    external_id = Column(String(255), nullable=False)

    author = Column(String(255), nullable=True)
    author_id = Column(String(255), nullable=True)
    content = Column(Text, nullable=False, server_default="")
    url = Column(Text, nullable=True)
    posted_at = Column(DateTime(timezone=True), nullable=True)

    engagement_score = Column(Float, nullable=False, server_default="0")
    reply_count = Column(Integer, nullable=False, server_default="0")
    post_metadata = Column("metadata", JSONB, nullable=False, server_default="{}")

    collected_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<Post(platform={self.platform_id}, external_id={self.external_id})>"


__all__ = ["Post"]
