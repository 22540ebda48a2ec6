from sqlalchemy import Column, String, Text, DateTime, Index
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.sql import func

from .base import Base


class Digest(Base):
    __tablename__ = "digests"
    __table_args__ = (Index("idx_digests_type_generated", "digest_type", "generated_at"),)

    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    digest_type = Column(String(20), nullable=False)
    period_start = Column(DateTime(timezone=True), nullable=False)
    period_end = Column(DateTime(timezone=True), nullable=False)
    content = Column(Text, nullable=False, server_default="")
    summary = Column(Text, nullable=False, server_default="")
    key_insights = Column(ARRAY(Text), nullable=False, server_default="{}")
    generated_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


__all__ = ["Digest"]
