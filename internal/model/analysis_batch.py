"""ORM model for the analysis_batches table (immutable after insert)."""

from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.dialects.postgresql import JSONB, UUID, ARRAY
from sqlalchemy.sql import func

from .base import Base


class AnalysisBatch(Base):
    __tablename__ = "analysis_batches"

    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    post_ids = Column(ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}")
    post_count = Column(Integer, nullable=False, server_default="0")
    time_range_start = Column(DateTime(timezone=True), nullable=True)
    time_range_end = Column(DateTime(timezone=True), nullable=True)

    summary = Column(Text, nullable=True)
    enterprise_signals = Column(JSONB, nullable=False, server_default="{}")
    raw_analysis = Column(Text, nullable=False, server_default="")
    processing_time_ms = Column(Integer, nullable=False, server_default="0")

    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


__all__ = ["AnalysisBatch"]
