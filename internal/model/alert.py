"""ORM model for the alerts table.

Alerts are mutated at most once: ``is_acknowledged`` flips false -> true and
``acknowledged_at`` is stamped. Rows are never deleted.
"""

from sqlalchemy import Column, String, Boolean, Text, DateTime, Index
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID
from sqlalchemy.sql import func

from .base import Base


class Alert(Base):
    __tablename__ = "alerts"
    __table_args__ = (
        Index("idx_alerts_acknowledged", "is_acknowledged"),
        Index("idx_alerts_created", "created_at"),
    )

    id = Column(
        UUID(as_uuid=True), primary_key=True, server_default=func.gen_random_uuid()
    )
    batch_id = Column(UUID(as_uuid=True), nullable=True)
    alert_type = Column(String(50), nullable=False)
    severity = Column(String(20), nullable=False, server_default="medium")
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    related_posts = Column(ARRAY(String), nullable=False, server_default="{}")
    alert_metadata = Column("metadata", JSONB, nullable=False, server_default="{}")

    is_acknowledged = Column(Boolean, nullable=False, server_default="false")
    acknowledged_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<Alert(id={self.id}, type={self.alert_type}, severity={self.severity})>"


__all__ = ["Alert"]
