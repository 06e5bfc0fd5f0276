"""AuditLog SQLAlchemy model"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, Text, Uuid

from .base import Base, PortableJSONB


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditLog(Base):
    """Append-only record of one intent decision.

    ``metadata_json`` holds the full decision summary: detected intent,
    confidence breakdown, alternatives and every detector's raw score.
    """
    __tablename__ = "intent_audit_log"
    __table_args__ = (
        Index("ix_intent_audit_log_action_created_at", "action", "created_at"),
        Index("ix_intent_audit_log_request_id", "request_id"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    action = Column(Text, nullable=False)
    entity_type = Column(Text, nullable=False, default="intent_extraction")
    request_id = Column(Text, nullable=True)
    detected_intent = Column(Text, nullable=True)
    metadata_json = Column(PortableJSONB, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def to_dict(self):
        """Convert audit log entry to dictionary representation"""
        return {
            "id": str(self.id),
            "action": self.action,
            "entity_type": self.entity_type,
            "request_id": self.request_id,
            "detected_intent": self.detected_intent,
            "metadata": self.metadata_json,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
