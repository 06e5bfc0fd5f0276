"""Audit sinks for intent decisions.

- LoggingAuditSink: one structured log line per decision
- DatabaseAuditSink: one AuditLog row per decision
- NullAuditSink: discards records (auditing disabled)
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session, sessionmaker

from ..database import get_db_session
from ..domain.intent.models import AuditRecord
from ..models.audit_log import AuditLog
from .ports import AuditSink

logger = logging.getLogger(__name__)


def record_to_metadata(record: AuditRecord) -> Dict[str, Any]:
    """Serialize an audit record to JSON-compatible camelCase metadata."""
    return record.model_dump(mode="json", by_alias=True)


def log_audit_event(
    db: Session,
    action: str,
    entity_type: str = "intent_extraction",
    request_id: Optional[str] = None,
    detected_intent: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> AuditLog:
    """Create an audit log entry.

    Args:
        db: Database session
        action: Event action (e.g., "intent_extraction.intent_detected")
        entity_type: Type of entity audited
        request_id: Request correlation ID
        detected_intent: Primary intent value
        metadata: Decision summary as JSON

    Returns:
        AuditLog: The created audit log entry
    """
    audit_entry = AuditLog(
        action=action,
        entity_type=entity_type,
        request_id=request_id,
        detected_intent=detected_intent,
        metadata_json=metadata,
    )

    db.add(audit_entry)
    db.flush()  # Get ID without committing transaction

    return audit_entry


class LoggingAuditSink(AuditSink):
    """Writes each decision as a structured INFO log line."""

    backend_name = "log"

    def __init__(self, audit_logger: Optional[logging.Logger] = None):
        self._logger = audit_logger or logging.getLogger("faxintent.audit")

    def log_decision(self, record: AuditRecord) -> None:
        self._logger.info(
            f"Intent decision: {record.detected_intent.value} ({record.confidence:.3f})",
            extra={"audit_record": record_to_metadata(record)}
        )


class DatabaseAuditSink(AuditSink):
    """Persists each decision as an AuditLog row."""

    backend_name = "database"

    def __init__(self, session_factory: sessionmaker):
        """Initialize database sink.

        Args:
            session_factory: SQLAlchemy session factory bound to the audit database
        """
        self.session_factory = session_factory

    def log_decision(self, record: AuditRecord) -> None:
        with get_db_session(self.session_factory) as session:
            entry = log_audit_event(
                db=session,
                action=record.event_type,
                request_id=record.request_id,
                detected_intent=record.detected_intent.value,
                metadata=record_to_metadata(record),
            )
            logger.debug(f"Stored intent audit entry {entry.id}")


class NullAuditSink(AuditSink):
    """Discards audit records."""

    backend_name = "null"

    def log_decision(self, record: AuditRecord) -> None:
        return None
