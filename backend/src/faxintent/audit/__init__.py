"""Audit sinks for intent decisions."""

from .ports import AuditSink
from .service import (
    DatabaseAuditSink,
    LoggingAuditSink,
    NullAuditSink,
    log_audit_event,
    record_to_metadata,
)

__all__ = [
    "AuditSink",
    "DatabaseAuditSink",
    "LoggingAuditSink",
    "NullAuditSink",
    "log_audit_event",
    "record_to_metadata",
]
