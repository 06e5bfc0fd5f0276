"""SQLAlchemy models for the intent engine's audit storage."""

from .base import Base, PortableJSONB
from .audit_log import AuditLog

__all__ = ["Base", "PortableJSONB", "AuditLog"]
