"""AuditSink interface.

The intent engine reports every decision through this port. Implementations
may fail; the engine catches, logs and counts the failure and still returns
its result to the caller.
"""

from abc import ABC, abstractmethod

from ..domain.intent.models import AuditRecord


class AuditSink(ABC):
    """Port interface for decision audit storage."""

    #: Label used for the audit failure metric
    backend_name: str = "custom"

    @abstractmethod
    def log_decision(self, record: AuditRecord) -> None:
        """Persist or forward one decision record.

        Args:
            record: Decision summary for one extraction

        Raises:
            Any exception signals a failed write; callers treat it as non-fatal.
        """
        pass
