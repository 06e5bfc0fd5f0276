"""Observability module for the intent engine.

Provides structured logging, request correlation and Prometheus metrics.
"""

from .logging_config import configure_logging, configure_logging_from_settings, get_logger
from .metrics import (
    audit_failures_total,
    intent_confidence_histogram,
    intent_extraction_duration_seconds,
    intent_extractions_total,
)
from .request_id import (
    generate_request_id,
    get_request_id,
    request_id_var,
    request_scope,
    set_request_id,
)

__all__ = [
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    # Metrics
    "audit_failures_total",
    "intent_confidence_histogram",
    "intent_extraction_duration_seconds",
    "intent_extractions_total",
    # Request ID
    "generate_request_id",
    "get_request_id",
    "request_id_var",
    "request_scope",
    "set_request_id",
]
