"""Unit tests for audit sinks

Tests cover:
- Database sink persisting AuditLog rows (in-memory SQLite)
- Logging sink emitting a structured record
- Metadata serialization with camelCase keys
"""

import logging
from datetime import datetime, timezone

import pytest
from sqlalchemy import select

from faxintent.audit.service import (
    DatabaseAuditSink,
    LoggingAuditSink,
    NullAuditSink,
    log_audit_event,
    record_to_metadata,
)
from faxintent.database import (
    create_audit_engine,
    create_session_factory,
    get_db_session,
    init_audit_schema,
)
from faxintent.domain.intent.models import (
    AuditRecord,
    CandidateScore,
    ComponentConfidence,
    ConfidenceBreakdown,
    IntentKind,
)
from faxintent.models.audit_log import AuditLog


@pytest.fixture
def record():
    return AuditRecord(
        request_id="req-123",
        detected_intent=IntentKind.SHOPPING,
        confidence=0.8,
        confidence_breakdown=ConfidenceBreakdown(
            overall=0.8,
            by_component=ComponentConfidence(
                intent_classification=0.8,
                parameter_extraction=0.6,
                context_understanding=0.8,
            ),
        ),
        alternative_intents=[IntentKind.REPLY],
        all_results=[
            CandidateScore(intent=IntentKind.SHOPPING, confidence=0.8),
            CandidateScore(intent=IntentKind.REPLY, confidence=0.8),
        ],
        timestamp=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def session_factory():
    engine = create_audit_engine("sqlite://")
    init_audit_schema(engine)
    yield create_session_factory(engine)
    engine.dispose()


class TestRecordToMetadata:

    def test_camel_case_json(self, record):
        metadata = record_to_metadata(record)

        assert metadata["eventType"] == "intent_extraction.intent_detected"
        assert metadata["detectedIntent"] == "shopping"
        assert metadata["alternativeIntents"] == ["reply"]
        assert metadata["confidenceBreakdown"]["byComponent"]["parameterExtraction"] == 0.6
        assert metadata["allResults"][1] == {"intent": "reply", "confidence": 0.8}
        assert metadata["previousIntent"] is None
        assert metadata["timestamp"].startswith("2024-05-01T09:30:00")


class TestDatabaseAuditSink:

    def test_persists_row(self, record, session_factory):
        sink = DatabaseAuditSink(session_factory)

        sink.log_decision(record)

        with get_db_session(session_factory) as session:
            rows = session.execute(select(AuditLog)).scalars().all()
            assert len(rows) == 1
            entry = rows[0]
            assert entry.action == "intent_extraction.intent_detected"
            assert entry.entity_type == "intent_extraction"
            assert entry.request_id == "req-123"
            assert entry.detected_intent == "shopping"
            assert entry.metadata_json["allResults"][0]["intent"] == "shopping"
            assert entry.to_dict()["detected_intent"] == "shopping"

    def test_log_audit_event_flushes_id(self, session_factory):
        with get_db_session(session_factory) as session:
            entry = log_audit_event(session, action="intent_extraction.intent_detected")

            assert entry.id is not None
            assert entry.created_at is not None

    def test_failed_write_rolls_back(self, session_factory):
        with pytest.raises(RuntimeError):
            with get_db_session(session_factory) as session:
                log_audit_event(session, action="intent_extraction.intent_detected")
                raise RuntimeError("boom")

        with get_db_session(session_factory) as session:
            assert session.execute(select(AuditLog)).scalars().all() == []


class TestLoggingAuditSink:

    def test_logs_structured_record(self, record, caplog):
        sink = LoggingAuditSink()

        with caplog.at_level(logging.INFO, logger="faxintent.audit"):
            sink.log_decision(record)

        entry = caplog.records[-1]
        assert entry.name == "faxintent.audit"
        assert "shopping" in entry.getMessage()
        assert entry.audit_record["requestId"] == "req-123"


def test_null_sink_discards(record):
    assert NullAuditSink().log_decision(record) is None
