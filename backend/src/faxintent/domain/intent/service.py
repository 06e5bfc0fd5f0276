"""Intent Extraction Service

Main orchestrator: runs every registered detector over the same input,
aggregates the candidates, writes one audit record and returns the result.

The service holds no per-call state. Build it once at process start with
``build_intent_service()`` and share it between callers and threads.
"""

import logging
import time
from datetime import datetime, timezone
from typing import List, Optional

from ...audit.ports import AuditSink
from ...audit.service import DatabaseAuditSink, LoggingAuditSink, NullAuditSink
from ...config import Settings, get_settings
from ...database import create_audit_engine, create_session_factory, init_audit_schema
from ...observability.metrics import (
    audit_failures_total,
    intent_confidence_histogram,
    intent_extraction_duration_seconds,
    intent_extractions_total,
)
from ...observability.request_id import request_scope
from .aggregator import ConfidenceAggregator
from .completeness import CompletenessAssessor
from .models import (
    AuditRecord,
    CandidateScore,
    ExtractionResult,
    IntentCandidate,
    PartialInterpretation,
    RawInput,
    VisualAnnotation,
)
from .registry import DetectorRegistry, build_default_registry

logger = logging.getLogger(__name__)


class IntentExtractionService:
    """Decides which action a faxed document requests, and with what parameters.

    Never raises for empty or malformed text: absence of evidence yields low
    confidences, and callers apply their own clarification threshold.
    """

    def __init__(
        self,
        registry: DetectorRegistry,
        aggregator: Optional[ConfidenceAggregator] = None,
        audit_sink: Optional[AuditSink] = None,
    ):
        """Initialize extraction service.

        Args:
            registry: Detectors to run, in tie-break order
            aggregator: Confidence aggregator (default settings if omitted)
            audit_sink: Decision audit sink (audit disabled if omitted)

        Raises:
            ValueError: If the registry has no detectors
        """
        if len(registry) == 0:
            raise ValueError("IntentExtractionService requires at least one registered detector")

        self.registry = registry
        self.aggregator = aggregator or ConfidenceAggregator()
        self.audit_sink = audit_sink or NullAuditSink()

    def extract_intent(
        self,
        text: Optional[str],
        annotations: Optional[List[VisualAnnotation]] = None,
        existing_interpretation: Optional[PartialInterpretation] = None,
    ) -> ExtractionResult:
        """Extract the requested action and its parameters.

        Args:
            text: OCR text of the page (may be empty)
            annotations: Detected hand-drawn marks (may be empty)
            existing_interpretation: State from earlier steps of the session;
                read-only, recorded in the audit trail

        Returns:
            ExtractionResult; identical inputs always yield an equal result
        """
        raw = RawInput.build(text, annotations, existing_interpretation)

        with request_scope() as request_id:
            started = time.perf_counter()
            candidates = self.registry.detect_all(raw)
            result = self.aggregator.aggregate(candidates, annotation_count=len(raw.annotations))
            intent_extraction_duration_seconds.observe(time.perf_counter() - started)

            intent_extractions_total.labels(intent=result.intent.value).inc()
            intent_confidence_histogram.observe(result.confidence)

            logger.info(
                f"Detected intent {result.intent.value} "
                f"(confidence={result.confidence:.3f}, "
                f"alternatives={[a.intent.value for a in result.alternative_intents]})",
                extra={"intent": result.intent.value, "confidence": result.confidence}
            )

            self._audit(request_id, result, candidates, existing_interpretation)

        return result

    def _audit(
        self,
        request_id: str,
        result: ExtractionResult,
        candidates: List[IntentCandidate],
        existing: Optional[PartialInterpretation],
    ) -> None:
        """Write the decision record; failures are logged and counted, never raised."""
        try:
            record = AuditRecord(
                request_id=request_id,
                detected_intent=result.intent,
                confidence=result.confidence,
                confidence_breakdown=result.confidence_breakdown,
                alternative_intents=[a.intent for a in result.alternative_intents],
                all_results=[
                    CandidateScore(intent=c.intent, confidence=c.confidence)
                    for c in candidates
                ],
                previous_intent=existing.intent if existing else None,
                timestamp=datetime.now(timezone.utc),
            )
            self.audit_sink.log_decision(record)
        except Exception as e:
            backend = getattr(self.audit_sink, "backend_name", "custom")
            audit_failures_total.labels(backend=backend).inc()
            logger.error(
                f"Failed to write intent audit record: {e}",
                exc_info=True,
                extra={"audit_backend": backend}
            )


def build_audit_sink(settings: Settings) -> AuditSink:
    """Create the audit sink selected by configuration.

    Raises:
        ValueError: If AUDIT_BACKEND is not "log" or "database"
    """
    if not settings.AUDIT_ENABLED:
        return NullAuditSink()

    if settings.AUDIT_BACKEND == "log":
        return LoggingAuditSink()

    if settings.AUDIT_BACKEND == "database":
        engine = create_audit_engine(settings.AUDIT_DATABASE_URL)
        init_audit_schema(engine)
        return DatabaseAuditSink(create_session_factory(engine))

    raise ValueError(f"Unknown AUDIT_BACKEND: {settings.AUDIT_BACKEND}")


def build_intent_service(
    settings: Optional[Settings] = None,
    registry: Optional[DetectorRegistry] = None,
    audit_sink: Optional[AuditSink] = None,
) -> IntentExtractionService:
    """Build a ready-to-use service from configuration.

    Example:
        service = build_intent_service()
        result = service.extract_intent("buy rice cooker", annotations)
        if result.needs_clarification(settings.CLARIFICATION_THRESHOLD):
            ...
    """
    settings = settings or get_settings()

    aggregator = ConfidenceAggregator(
        completeness=CompletenessAssessor(),
        alternative_min_confidence=settings.ALTERNATIVE_MIN_CONFIDENCE,
        max_alternatives=settings.MAX_ALTERNATIVES,
        context_with_annotations=settings.CONTEXT_CONFIDENCE_WITH_ANNOTATIONS,
        context_without_annotations=settings.CONTEXT_CONFIDENCE_WITHOUT_ANNOTATIONS,
    )

    return IntentExtractionService(
        registry=registry or build_default_registry(),
        aggregator=aggregator,
        audit_sink=audit_sink or build_audit_sink(settings),
    )
