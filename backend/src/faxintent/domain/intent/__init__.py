"""Intent Extraction Domain Module

Detectors score the same input independently, the aggregator picks the
primary intent and ranks alternatives, and the completeness assessor explains
how much of the expected parameters were found.

The orchestrating service lives in ``faxintent.domain.intent.service``.
"""

from .models import (
    AlternativeIntent,
    AnnotationKind,
    AuditRecord,
    ComponentConfidence,
    ConfidenceBreakdown,
    ExtractionResult,
    IntentCandidate,
    IntentKind,
    PartialInterpretation,
    RawInput,
    VisualAnnotation,
)
from .aggregator import ConfidenceAggregator, select_primary
from .completeness import CompletenessAssessor, CompletenessRule
from .registry import DetectorRegistry, build_default_registry
from .scoring import assess_annotation_quality, blend_confidence

__all__ = [
    "AlternativeIntent",
    "AnnotationKind",
    "AuditRecord",
    "ComponentConfidence",
    "ConfidenceBreakdown",
    "ExtractionResult",
    "IntentCandidate",
    "IntentKind",
    "PartialInterpretation",
    "RawInput",
    "VisualAnnotation",
    "ConfidenceAggregator",
    "select_primary",
    "CompletenessAssessor",
    "CompletenessRule",
    "DetectorRegistry",
    "build_default_registry",
    "assess_annotation_quality",
    "blend_confidence",
]
