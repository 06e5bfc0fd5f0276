"""Domain models for intent extraction.

Pydantic models for the raw input handed over by the vision/annotation stages,
per-detector candidates, and the immutable extraction result returned to
callers. Field names are snake_case in Python and serialize with camelCase
aliases (``model_dump(by_alias=True)``) for the audit trail and API consumers.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def clamp_confidence(value: float) -> float:
    """Clamp a confidence to [0.0, 1.0] and round to 3 decimal places."""
    return round(min(1.0, max(0.0, float(value))), 3)


class IntentKind(str, Enum):
    """Action categories the sender can request"""
    EMAIL = "email"
    SHOPPING = "shopping"
    AI_CHAT = "ai_chat"
    PAYMENT_REGISTRATION = "payment_registration"
    REPLY = "reply"


class AnnotationKind(str, Enum):
    """Hand-drawn mark types reported by the annotation detector"""
    CIRCLE = "circle"
    CHECKMARK = "checkmark"
    ARROW = "arrow"
    UNDERLINE = "underline"
    CHECKBOX = "checkbox"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class BoundingBox(_FrozenModel):
    """Mark position on the page (pixels). Carried through, never scored."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class VisualAnnotation(_FrozenModel):
    """A single detected mark with its own detection confidence."""
    kind: AnnotationKind
    associated_text: Optional[str] = None
    confidence: float = Field(ge=0.0, le=1.0)
    bounding_box: Optional[BoundingBox] = None


class PartialInterpretation(_FrozenModel):
    """State carried forward from earlier steps of an interpretation session.

    Read-only for detectors.
    """
    intent: Optional[IntentKind] = None
    confidence: Optional[float] = None
    parameters: Dict[str, Any] = Field(default_factory=dict)
    reference_id: Optional[str] = None


class RawInput(_FrozenModel):
    """Immutable input shared by every detector within one extraction call.

    ``text`` is the trimmed OCR text with its original casing and is used to
    extract parameter values. ``normalized_text`` is the lower-cased form used
    for keyword scoring.
    """
    text: str = ""
    normalized_text: str = ""
    annotations: tuple[VisualAnnotation, ...] = ()
    existing: Optional[PartialInterpretation] = None

    @classmethod
    def build(
        cls,
        text: Optional[str],
        annotations: Optional[List[VisualAnnotation]] = None,
        existing: Optional[PartialInterpretation] = None,
    ) -> "RawInput":
        trimmed = (text or "").strip()
        return cls(
            text=trimmed,
            normalized_text=trimmed.lower(),
            annotations=tuple(annotations or ()),
            existing=existing,
        )


class IntentCandidate(_FrozenModel):
    """One detector's verdict for one input."""
    intent: IntentKind
    confidence: float = 0.0
    parameters: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("confidence")
    @classmethod
    def _clamp(cls, value: float) -> float:
        return clamp_confidence(value)


class ComponentConfidence(_FrozenModel):
    """Explanatory confidence components (diagnostic only)"""
    intent_classification: float
    parameter_extraction: float
    context_understanding: float

    @field_validator("intent_classification", "parameter_extraction", "context_understanding")
    @classmethod
    def _clamp(cls, value: float) -> float:
        return clamp_confidence(value)


class ConfidenceBreakdown(_FrozenModel):
    """Overall confidence plus its explanatory components.

    ``overall`` always equals the primary intent's confidence; the components
    are never re-aggregated into it.
    """
    overall: float
    by_component: ComponentConfidence

    @field_validator("overall")
    @classmethod
    def _clamp(cls, value: float) -> float:
        return clamp_confidence(value)


class AlternativeIntent(_FrozenModel):
    """Non-winning candidate surfaced for disambiguation"""
    intent: IntentKind
    confidence: float
    reason: str

    @field_validator("confidence")
    @classmethod
    def _clamp(cls, value: float) -> float:
        return clamp_confidence(value)


class ExtractionResult(_FrozenModel):
    """Final, immutable decision for one document."""
    intent: IntentKind
    confidence: float
    parameters: Dict[str, Any] = Field(default_factory=dict)
    confidence_breakdown: ConfidenceBreakdown
    alternative_intents: List[AlternativeIntent] = Field(default_factory=list)

    @field_validator("confidence")
    @classmethod
    def _clamp(cls, value: float) -> float:
        return clamp_confidence(value)

    def needs_clarification(self, threshold: float) -> bool:
        """Check whether the caller should ask the sender to clarify."""
        return self.confidence < threshold


class CandidateScore(_FrozenModel):
    intent: IntentKind
    confidence: float


class AuditRecord(_FrozenModel):
    """Summary of one extraction decision, handed to the audit sink.

    This is the only object in the pipeline that carries a wall-clock value.
    """
    event_type: str = "intent_extraction.intent_detected"
    request_id: str
    detected_intent: IntentKind
    confidence: float
    confidence_breakdown: ConfidenceBreakdown
    alternative_intents: List[IntentKind] = Field(default_factory=list)
    all_results: List[CandidateScore] = Field(default_factory=list)
    previous_intent: Optional[IntentKind] = None
    timestamp: datetime
