"""Confidence aggregation for intent candidates.

Selects the primary intent, ranks alternatives and computes the confidence
breakdown.

Algorithm:
1. primary = candidate with the highest confidence; on an exact tie the
   candidate registered first wins
2. alternatives = other candidates with confidence > 0.3, highest first,
   at most 2, each with a fixed reason per intent
3. context_understanding = 0.8 with annotations, 0.5 without
4. overall = primary confidence; the other components are explanatory only
"""

import logging
from typing import Dict, List, Optional, Sequence

from .completeness import CompletenessAssessor
from .models import (
    AlternativeIntent,
    ComponentConfidence,
    ConfidenceBreakdown,
    ExtractionResult,
    IntentCandidate,
    IntentKind,
)

logger = logging.getLogger(__name__)

INTENT_REASONS: Dict[IntentKind, str] = {
    IntentKind.EMAIL: "Contains email-related keywords or recipient information",
    IntentKind.SHOPPING: "Contains product or purchase-related keywords",
    IntentKind.AI_CHAT: "Contains question patterns or inquiry keywords",
    IntentKind.PAYMENT_REGISTRATION: "Contains payment or billing-related keywords",
    IntentKind.REPLY: "Contains circled options or reference to previous communication",
}
DEFAULT_REASON = "Pattern match detected"


def select_primary(candidates: Sequence[IntentCandidate]) -> IntentCandidate:
    """Pick the highest-confidence candidate.

    A later candidate replaces the current best only when its confidence is
    strictly greater, so ties resolve to the earlier (first-registered) one.

    Raises:
        ValueError: If candidates is empty
    """
    if not candidates:
        raise ValueError("Cannot select a primary intent from an empty candidate list")

    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.confidence > best.confidence:
            best = candidate
    return best


def intent_reason(intent: IntentKind) -> str:
    return INTENT_REASONS.get(intent, DEFAULT_REASON)


class ConfidenceAggregator:
    """Fan-in step that turns detector candidates into an ExtractionResult."""

    def __init__(
        self,
        completeness: Optional[CompletenessAssessor] = None,
        alternative_min_confidence: float = 0.3,
        max_alternatives: int = 2,
        context_with_annotations: float = 0.8,
        context_without_annotations: float = 0.5,
    ):
        self.completeness = completeness or CompletenessAssessor()
        self.alternative_min_confidence = alternative_min_confidence
        self.max_alternatives = max_alternatives
        self.context_with_annotations = context_with_annotations
        self.context_without_annotations = context_without_annotations

    def rank_alternatives(
        self,
        candidates: Sequence[IntentCandidate],
        primary: IntentCandidate,
    ) -> List[AlternativeIntent]:
        """Rank runner-up intents worth offering for disambiguation."""
        eligible = [
            c for c in candidates
            if c.intent != primary.intent and c.confidence > self.alternative_min_confidence
        ]
        # sorted() is stable: equal confidences keep registration order
        eligible = sorted(eligible, key=lambda c: c.confidence, reverse=True)

        return [
            AlternativeIntent(
                intent=c.intent,
                confidence=c.confidence,
                reason=intent_reason(c.intent),
            )
            for c in eligible[:self.max_alternatives]
        ]

    def context_understanding(self, annotation_count: int) -> float:
        if annotation_count > 0:
            return self.context_with_annotations
        return self.context_without_annotations

    def aggregate(
        self,
        candidates: Sequence[IntentCandidate],
        annotation_count: int,
    ) -> ExtractionResult:
        """Combine candidates into the final extraction result.

        Args:
            candidates: One candidate per detector, in registration order
            annotation_count: Number of visual annotations on the page

        Returns:
            Immutable ExtractionResult

        Raises:
            ValueError: If candidates is empty
        """
        primary = select_primary(candidates)
        alternatives = self.rank_alternatives(candidates, primary)

        breakdown = ConfidenceBreakdown(
            overall=primary.confidence,
            by_component=ComponentConfidence(
                intent_classification=primary.confidence,
                parameter_extraction=self.completeness.assess(primary.intent, primary.parameters),
                context_understanding=self.context_understanding(annotation_count),
            ),
        )

        logger.debug(
            f"Aggregated {len(candidates)} candidates: primary={primary.intent.value} "
            f"({primary.confidence:.3f}), alternatives={[a.intent.value for a in alternatives]}"
        )

        return ExtractionResult(
            intent=primary.intent,
            confidence=primary.confidence,
            parameters=dict(primary.parameters),
            confidence_breakdown=breakdown,
            alternative_intents=alternatives,
        )
