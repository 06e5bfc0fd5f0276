"""Routing scores derived from an extraction result.

These helpers fold the diagnostic breakdown into a single score for
downstream routing (act vs. ask for clarification). They are not used to
compute ``ExtractionResult.confidence``, which always equals the primary
intent's confidence.
"""

from typing import Sequence

from .models import VisualAnnotation, clamp_confidence


def blend_confidence(
    intent_confidence: float,
    parameter_completeness: float,
    annotation_quality: float,
    intent_weight: float = 0.5,
    parameters_weight: float = 0.3,
    visual_weight: float = 0.2
) -> float:
    """Weighted average of intent, parameter and visual confidence.

    Raises:
        ValueError: If the weights do not sum to 1.0
    """
    if abs(intent_weight + parameters_weight + visual_weight - 1.0) > 0.01:
        raise ValueError(
            f"Weights must sum to 1.0, got {intent_weight + parameters_weight + visual_weight}"
        )

    return clamp_confidence(
        intent_confidence * intent_weight
        + parameter_completeness * parameters_weight
        + annotation_quality * visual_weight
    )


def assess_annotation_quality(annotations: Sequence[VisualAnnotation]) -> float:
    """Score how much the detected marks can be trusted.

    0.5 (neutral) without annotations. Otherwise 60% of the mean mark
    confidence, +0.2 if any mark is above 0.8, +0.2 if any mark carries
    associated text.
    """
    if not annotations:
        return 0.5

    avg_confidence = sum(ann.confidence for ann in annotations) / len(annotations)
    quality = avg_confidence * 0.6
    if any(ann.confidence > 0.8 for ann in annotations):
        quality += 0.2
    if any(ann.associated_text for ann in annotations):
        quality += 0.2

    return clamp_confidence(quality)
