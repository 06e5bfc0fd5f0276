"""Detector Registry - holds the intent detectors in registration order.

Registration order matters: when two detectors report exactly the same
confidence, the one registered first wins.
"""

import logging
from typing import List, Optional

from .detectors import (
    AIChatDetector,
    EmailDetector,
    PaymentDetector,
    ReplyDetector,
    ShoppingDetector,
)
from .models import IntentCandidate, IntentKind, RawInput
from .ports import IntentDetectorPort

logger = logging.getLogger(__name__)


class DetectorRegistry:
    """Registry for managing intent detectors.

    Example:
        registry = DetectorRegistry()
        registry.register(EmailDetector())
        registry.register(ShoppingDetector())

        candidates = registry.detect_all(RawInput.build("buy rice"))
    """

    def __init__(self):
        """Initialize empty registry."""
        self._detectors: List[IntentDetectorPort] = []

    def register(self, detector: IntentDetectorPort) -> None:
        """Register a detector.

        Args:
            detector: Detector implementation to register

        Raises:
            ValueError: If detector is None or its intent is already registered
        """
        if detector is None:
            raise ValueError("Cannot register None as detector")

        if self.get_detector(detector.intent) is not None:
            raise ValueError(f"A detector for intent '{detector.intent.value}' is already registered")

        self._detectors.append(detector)
        logger.info(f"Registered intent detector: {detector.intent.value}")

    def get_detector(self, intent: IntentKind) -> Optional[IntentDetectorPort]:
        """Get the detector registered for an intent, if any."""
        for detector in self._detectors:
            if detector.intent == intent:
                return detector
        return None

    def detect_all(self, raw: RawInput) -> List[IntentCandidate]:
        """Run every detector against the same input.

        Detectors are independent of each other. A detector that raises is
        logged and scored as zero confidence (fail-open), so one defective
        detector cannot block the decision.

        Returns:
            One candidate per registered detector, in registration order
        """
        candidates = []
        for detector in self._detectors:
            try:
                candidate = detector.detect(raw)
            except Exception as e:
                logger.error(
                    f"Intent detector '{detector.intent.value}' failed: {e}",
                    exc_info=True
                )
                candidate = IntentCandidate(intent=detector.intent, confidence=0.0)
            candidates.append(candidate)
            logger.debug(
                f"Detector '{detector.intent.value}' scored {candidate.confidence:.3f}"
            )
        return candidates

    def list_detectors(self) -> List[IntentDetectorPort]:
        """Get list of all registered detectors."""
        return list(self._detectors)

    def list_intents(self) -> List[IntentKind]:
        """Get registered intents in registration order."""
        return [detector.intent for detector in self._detectors]

    def __len__(self) -> int:
        return len(self._detectors)


def build_default_registry() -> DetectorRegistry:
    """Create a registry with the built-in detectors in their canonical order.

    Order: email, shopping, ai_chat, payment_registration, reply.
    """
    registry = DetectorRegistry()
    registry.register(EmailDetector())
    registry.register(ShoppingDetector())
    registry.register(AIChatDetector())
    registry.register(PaymentDetector())
    registry.register(ReplyDetector())
    return registry
