"""IntentDetectorPort interface for intent detectors.

Defines the contract every intent detector implements. New intents are
supported by registering another implementation with the detector registry;
the aggregator never needs to change.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from ..models import IntentCandidate, IntentKind, RawInput, clamp_confidence
from ..text_utils import mask_parameters


class IntentDetectorPort(ABC):
    """Port interface for intent detectors.

    Implementations must be stateless and side-effect free: the same
    ``RawInput`` always produces the same ``IntentCandidate``. Detectors do
    not perform I/O; anything that needs a lookup belongs in an earlier stage
    and arrives through ``RawInput.existing``.

    Example implementations:
    - EmailDetector: recipients, subject and body cues
    - ShoppingDetector: product queries and circled product letters
    - ReplyDetector: circled options on a previously sent form
    """

    @property
    @abstractmethod
    def intent(self) -> IntentKind:
        """Intent kind this detector scores."""
        pass

    @abstractmethod
    def detect(self, raw: RawInput) -> IntentCandidate:
        """Score the input for this detector's intent.

        Args:
            raw: Immutable input shared by all detectors

        Returns:
            IntentCandidate with confidence in [0, 1] and extracted parameters

        Raises:
            Should not raise - absence of evidence is a zero confidence
            candidate, not an error.
        """
        pass

    def _candidate(self, confidence: float, parameters: Dict[str, Any]) -> IntentCandidate:
        """Build a candidate with masked parameters and a clamped confidence."""
        return IntentCandidate(
            intent=self.intent,
            confidence=clamp_confidence(confidence),
            parameters=mask_parameters(parameters),
        )
