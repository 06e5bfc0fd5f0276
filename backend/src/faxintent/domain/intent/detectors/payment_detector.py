"""Payment-method registration intent detector.

Card numbers never leave this detector in clear text: only the masked form
``****-****-****-NNNN`` is stored in the parameters.
"""

from typing import Any, Dict

from .. import tuning
from ..models import IntentCandidate, IntentKind, RawInput
from ..ports import IntentDetectorPort
from ..text_utils import CARD_NUMBER_PATTERN, mask_card, match_keywords


class PaymentDetector(IntentDetectorPort):
    """Detects requests to register a credit card or convenience-store payment."""

    KEYWORDS = [
        'payment', 'credit card', 'card', 'pay', 'billing',
        'register card', 'add card', 'payment method',
        'convenience store', 'konbini', 'barcode',
    ]

    CREDIT_CARD_PHRASES = ['credit card', 'card']
    CONVENIENCE_STORE_PHRASES = ['convenience store', 'konbini', 'barcode']

    def __init__(self, weights: tuning.PaymentWeights = tuning.PAYMENT):
        self.weights = weights

    @property
    def intent(self) -> IntentKind:
        return IntentKind.PAYMENT_REGISTRATION

    def detect(self, raw: RawInput) -> IntentCandidate:
        w = self.weights
        text = raw.normalized_text
        confidence = 0.0
        parameters: Dict[str, Any] = {}

        confidence += len(match_keywords(text, self.KEYWORDS)) * w.keyword

        if match_keywords(text, self.CREDIT_CARD_PHRASES):
            parameters['paymentMethod'] = 'credit_card'
            confidence += w.method
        elif match_keywords(text, self.CONVENIENCE_STORE_PHRASES):
            parameters['paymentMethod'] = 'convenience_store'
            confidence += w.method

        match = CARD_NUMBER_PATTERN.search(text)
        if match:
            parameters['cardDetails'] = mask_card(match.group(0))
            confidence += w.card_number

        return self._candidate(confidence, parameters)
