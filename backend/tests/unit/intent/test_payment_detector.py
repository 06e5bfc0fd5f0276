"""Unit tests for the payment registration detector

Includes the masking law: card numbers never reach the parameters in clear
text, only their last four digits.
"""

import pytest

from faxintent.domain.intent.detectors import PaymentDetector
from faxintent.domain.intent.models import IntentKind, RawInput


@pytest.fixture
def detector():
    return PaymentDetector()


class TestPaymentDetector:
    """Test payment method classification and card masking"""

    def test_credit_card_with_number(self, detector):
        """Card number is stored masked, method is credit_card"""
        raw = RawInput.build("please register my credit card 4111 1111 1111 1234")

        candidate = detector.detect(raw)

        assert candidate.intent == IntentKind.PAYMENT_REGISTRATION
        assert candidate.parameters["paymentMethod"] == "credit_card"
        assert candidate.parameters["cardDetails"] == "****-****-****-1234"
        assert candidate.confidence == 1.0

    def test_contiguous_card_number_masked(self, detector):
        candidate = detector.detect(RawInput.build("card number 4111111111111234"))

        assert candidate.parameters["cardDetails"] == "****-****-****-1234"

    @pytest.mark.parametrize("text", [
        "card 4111111111111234",
        "pay with card 4111-1111-1111-1234 please",
        "my card is 4111 1111 1111 1234 thanks",
    ])
    def test_masking_law(self, detector, text):
        """No parameter holds more than the last four digits"""
        candidate = detector.detect(RawInput.build(text))

        for value in candidate.parameters.values():
            digits = "".join(ch for ch in str(value) if ch.isdigit())
            assert len(digits) <= 4

    def test_convenience_store(self, detector):
        """Konbini/barcode wording selects convenience_store"""
        candidate = detector.detect(RawInput.build("i want to pay at the konbini with a barcode"))

        assert candidate.parameters == {"paymentMethod": "convenience_store"}
        assert candidate.confidence == pytest.approx(0.9)

    def test_no_payment_evidence(self, detector):
        candidate = detector.detect(RawInput.build("what time is it?"))

        assert candidate.confidence == 0.0
        assert candidate.parameters == {}
