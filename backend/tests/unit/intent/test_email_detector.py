"""Unit tests for the email intent detector

Tests cover:
- Name and address recipients
- Subject and explicit body cues
- Implicit body fallback when only a recipient is named
- Inputs without email evidence
"""

import pytest

from faxintent.domain.intent.detectors import EmailDetector
from faxintent.domain.intent.models import IntentKind, RawInput


@pytest.fixture
def detector():
    return EmailDetector()


class TestEmailDetector:
    """Test email recipient, subject and body extraction"""

    def test_explicit_fields(self, detector):
        """Recipient name, subject and body are all extracted"""
        raw = RawInput.build("send email to takeshi about dinner plans, tell them I'll bring dessert")

        candidate = detector.detect(raw)

        assert candidate.intent == IntentKind.EMAIL
        assert candidate.parameters["recipientName"] == "takeshi"
        assert candidate.parameters["subject"] == "dinner plans"
        assert "I'll bring dessert" in candidate.parameters["body"]
        assert candidate.confidence == 1.0

    def test_address_recipient(self, detector):
        """An address after a cue is stored as recipientEmail, not a name"""
        raw = RawInput.build("please email to Hanako@Example.com about the meeting")

        candidate = detector.detect(raw)

        assert candidate.parameters["recipientEmail"] == "hanako@example.com"
        assert "recipientName" not in candidate.parameters
        assert candidate.parameters["subject"] == "the meeting"

    def test_pronoun_is_not_a_recipient(self, detector):
        """'tell them' carries a body but names nobody"""
        raw = RawInput.build("tell them the party moved to friday")

        candidate = detector.detect(raw)

        assert "recipientName" not in candidate.parameters
        assert candidate.parameters["body"] == "the party moved to friday"
        assert candidate.confidence == pytest.approx(0.35)  # keyword + body

    def test_implicit_body(self, detector):
        """Without a body cue, the rest of the sentence becomes the body"""
        raw = RawInput.build("email to kenji running late for the meeting tonight")

        candidate = detector.detect(raw)

        assert candidate.parameters["recipientName"] == "kenji"
        assert candidate.parameters["body"] == "running late for the meeting tonight"
        assert candidate.confidence == pytest.approx(0.55)

    def test_short_leftover_is_not_a_body(self, detector):
        """A stray word after the recipient is not treated as a body"""
        raw = RawInput.build("contact yuki ok")

        candidate = detector.detect(raw)

        assert candidate.parameters["recipientName"] == "yuki"
        assert "body" not in candidate.parameters

    def test_name_inside_earlier_word(self, detector):
        """Only the cued mention is cut from the implicit body"""
        raw = RawInput.build("finally contact al, the meeting moved to noon")

        candidate = detector.detect(raw)

        assert candidate.parameters["recipientName"] == "al"
        assert candidate.parameters["body"] == "finally, the meeting moved to noon"

    def test_send_lead_in_stripped_from_implicit_body(self, detector):
        raw = RawInput.build("send email to kenji, the train is delayed")

        candidate = detector.detect(raw)

        assert candidate.parameters["body"] == "the train is delayed"

    def test_full_name_recipient(self, detector):
        """A capitalised surname after the first name is kept"""
        raw = RawInput.build("email to Takeshi Yamada about the budget")

        candidate = detector.detect(raw)

        assert candidate.parameters["recipientName"] == "Takeshi Yamada"
        assert candidate.parameters["subject"] == "the budget"

    def test_surname_stops_at_connector(self, detector):
        raw = RawInput.build("email to Ken About lunch")

        candidate = detector.detect(raw)

        assert candidate.parameters["recipientName"] == "Ken"
        assert candidate.parameters["subject"] == "lunch"

    def test_no_email_evidence(self, detector):
        """Shopping text scores zero for email"""
        candidate = detector.detect(RawInput.build("buy rice cooker"))

        assert candidate.confidence == 0.0
        assert candidate.parameters == {}
