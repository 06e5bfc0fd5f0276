"""Unit tests for detector text helpers"""

import pytest

from faxintent.domain.intent.models import AnnotationKind, VisualAnnotation
from faxintent.domain.intent.text_utils import (
    extract_reference_id,
    mask_card,
    mask_card_numbers,
    mask_parameters,
    match_keywords,
    selected_letters,
)


class TestMatchKeywords:
    """Test whole-word keyword matching"""

    def test_matches_in_list_order(self):
        assert match_keywords("please buy and order rice", ["order", "buy", "shop"]) == ["order", "buy"]

    def test_substring_does_not_match(self):
        """'ai' is not found inside 'email' or 'said'"""
        assert match_keywords("email what she said", ["ai"]) == []

    def test_multi_word_keyword(self):
        assert match_keywords("send email to bob", ["send email", "email to"]) == ["send email", "email to"]

    def test_empty_text(self):
        assert match_keywords("", ["buy"]) == []


class TestSelectedLetters:
    """Test option letter selection from annotations"""

    def test_confidence_filter_is_strict(self):
        annotations = [
            VisualAnnotation(kind=AnnotationKind.CIRCLE, associated_text="A", confidence=0.5),
            VisualAnnotation(kind=AnnotationKind.CIRCLE, associated_text="B", confidence=0.51),
        ]

        assert selected_letters(annotations, min_confidence=0.5) == ["B"]
        assert selected_letters(annotations) == ["A", "B"]

    def test_lowercase_and_words_ignored(self):
        annotations = [
            VisualAnnotation(kind=AnnotationKind.CHECKMARK, associated_text="a", confidence=0.9),
            VisualAnnotation(kind=AnnotationKind.CHECKMARK, associated_text="AB", confidence=0.9),
            VisualAnnotation(kind=AnnotationKind.ARROW, associated_text="C", confidence=0.9),
        ]

        assert selected_letters(annotations) == []


class TestReferenceId:
    """Test reference code lookup"""

    @pytest.mark.parametrize("text", [
        "Ref: FX-2024-000123",
        "reference #FX-2024-000123",
        "order fx-2024-000123 answered",
        "see FX-2024-000123 above",
    ])
    def test_reference_found(self, text):
        assert extract_reference_id(text) == "FX-2024-000123"

    def test_no_reference(self):
        assert extract_reference_id("FX-24-123") is None
        assert extract_reference_id("") is None


class TestMasking:
    """Test card number masking"""

    def test_mask_card_keeps_last_four(self):
        assert mask_card("4111 1111 1111 1234") == "****-****-****-1234"

    def test_mask_card_numbers_in_text(self):
        masked = mask_card_numbers("card 4111-1111-1111-1234 exp 12/27")

        assert masked == "card ****-****-****-1234 exp 12/27"

    def test_short_numbers_untouched(self):
        assert mask_card_numbers("call 03-1234-5678") == "call 03-1234-5678"

    def test_mask_parameters_masks_strings_and_lists(self):
        params = {
            "body": "my card is 4111111111111234",
            "notes": ["4111 1111 1111 1234", 7],
            "quantity": 3,
        }

        masked = mask_parameters(params)

        assert masked["body"] == "my card is ****-****-****-1234"
        assert masked["notes"] == ["****-****-****-1234", 7]
        assert masked["quantity"] == 3
