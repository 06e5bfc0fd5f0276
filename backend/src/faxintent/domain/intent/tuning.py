"""Scoring tables for the intent detectors.

Every increment and threshold used by a detector lives here, one frozen table
per detector, so the scoring policy can be reviewed and tuned in one place.

Shared policy:
- start at 0.0
- add ``keyword`` once per matched keyword/phrase
- add the field weight for each extracted structured field
- clamp to 1.0
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmailWeights:
    keyword: float = 0.15
    recipient_email: float = 0.30
    recipient_name: float = 0.25
    subject: float = 0.20
    body: float = 0.20
    implicit_body: float = 0.15
    min_implicit_body_chars: int = 10


@dataclass(frozen=True)
class ShoppingWeights:
    keyword: float = 0.10
    product_query: float = 0.40
    quantity: float = 0.10
    delivery: float = 0.15
    visual_selection: float = 0.30
    max_product_query_chars: int = 80


@dataclass(frozen=True)
class AIChatWeights:
    keyword: float = 0.15
    question_marker: float = 0.20
    question: float = 0.30
    # Question text is only extracted once the score clears this bar
    extraction_bar: float = 0.20
    min_question_chars: int = 5


@dataclass(frozen=True)
class PaymentWeights:
    keyword: float = 0.20
    method: float = 0.30
    card_number: float = 0.40


@dataclass(frozen=True)
class ReplyWeights:
    selection: float = 0.60
    reference_code: float = 0.40
    freeform: float = 0.20
    floor_with_evidence: float = 0.30
    min_selection_confidence: float = 0.5
    min_freeform_line_chars: int = 3


EMAIL = EmailWeights()
SHOPPING = ShoppingWeights()
AI_CHAT = AIChatWeights()
PAYMENT = PaymentWeights()
REPLY = ReplyWeights()
