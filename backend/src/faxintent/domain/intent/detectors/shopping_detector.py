"""Shopping intent detector.

Extracts a product query, quantity and delivery preference from the text and
treats circled/checked option letters as product selections from a
previously faxed product list.
"""

import re
from typing import Any, Dict, Optional

from .. import tuning
from ..models import IntentCandidate, IntentKind, RawInput
from ..ports import IntentDetectorPort
from ..text_utils import mask_card_numbers, match_keywords, selected_letters


class ShoppingDetector(IntentDetectorPort):
    """Detects purchase requests and product selections."""

    KEYWORDS = [
        'buy', 'purchase', 'order', 'shop', 'need', 'want',
        'get me', 'find', 'looking for', 'search for',
    ]

    _QUERY_END = r'(?=\s+(?:and|from|at|for|with)\b|[,.!?;\n\r]|$)'

    # Explicit purchase verbs are tried before "need/want" so that
    # "i want to buy rice" yields "rice"
    PRODUCT_PATTERNS = [
        re.compile(
            r'\b(?:buy|purchase|order|get me|find|looking for|search for)\s+'
            r'(?:some\s+|a\s+|an\s+|the\s+)?(.+?)' + _QUERY_END,
            re.IGNORECASE,
        ),
        re.compile(
            r'\b(?:need|want)\s+(?:some\s+|a\s+|an\s+|the\s+)?(.+?)' + _QUERY_END,
            re.IGNORECASE,
        ),
    ]

    QUANTITY_PATTERNS = [
        re.compile(
            r'(?<!\d)(\d{1,4})\s*(?:of|x|pieces?|items?|units?|packs?|boxes|box|bottles?)\b',
            re.IGNORECASE,
        ),
        re.compile(r'\b(?:quantity|qty|amount)\s*:?\s*(\d{1,4})(?!\d)', re.IGNORECASE),
    ]

    DELIVERY_PATTERNS = [
        re.compile(r'\b(?:deliver to|ship to)\s+([^\n\r,.;]+)', re.IGNORECASE),
        re.compile(r'\b(?:delivery|shipping)\s*:\s*([^\n\r]+)', re.IGNORECASE),
    ]
    URGENCY_PATTERN = re.compile(r'\b(?:urgent|urgently|rush|fast|quick|asap)\b', re.IGNORECASE)

    def __init__(self, weights: tuning.ShoppingWeights = tuning.SHOPPING):
        self.weights = weights

    @property
    def intent(self) -> IntentKind:
        return IntentKind.SHOPPING

    def detect(self, raw: RawInput) -> IntentCandidate:
        w = self.weights
        confidence = 0.0
        parameters: Dict[str, Any] = {}

        confidence += len(match_keywords(raw.normalized_text, self.KEYWORDS)) * w.keyword

        product = self._extract_product(raw.text)
        if product:
            parameters['productQuery'] = product
            confidence += w.product_query

        quantity = self._extract_quantity(raw.text)
        if quantity:
            parameters['quantity'] = quantity
            confidence += w.quantity

        delivery = self._extract_delivery(raw.text)
        if delivery:
            parameters['deliveryPreferences'] = delivery
            confidence += w.delivery

        # Circled product letters augment whatever the text says
        letters = selected_letters(raw.annotations)
        if letters:
            parameters['selectedProductIds'] = letters
            confidence += w.visual_selection

        return self._candidate(confidence, parameters)

    def _extract_product(self, text: str) -> Optional[str]:
        for pattern in self.PRODUCT_PATTERNS:
            match = pattern.search(text)
            if match:
                # Mask before truncating so a cut never splits a card number
                product = mask_card_numbers(match.group(1).strip())
                product = product[:self.weights.max_product_query_chars].strip()
                if product:
                    return product
        return None

    def _extract_quantity(self, text: str) -> Optional[int]:
        for pattern in self.QUANTITY_PATTERNS:
            match = pattern.search(text)
            if match:
                return int(match.group(1))
        return None

    def _extract_delivery(self, text: str) -> Optional[str]:
        for pattern in self.DELIVERY_PATTERNS:
            match = pattern.search(text)
            if match and match.group(1).strip():
                return match.group(1).strip()
        if self.URGENCY_PATTERN.search(text):
            return 'urgent'
        return None
