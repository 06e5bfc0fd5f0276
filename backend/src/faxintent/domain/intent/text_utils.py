"""Text helpers shared by the intent detectors.

Keyword matching, selection-marker filtering, reference-code lookup, and
masking of card-like digit runs.
"""

import re
from typing import Any, Iterable, List, Optional, Sequence

from .models import AnnotationKind, VisualAnnotation

SELECTION_KINDS = frozenset({AnnotationKind.CIRCLE, AnnotationKind.CHECKMARK})

_SELECTION_LETTER = re.compile(r'^[A-Z]$')

# 16 digits in groups of four, optionally separated by a space or hyphen
CARD_NUMBER_PATTERN = re.compile(r'(?<!\d)\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{4}(?!\d)')

# Any run of 13+ digits (single whitespace/hyphen separators allowed)
_LONG_DIGIT_RUN = re.compile(r'(?<!\d)\d(?:[\s-]?\d){12,}(?!\d)')

REFERENCE_ID_PATTERNS = [
    re.compile(r'(?:ref|reference|ref#)\s*[:#]?\s*(FX-\d{4}-\d{6})', re.IGNORECASE),
    re.compile(r'(?:order|ticket|case)\s*#?\s*(FX-\d{4}-\d{6})', re.IGNORECASE),
    re.compile(r'\b(FX-\d{4}-\d{6})\b', re.IGNORECASE),
]

_keyword_cache: dict[str, re.Pattern] = {}


def _keyword_pattern(keyword: str) -> re.Pattern:
    pattern = _keyword_cache.get(keyword)
    if pattern is None:
        pattern = re.compile(r'\b' + re.escape(keyword) + r'\b')
        _keyword_cache[keyword] = pattern
    return pattern


def match_keywords(text: str, keywords: Sequence[str]) -> List[str]:
    """Return the keywords that occur in ``text`` as whole words, in list order."""
    if not text:
        return []
    return [kw for kw in keywords if _keyword_pattern(kw).search(text)]


def is_selection_letter(value: Optional[str]) -> bool:
    return value is not None and bool(_SELECTION_LETTER.match(value))


def selected_letters(
    annotations: Iterable[VisualAnnotation],
    min_confidence: Optional[float] = None,
) -> List[str]:
    """Collect option letters the sender circled or checked.

    Args:
        annotations: Marks from the annotation detector
        min_confidence: If given, only marks with confidence strictly above
            this value count

    Returns:
        Letters in first-seen order, without duplicates
    """
    letters: List[str] = []
    for ann in annotations:
        if ann.kind not in SELECTION_KINDS:
            continue
        if min_confidence is not None and ann.confidence <= min_confidence:
            continue
        if is_selection_letter(ann.associated_text) and ann.associated_text not in letters:
            letters.append(ann.associated_text)
    return letters


def extract_reference_id(text: str) -> Optional[str]:
    """Find a reference code (``FX-YYYY-NNNNNN``) printed on a prior fax."""
    if not text:
        return None
    for pattern in REFERENCE_ID_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1).upper()
    return None


def mask_card(number: str) -> str:
    digits = re.sub(r'\D', '', number)
    return '****-****-****-' + digits[-4:]


def mask_card_numbers(text: str) -> str:
    """Replace long digit runs with their masked form (last 4 digits kept)."""
    return _LONG_DIGIT_RUN.sub(lambda m: mask_card(m.group(0)), text)


def mask_parameters(parameters: dict[str, Any]) -> dict[str, Any]:
    """Mask card-like digit runs in every string parameter value."""
    masked: dict[str, Any] = {}
    for key, value in parameters.items():
        if isinstance(value, str):
            masked[key] = mask_card_numbers(value)
        elif isinstance(value, list):
            masked[key] = [
                mask_card_numbers(item) if isinstance(item, str) else item
                for item in value
            ]
        else:
            masked[key] = value
    return masked
