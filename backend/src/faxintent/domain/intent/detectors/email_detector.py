"""Email intent detector.

Looks for recipients (addresses or names after a "send/tell/write to" cue),
a subject after "subject/about/regarding", and a message body after
"tell them/say/write". When no explicit body is written but a recipient is
known, the rest of the sentence is used as the body.
"""

import re
from typing import Any, Dict, Optional, Tuple

from .. import tuning
from ..models import IntentCandidate, IntentKind, RawInput
from ..ports import IntentDetectorPort
from ..text_utils import match_keywords


class EmailDetector(IntentDetectorPort):
    """Detects requests to send an email on the sender's behalf."""

    KEYWORDS = [
        'send email', 'email to', 'tell', 'message', 'write to',
        'contact', 'let me know', 'inform', 'notify', 'reply to',
    ]

    _CUE = r'\b(?:email to|send to|tell|write to|contact|reply to)\s+'
    ADDRESS = r'[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}'

    CUED_ADDRESS_PATTERN = re.compile(_CUE + r'(' + ADDRESS + r')', re.IGNORECASE)
    ANY_ADDRESS_PATTERN = re.compile(r'\b(' + ADDRESS + r')', re.IGNORECASE)
    # One name token, optionally followed by a capitalised surname ("Takeshi Yamada")
    NAME_PATTERN = re.compile(
        _CUE + r"([a-z][a-z'-]*(?:\s+(?!(?:about|regarding|that)\b)(?-i:[A-Z][a-z'-]+))?)",
        re.IGNORECASE,
    )

    # Words that follow a cue but are not a recipient ("tell them ...")
    NOT_NAMES = frozenset({
        'them', 'him', 'her', 'me', 'us', 'you', 'it', 'that', 'about',
        'my', 'the', 'a', 'an', 'everyone', 'everybody',
    })

    SUBJECT_PATTERNS = [
        re.compile(r'\bsubject\s*:?\s*([^\n\r]+)', re.IGNORECASE),
        re.compile(r'\babout\s+([^\n\r,.;]+)', re.IGNORECASE),
        re.compile(r'\bregarding\s+([^\n\r,.;]+)', re.IGNORECASE),
    ]

    BODY_PATTERNS = [
        re.compile(
            r'\b(?:tell (?:them|him|her)|say|write(?!\s+to\b))(?:\s+that)?\s*:?\s*([^\n\r]+)',
            re.IGNORECASE,
        ),
        re.compile(r'\b(?:the message is|message|body|content)\s*:\s*([^\n\r]+)', re.IGNORECASE),
    ]

    _LEAD_IN = re.compile(
        r'^(?:send (?:an )?email to|email to|send to|tell|write to|contact|send(?: an)?(?: email)?)\b[\s,:]*',
        re.IGNORECASE,
    )
    _CONNECTOR = re.compile(r'^(?:that|about|regarding)\s*', re.IGNORECASE)

    def __init__(self, weights: tuning.EmailWeights = tuning.EMAIL):
        self.weights = weights

    @property
    def intent(self) -> IntentKind:
        return IntentKind.EMAIL

    def detect(self, raw: RawInput) -> IntentCandidate:
        w = self.weights
        confidence = 0.0
        parameters: Dict[str, Any] = {}

        confidence += len(match_keywords(raw.normalized_text, self.KEYWORDS)) * w.keyword

        # Span of the recipient mention (cue included when present)
        mention: Optional[Tuple[int, int]] = None

        address_match = self._match_address(raw.text)
        if address_match:
            parameters['recipientEmail'] = address_match.group(1).strip().lower()
            mention = address_match.span()
            confidence += w.recipient_email
        else:
            name_match = self._match_name(raw.text)
            if name_match:
                parameters['recipientName'] = name_match.group(1).strip()
                mention = name_match.span()
                confidence += w.recipient_name

        subject = self._first_group(self.SUBJECT_PATTERNS, raw.text)
        if subject:
            parameters['subject'] = subject
            confidence += w.subject

        body = self._first_group(self.BODY_PATTERNS, raw.text)
        if body:
            parameters['body'] = body
            confidence += w.body
        elif mention is not None:
            implicit = self.extract_implicit_body(raw.text, mention)
            if implicit:
                parameters['body'] = implicit
                confidence += w.implicit_body

        return self._candidate(confidence, parameters)

    def _match_address(self, text: str) -> Optional[re.Match]:
        return self.CUED_ADDRESS_PATTERN.search(text) or self.ANY_ADDRESS_PATTERN.search(text)

    def _match_name(self, text: str) -> Optional[re.Match]:
        for match in self.NAME_PATTERN.finditer(text):
            if match.group(1).split()[0].lower() not in self.NOT_NAMES:
                return match
        return None

    @staticmethod
    def _first_group(patterns, text: str) -> Optional[str]:
        for pattern in patterns:
            match = pattern.search(text)
            if match:
                value = match.group(1).strip()
                if value:
                    return value
        return None

    def extract_implicit_body(self, text: str, mention: Tuple[int, int]) -> Optional[str]:
        """Use the remaining sentence as the body when none was written explicitly.

        Cuts out the recipient mention at ``mention`` (start, end) and strips
        lead-in phrases; the rest counts as a body only if it is longer than a
        short stray word.
        """
        start, end = mention
        body = text[:start] + ' ' + text[end:]

        body = re.sub(r'\s+', ' ', body).strip()
        body = re.sub(r' ([,.;:])', r'\1', body)
        body = self._LEAD_IN.sub('', body)
        body = self._CONNECTOR.sub('', body)
        body = body.strip(' ,.;:-')

        if len(body) > self.weights.min_implicit_body_chars and len(body.split()) > 1:
            return body
        return None
