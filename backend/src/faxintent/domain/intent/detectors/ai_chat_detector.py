"""General-inquiry (AI chat) intent detector."""

import re
from typing import Any, Dict

from .. import tuning
from ..models import IntentCandidate, IntentKind, RawInput
from ..ports import IntentDetectorPort
from ..text_utils import match_keywords


class AIChatDetector(IntentDetectorPort):
    """Detects free-form questions meant for the assistant.

    Question text is only extracted once keywords or question markers have
    already pushed the score past a minimal bar, so a stray "?" on an
    otherwise empty page does not produce a question.
    """

    KEYWORDS = [
        'ask', 'question', 'what is', 'how to', 'why', 'when',
        'where', 'who', 'explain', 'help me understand',
        'tell me about', 'ai', 'assistant',
    ]

    QUESTION_MARKERS = [
        re.compile(r'\?'),
        re.compile(r'^(?:what|how|why|when|where|who|can you|could you|please)\b', re.IGNORECASE),
        re.compile(r'\b(?:ask ai|ai question|help me)\b', re.IGNORECASE),
    ]

    LEAD_IN = re.compile(
        r'^(?:ask ai|ai question|help me|please|can you|could you)\b[\s,:]*',
        re.IGNORECASE,
    )

    def __init__(self, weights: tuning.AIChatWeights = tuning.AI_CHAT):
        self.weights = weights

    @property
    def intent(self) -> IntentKind:
        return IntentKind.AI_CHAT

    def detect(self, raw: RawInput) -> IntentCandidate:
        w = self.weights
        confidence = 0.0
        parameters: Dict[str, Any] = {}

        confidence += len(match_keywords(raw.normalized_text, self.KEYWORDS)) * w.keyword

        for marker in self.QUESTION_MARKERS:
            if marker.search(raw.text):
                confidence += w.question_marker

        if confidence > w.extraction_bar:
            question = self.LEAD_IN.sub('', raw.text).strip()
            if len(question) > w.min_question_chars:
                parameters['question'] = question
                confidence += w.question

        return self._candidate(confidence, parameters)
