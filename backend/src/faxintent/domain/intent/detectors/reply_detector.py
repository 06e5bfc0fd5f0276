"""Reply intent detector.

A reply is a response to a form the system faxed out earlier: the sender
circles or checks lettered options and may add a handwritten comment. A
printed reference code corroborates the reply but is not enough on its own.
"""

import re
from typing import Any, Dict, List

from .. import tuning
from ..models import IntentCandidate, IntentKind, RawInput
from ..ports import IntentDetectorPort
from ..text_utils import extract_reference_id, selected_letters

_OPTION_LETTER_LINE = re.compile(r'^[a-z]\W?$', re.IGNORECASE)
_REFERENCE_LINE = re.compile(r'\b(?:ref|reference)\s*[:#]|fx-\d{4}-\d{6}', re.IGNORECASE)


class ReplyDetector(IntentDetectorPort):

    def __init__(self, weights: tuning.ReplyWeights = tuning.REPLY):
        self.weights = weights

    @property
    def intent(self) -> IntentKind:
        return IntentKind.REPLY

    def detect(self, raw: RawInput) -> IntentCandidate:
        w = self.weights
        confidence = 0.0
        parameters: Dict[str, Any] = {}

        options = selected_letters(raw.annotations, min_confidence=w.min_selection_confidence)
        if options:
            parameters['selectedOptions'] = options
            confidence += w.selection

        reference_id = extract_reference_id(raw.text)
        if reference_id:
            parameters['referenceId'] = reference_id
            confidence += w.reference_code

        freeform = self.freeform_lines(raw.text)
        if freeform:
            parameters['freeformText'] = ' '.join(freeform)
            confidence += w.freeform

        # Needs a selection or a comment; a reference code alone is not a reply
        if options or freeform:
            confidence = max(confidence, w.floor_with_evidence)
        else:
            confidence = 0.0

        return self._candidate(confidence, parameters)

    def freeform_lines(self, text: str) -> List[str]:
        """Non-trivial lines other than bare option letters and reference codes."""
        lines = [line.strip() for line in text.splitlines()]
        return [
            line for line in lines
            if len(line) > self.weights.min_freeform_line_chars
            and not _OPTION_LETTER_LINE.match(line)
            and not _REFERENCE_LINE.search(line)
        ]
