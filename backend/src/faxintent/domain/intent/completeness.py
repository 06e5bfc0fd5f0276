"""Parameter completeness assessment.

Scores how many of the fields an intent expects were actually extracted.
Used only as the ``parameter_extraction`` component of the confidence
breakdown; it never changes which intent wins.

Checklists:
- email: recipient 0.4 + subject 0.3 + body 0.3
- shopping: product 0.6 + quantity 0.2 + delivery 0.2
- ai_chat: question present 1.0, otherwise 0.2
- payment_registration: method present 0.8, otherwise 0.3
- reply: selections 0.7 + free-form text 0.3
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from .models import IntentKind, clamp_confidence

UNKNOWN_INTENT_SCORE = 0.1


@dataclass(frozen=True)
class CompletenessRule:
    """Weighted field checklist for one intent.

    Each entry is ``(field_names, weight)``; the weight counts when any of the
    field names holds a non-empty value. ``when_empty`` is returned instead of
    0.0 when no field is present.
    """
    fields: Tuple[Tuple[Tuple[str, ...], float], ...]
    when_empty: float = 0.0


DEFAULT_RULES: Dict[IntentKind, CompletenessRule] = {
    IntentKind.EMAIL: CompletenessRule(fields=(
        (('recipientEmail', 'recipientName'), 0.4),
        (('subject',), 0.3),
        (('body',), 0.3),
    )),
    IntentKind.SHOPPING: CompletenessRule(fields=(
        (('productQuery',), 0.6),
        (('quantity',), 0.2),
        (('deliveryPreferences',), 0.2),
    )),
    IntentKind.AI_CHAT: CompletenessRule(
        fields=((('question',), 1.0),),
        when_empty=0.2,
    ),
    IntentKind.PAYMENT_REGISTRATION: CompletenessRule(
        fields=((('paymentMethod',), 0.8),),
        when_empty=0.3,
    ),
    IntentKind.REPLY: CompletenessRule(fields=(
        (('selectedOptions',), 0.7),
        (('freeformText',), 0.3),
    )),
}


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) > 0
    return bool(value)


class CompletenessAssessor:
    """Scores parameter completeness per intent from a rule table."""

    def __init__(self, rules: Optional[Mapping[IntentKind, CompletenessRule]] = None):
        self._rules: Dict[IntentKind, CompletenessRule] = dict(rules or DEFAULT_RULES)

    def register(self, intent: IntentKind, rule: CompletenessRule) -> None:
        """Add or replace the checklist for an intent."""
        self._rules[intent] = rule

    def assess(self, intent: IntentKind, parameters: Mapping[str, Any]) -> float:
        """Score parameter completeness between 0.0 and 1.0.

        Args:
            intent: Intent the parameters were extracted for
            parameters: Extracted parameter map

        Returns:
            Completeness score; 0.1 for intents without a checklist
        """
        rule = self._rules.get(intent)
        if rule is None:
            return UNKNOWN_INTENT_SCORE

        score = 0.0
        for field_names, weight in rule.fields:
            if any(_is_present(parameters.get(name)) for name in field_names):
                score += weight

        if score == 0.0:
            return rule.when_empty
        return clamp_confidence(score)
