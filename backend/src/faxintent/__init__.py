"""faxintent - intent extraction for handwritten and printed fax requests.

Fuses OCR text and detected pen marks into one typed command with a
calibrated confidence and ranked alternatives.
"""

from .domain.intent.service import IntentExtractionService, build_intent_service

__version__ = "0.1.0"

__all__ = ["IntentExtractionService", "build_intent_service", "__version__"]
