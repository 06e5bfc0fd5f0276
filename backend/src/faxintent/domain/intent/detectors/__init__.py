"""Built-in intent detectors, one per supported intent kind."""

from .email_detector import EmailDetector
from .shopping_detector import ShoppingDetector
from .ai_chat_detector import AIChatDetector
from .payment_detector import PaymentDetector
from .reply_detector import ReplyDetector

__all__ = [
    "EmailDetector",
    "ShoppingDetector",
    "AIChatDetector",
    "PaymentDetector",
    "ReplyDetector",
]
