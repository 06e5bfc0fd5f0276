"""Port interfaces for the intent domain."""

from .detector_port import IntentDetectorPort

__all__ = ["IntentDetectorPort"]
