"""Pytest fixtures for intent extraction tests.

Provides reusable fixtures for:
- A service built from the default detector registry with a mock audit sink
- Annotation factories for circled/checked option letters

Usage:
    def test_reply(service, circle):
        result = service.extract_intent("", [circle("A")])
        assert result.intent == IntentKind.REPLY
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from faxintent.audit.ports import AuditSink
from faxintent.domain.intent.models import AnnotationKind, VisualAnnotation
from faxintent.domain.intent.registry import build_default_registry
from faxintent.domain.intent.service import IntentExtractionService


@pytest.fixture
def audit_sink():
    """Mock audit sink recording every decision."""
    sink = Mock(spec=AuditSink)
    sink.backend_name = "mock"
    return sink


@pytest.fixture
def service(audit_sink):
    """Service over the built-in detectors."""
    return IntentExtractionService(
        registry=build_default_registry(),
        audit_sink=audit_sink,
    )


def _annotation(kind: AnnotationKind, text, confidence: float) -> VisualAnnotation:
    return VisualAnnotation(kind=kind, associated_text=text, confidence=confidence)


@pytest.fixture
def circle():
    """Factory for circle annotations."""
    def make(text=None, confidence: float = 0.8) -> VisualAnnotation:
        return _annotation(AnnotationKind.CIRCLE, text, confidence)
    return make


@pytest.fixture
def checkmark():
    """Factory for checkmark annotations."""
    def make(text=None, confidence: float = 0.9) -> VisualAnnotation:
        return _annotation(AnnotationKind.CHECKMARK, text, confidence)
    return make
