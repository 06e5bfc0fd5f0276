"""Prometheus metrics for the intent engine.

Metrics are observed around the decision logic and never feed back into it.
"""

from prometheus_client import Counter, Histogram

intent_extractions_total = Counter(
    "faxintent_intent_extractions_total",
    "Total number of intent extractions",
    ["intent"]  # primary intent chosen
)

intent_confidence_histogram = Histogram(
    "faxintent_intent_confidence",
    "Primary intent confidence distribution",
    buckets=[0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]
)

intent_extraction_duration_seconds = Histogram(
    "faxintent_intent_extraction_duration_seconds",
    "Time spent running detectors and aggregation in seconds",
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.5]
)

audit_failures_total = Counter(
    "faxintent_audit_failures_total",
    "Audit records that could not be written",
    ["backend"]  # backend: log|database|custom
)
