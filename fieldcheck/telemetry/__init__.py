"""Telemetry package - metrics and tracing for validation passes."""

from .metrics import (
    field_failure_total,
    outcome_of,
    record_validation_metrics,
    validation_latency_ms,
    validation_total,
)
from .runtime import get_tracer, meter, start_validation_span

__all__ = [
    "field_failure_total",
    "get_tracer",
    "meter",
    "outcome_of",
    "record_validation_metrics",
    "start_validation_span",
    "validation_latency_ms",
    "validation_total",
]
