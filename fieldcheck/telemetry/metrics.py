# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for fieldcheck."""

from __future__ import annotations

import logging
import time
from typing import Optional, Sequence

from ..config import telemetry_enabled
from ..exceptions import FieldCheckError, FieldError, UnknownFieldError
from .runtime import meter

logger = logging.getLogger(__name__)

validation_total = meter.create_counter(
    name="fieldcheck.validation.total",
    description="Counts validation passes partitioned by outcome and mode.",
    unit="1",
)

field_failure_total = meter.create_counter(
    name="fieldcheck.field.failure.total",
    description="Counts per-field failures partitioned by reason (unknown or invalid).",
    unit="1",
)

validation_latency_ms = meter.create_histogram(
    name="fieldcheck.validation.latency.ms",
    description="Wall time of a single validation pass, checks included.",
    unit="ms",
)


def outcome_of(error: Optional[FieldCheckError]) -> str:
    """Map a validation result onto the ``outcome`` metric attribute."""

    if error is None:
        return "valid"
    if isinstance(error, Sequence):
        return "invalid"
    return "misconfigured"


def record_validation_metrics(
    mode: str,
    error: Optional[FieldCheckError],
    started_at: float,
    entries: Sequence[FieldError] = (),
) -> None:
    """Record the latency histogram and counters for one validation pass.

    Args:
        mode: ``"sync"`` or ``"async"``
        error: The value the dispatcher is about to return
        started_at: Timestamp from ``time.perf_counter()`` when the pass started
        entries: Field errors collected during the pass
    """
    if not telemetry_enabled():
        return

    try:
        duration_ms = (time.perf_counter() - started_at) * 1000.0
        outcome = outcome_of(error)
        validation_latency_ms.record(duration_ms, {"mode": mode, "outcome": outcome})
        validation_total.add(1, {"mode": mode, "outcome": outcome})
        for entry in entries:
            reason = "unknown" if isinstance(entry, UnknownFieldError) else "invalid"
            field_failure_total.add(1, {"reason": reason})
    except Exception:
        # Telemetry must never change the validation outcome
        logger.debug("Failed to record validation metrics", exc_info=True)


__all__ = [
    "field_failure_total",
    "outcome_of",
    "record_validation_metrics",
    "validation_latency_ms",
    "validation_total",
]
