# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry handles shared by the package.

Only the API is used; without an SDK provider installed by the host
application every instrument and span is a no-op.
"""

from __future__ import annotations

from contextlib import nullcontext
from typing import ContextManager, Optional

from opentelemetry import metrics, trace

from ..config import telemetry_enabled

INSTRUMENTATION_NAME = "fieldcheck"

meter = metrics.get_meter(INSTRUMENTATION_NAME)


def get_tracer(name: str = INSTRUMENTATION_NAME) -> trace.Tracer:
    """Return a tracer from the globally configured provider."""

    return trace.get_tracer(name)


def start_validation_span(source_name: str, mode: str) -> ContextManager[Optional[trace.Span]]:
    """Open the span wrapping one validation pass (yields ``None`` when disabled)."""

    if not telemetry_enabled():
        return nullcontext(None)

    return get_tracer().start_as_current_span(
        f"fieldcheck.validate:{source_name}",
        attributes={"fieldcheck.source": source_name, "fieldcheck.mode": mode},
    )


__all__ = ["INSTRUMENTATION_NAME", "get_tracer", "meter", "start_validation_span"]
