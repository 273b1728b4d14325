# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings.

Values are read on every call so tests (and long-running hosts) can flip them
without re-importing the package.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

MAX_CONCURRENCY_ENV = "FIELDCHECK_MAX_CONCURRENCY"
TELEMETRY_ENV = "FIELDCHECK_TELEMETRY"

_FALSY = ("", "0", "false", "no", "off")


def get_max_concurrency() -> Optional[int]:
    """Return the cap on concurrently running async checks, or ``None`` for unbounded."""

    raw = os.getenv(MAX_CONCURRENCY_ENV, "").strip()
    if not raw:
        return None

    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring malformed %s value: %s", MAX_CONCURRENCY_ENV, raw)
        return None

    if value < 0:
        logger.warning("Ignoring negative %s value: %s", MAX_CONCURRENCY_ENV, raw)
        return None

    return value or None


def telemetry_enabled() -> bool:
    """Whether metrics and spans should be emitted (on unless explicitly disabled)."""

    return os.getenv(TELEMETRY_ENV, "1").strip().lower() not in _FALSY


__all__ = [
    "MAX_CONCURRENCY_ENV",
    "TELEMETRY_ENV",
    "get_max_concurrency",
    "telemetry_enabled",
]
