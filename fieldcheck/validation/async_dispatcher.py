# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Asynchronous counterpart of the field validation dispatcher.

Checks may be coroutine functions, return awaitables, or be plain callables.
They run concurrently inside an anyio task group, optionally bounded by
``FIELDCHECK_MAX_CONCURRENCY``, and their results are put back into sorted
field order before aggregation. The outcome is therefore identical to what
:func:`~fieldcheck.validation.dispatcher.validate` returns for the same checks.
"""

from __future__ import annotations

import inspect
import logging
import time
from contextlib import nullcontext
from typing import List, Optional

import anyio

from ..config import get_max_concurrency
from ..exceptions import (
    ConfigurationError,
    FieldCheckError,
    FieldError,
    InvalidFieldError,
    UnknownFieldError,
    ValidationErrors,
)
from ..telemetry import record_validation_metrics, start_validation_span
from .base import (
    CheckFunc,
    FieldMask,
    ValidationMapper,
    describe_source,
    entry_for_outcome,
    load_validation_map,
    resolve_fields,
)

logger = logging.getLogger(__name__)


async def _run_check(field: str, check: CheckFunc) -> Optional[FieldError]:
    try:
        outcome = check()
        if inspect.isawaitable(outcome):
            outcome = await outcome
    except Exception as exc:
        return InvalidFieldError(field, exc)

    return entry_for_outcome(field, outcome)


async def validate_async(
    source: Optional[ValidationMapper], mask: FieldMask = ()
) -> Optional[FieldCheckError]:
    """Validate *source* field by field, awaiting asynchronous checks.

    Preconditions, mask resolution and error ordering follow :func:`validate`.
    Cancellation is not a field failure and propagates to the caller.
    """
    started_at = time.perf_counter()
    source_name = describe_source(source)

    with start_validation_span(source_name, "async") as span:
        try:
            mapping = load_validation_map(source)
        except ConfigurationError as error:
            logger.debug("Validation of %s aborted: %s", source_name, error)
            record_validation_metrics("async", error, started_at)
            return error

        fields = resolve_fields(mapping, mask)
        slots: List[Optional[FieldError]] = [None] * len(fields)

        max_concurrency = get_max_concurrency()
        limiter = anyio.CapacityLimiter(max_concurrency) if max_concurrency else None

        async def run_slot(index: int, field: str, check: CheckFunc) -> None:
            async with limiter if limiter is not None else nullcontext():
                slots[index] = await _run_check(field, check)

        async with anyio.create_task_group() as tg:
            for index, field in enumerate(fields):
                if field not in mapping:
                    slots[index] = UnknownFieldError(field)
                    continue
                tg.start_soon(run_slot, index, field, mapping[field])

        errors = [entry for entry in slots if entry is not None]
        result = ValidationErrors(errors) if errors else None

        if span is not None:
            span.set_attribute("fieldcheck.field_count", len(fields))
            span.set_attribute("fieldcheck.failure_count", len(errors))
        logger.debug(
            "Validated %d field(s) of %s asynchronously: %d failure(s)",
            len(fields),
            source_name,
            len(errors),
        )
        record_validation_metrics("async", result, started_at, errors)
        return result


async def ensure_valid_async(source: Optional[ValidationMapper], mask: FieldMask = ()) -> None:
    """Like :func:`validate_async`, but raise the failure instead of returning it."""

    error = await validate_async(source, mask)
    if error is not None:
        raise error


__all__ = ["ensure_valid_async", "validate_async"]
