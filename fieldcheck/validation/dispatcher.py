# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Synchronous field validation dispatcher.

``validate`` resolves the fields to check from the mask (or every field of the
validation map when the mask is empty), runs them in sorted order and returns
an aggregated :class:`~fieldcheck.exceptions.ValidationErrors`, a singular
precondition error, or ``None`` when everything passed.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional

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
    FieldMask,
    ValidationMapper,
    describe_source,
    entry_for_outcome,
    load_validation_map,
    resolve_fields,
)

logger = logging.getLogger(__name__)


def validate(source: Optional[ValidationMapper], mask: FieldMask = ()) -> Optional[FieldCheckError]:
    """Validate *source* field by field and return the failure, if any.

    If the mask is empty, every field of the validation map is checked (as if
    a mask of all fields had been given).

    Args:
        source: Object exposing ``validation_map()``; may be ``None``
        mask: Field names to check; duplicates are checked once per occurrence

    Returns:
        ``None`` on success, :class:`NilSourceError` or
        :class:`EmptyMappingError` on misuse, otherwise
        :class:`ValidationErrors` with one entry per failing field
    """
    started_at = time.perf_counter()
    source_name = describe_source(source)

    with start_validation_span(source_name, "sync") as span:
        try:
            mapping = load_validation_map(source)
        except ConfigurationError as error:
            logger.debug("Validation of %s aborted: %s", source_name, error)
            record_validation_metrics("sync", error, started_at)
            return error

        fields = resolve_fields(mapping, mask)
        errors: List[FieldError] = []
        for field in fields:
            if field not in mapping:
                errors.append(UnknownFieldError(field))
                continue

            try:
                outcome = mapping[field]()
            except Exception as exc:
                errors.append(InvalidFieldError(field, exc))
                continue

            entry = entry_for_outcome(field, outcome)
            if entry is not None:
                errors.append(entry)

        result = ValidationErrors(errors) if errors else None

        if span is not None:
            span.set_attribute("fieldcheck.field_count", len(fields))
            span.set_attribute("fieldcheck.failure_count", len(errors))
        logger.debug(
            "Validated %d field(s) of %s: %d failure(s)", len(fields), source_name, len(errors)
        )
        record_validation_metrics("sync", result, started_at, errors)
        return result


def ensure_valid(source: Optional[ValidationMapper], mask: FieldMask = ()) -> None:
    """Like :func:`validate`, but raise the failure instead of returning it."""

    error = validate(source, mask)
    if error is not None:
        raise error


__all__ = ["ensure_valid", "validate"]
