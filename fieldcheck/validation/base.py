# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Core types shared by the sync and async dispatchers."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, List, Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

from ..exceptions import (
    EmptyMappingError,
    FieldError,
    InvalidFieldError,
    NilSourceError,
)

logger = logging.getLogger(__name__)

# A zero-argument check. It fails by raising, or by returning an exception instance.
CheckFunc = Callable[[], Any]

FieldMask = Union[str, Sequence[str], None]


@runtime_checkable
class ValidationMapper(Protocol):
    """Anything that can map its field names to check functions."""

    def validation_map(self) -> Optional[Mapping[str, CheckFunc]]:
        ...


@runtime_checkable
class Validator(Protocol):
    """Anything that can validate itself, returning the failure or ``None``."""

    def validate(self) -> Optional[Exception]:
        ...


def load_validation_map(source: Optional[ValidationMapper]) -> Mapping[str, CheckFunc]:
    """Fetch the validation map from *source*, enforcing the preconditions.

    Raises:
        NilSourceError: *source* is ``None``
        EmptyMappingError: the map is ``None`` or has no entries
    """
    if source is None:
        raise NilSourceError()

    mapping = source.validation_map()
    if not mapping:
        raise EmptyMappingError()

    return mapping


def resolve_fields(mapping: Mapping[str, CheckFunc], mask: FieldMask = ()) -> List[str]:
    """Return the field names to process, sorted.

    An empty mask selects every key of *mapping*. Otherwise the mask is used
    verbatim, duplicates and unknown names included.
    """
    if isinstance(mask, str):
        fields = [mask]
    else:
        fields = list(mask) if mask else []

    if not fields:
        fields = list(mapping.keys())

    return sorted(fields)


def entry_for_outcome(field: str, outcome: Any) -> Optional[FieldError]:
    """Classify the value a check returned.

    Returned exception instances count as failures; an awaitable means an
    async check reached the sync dispatcher, which is reported as invalid.
    """
    if isinstance(outcome, Exception):
        return InvalidFieldError(field, outcome)

    if inspect.isawaitable(outcome):
        close = getattr(outcome, "close", None)
        if callable(close):
            close()
        logger.warning("Check for field '%s' is asynchronous; use validate_async()", field)
        return InvalidFieldError(
            field, TypeError("check returned an awaitable; use validate_async()")
        )

    return None


def describe_source(source: Any) -> str:
    """Short, stable name of *source* for spans and log lines."""

    if source is None:
        return "None"
    return type(source).__qualname__


__all__ = [
    "CheckFunc",
    "FieldMask",
    "ValidationMapper",
    "Validator",
    "describe_source",
    "entry_for_outcome",
    "load_validation_map",
    "resolve_fields",
]
