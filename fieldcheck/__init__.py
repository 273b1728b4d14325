# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""fieldcheck - field-masked validation dispatcher.

Domain objects expose ``validation_map()``, a mapping of field name to a
zero-argument check. :func:`validate` runs a selected subset (or all) of those
checks in sorted field order and aggregates the failures.
"""

from .decorator import validate_fields
from .exceptions import (
    ConfigurationError,
    EmptyMappingError,
    FieldCheckError,
    FieldError,
    InvalidFieldError,
    NilSourceError,
    UnknownFieldError,
    ValidationErrors,
)
from .validation import (
    CheckFunc,
    FieldMask,
    ValidatableMixin,
    ValidationMapper,
    Validator,
    ensure_valid,
    ensure_valid_async,
    validate,
    validate_async,
)

__version__ = "0.1.0"

__all__ = [
    "CheckFunc",
    "ConfigurationError",
    "EmptyMappingError",
    "FieldCheckError",
    "FieldError",
    "FieldMask",
    "InvalidFieldError",
    "NilSourceError",
    "UnknownFieldError",
    "ValidatableMixin",
    "ValidationErrors",
    "ValidationMapper",
    "Validator",
    "ensure_valid",
    "ensure_valid_async",
    "validate",
    "validate_async",
    "validate_fields",
]
