"""Validation package - field-masked dispatch of per-field checks.

This package runs the check functions a domain object maps to its field names
and aggregates the failures. It never transforms the object being validated.
"""

from .async_dispatcher import ensure_valid_async, validate_async
from .base import CheckFunc, FieldMask, ValidationMapper, Validator, resolve_fields
from .dispatcher import ensure_valid, validate
from .mixin import ValidatableMixin

__all__ = [
    "CheckFunc",
    "FieldMask",
    "ValidatableMixin",
    "ValidationMapper",
    "Validator",
    "ensure_valid",
    "ensure_valid_async",
    "resolve_fields",
    "validate",
    "validate_async",
]
