# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for fieldcheck.

Two families live here:

* **Precondition errors** (:class:`NilSourceError`, :class:`EmptyMappingError`)
  signal that the collaborator handed the dispatcher something unusable. They
  are always singular.
* **Field errors** (:class:`UnknownFieldError`, :class:`InvalidFieldError`)
  describe the outcome of one field check. They are only ever surfaced
  aggregated inside :class:`ValidationErrors`.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Tuple


class FieldCheckError(Exception):
    """Base class for every error emitted by fieldcheck."""


class ConfigurationError(FieldCheckError):
    """The validation source was misused by its collaborator."""


class NilSourceError(ConfigurationError):
    """Raised (or returned) when the validation source is ``None``.

    The default message, ``"mapper cannot be None"``, is part of the public
    contract; callers and tests may compare against it.
    """

    def __init__(self, message: str = "mapper cannot be None"):
        super().__init__(message)


class EmptyMappingError(ConfigurationError):
    """Raised (or returned) when ``validation_map()`` yields nothing to check.

    The default message, ``"validation map cannot be None or empty"``, is part
    of the public contract; callers and tests may compare against it.
    """

    def __init__(self, message: str = "validation map cannot be None or empty"):
        super().__init__(message)


class FieldError(FieldCheckError):
    """A single field-level entry of an aggregated validation error."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.field, self.message))


class UnknownFieldError(FieldError):
    """The field mask named a field the validation map does not know."""

    def __init__(self, field: str):
        super().__init__(field, f"field {field} is unknown")

    def __reduce__(self):
        return (type(self), (self.field,))


class InvalidFieldError(FieldError):
    """A field check failed; the underlying failure is kept as ``cause``."""

    def __init__(self, field: str, cause: BaseException):
        self.cause = cause
        super().__init__(field, f"field {field} is invalid: {cause}")
        self.__cause__ = cause

    def __reduce__(self):
        return (type(self), (self.field, self.cause))


class ValidationErrors(FieldCheckError, Sequence[FieldError]):
    """Ordered collection of field errors produced by one validation pass.

    Renders as one line per entry, 1-indexed::

        1. field name is invalid: name must not be empty
        2. field price is invalid: price must be positive
    """

    def __init__(self, errors: Sequence[FieldError]):
        self.errors: Tuple[FieldError, ...] = tuple(errors)
        super().__init__(self._render())

    def __reduce__(self):
        return (type(self), (self.errors,))

    def _render(self) -> str:
        return "".join(f"{i}. {error}\n" for i, error in enumerate(self.errors, start=1))

    def __str__(self) -> str:
        return self._render()

    def __getitem__(self, index):
        return self.errors[index]

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.errors)

    @property
    def fields(self) -> Tuple[str, ...]:
        """Field names of the entries, in aggregation order."""

        return tuple(error.field for error in self.errors)

    def by_field(self) -> Dict[str, List[FieldError]]:
        """Group entries by field name, preserving first-seen order."""

        grouped: Dict[str, List[FieldError]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error)
        return grouped

    def first(self, field: str) -> Optional[FieldError]:
        """Return the first entry recorded for *field*, if any."""

        for error in self.errors:
            if error.field == field:
                return error
        return None


__all__ = [
    "FieldCheckError",
    "ConfigurationError",
    "NilSourceError",
    "EmptyMappingError",
    "FieldError",
    "UnknownFieldError",
    "InvalidFieldError",
    "ValidationErrors",
]
