# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# fieldcheck/decorator.py

import asyncio
import functools
import inspect
import logging
from typing import Any, Callable, Tuple

import anyio

from .exceptions import ConfigurationError, FieldCheckError
from .validation import validate, validate_async

logger = logging.getLogger(__name__)

# Sentinel object to detect if a parameter was provided by the user
_sentinel = object()


def _accepts_error(handler: Callable) -> bool:
    """Whether *handler* can be called with the validation error as its only argument."""

    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        # No introspectable signature (some builtins): assume it takes the error
        return True

    try:
        signature.bind(None)
    except TypeError:
        return False
    return True


def validate_fields(*mask: Any, on_invalid: Any = _sentinel):
    """
    Validate the bound instance before running the decorated method.

    The first positional argument of the call (``self``) must expose
    ``validation_map()``. It is validated against ``mask`` (all fields when no
    mask is given) and the method body only runs when validation passes.

    :param mask: Field names to check. Empty means every mapped field.
    :param on_invalid: Optional. Controls what happens when validation fails.
                       If omitted, the error is raised. If it is a callable, it
                       is invoked (with the error if it accepts one) and its
                       result returned. Any other value is returned as is.

    .. code-block:: python

        class Order(ValidatableMixin):
            def validation_map(self): ...

            # Raise ValidationErrors when "total" is invalid
            @validate_fields("total")
            def submit(self): ...

            # Return None instead of raising
            @validate_fields(on_invalid=None)
            def preview(self): ...

            # Inspect the error
            @validate_fields("address", on_invalid=lambda err: {"errors": list(err.fields)})
            async def ship(self): ...
    """

    fields: Tuple[str, ...] = tuple(mask)
    pass_error = callable(on_invalid) and _accepts_error(on_invalid)

    def decorator(func: Callable):

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            """Wrapper for synchronous methods."""
            source = args[0] if args else None
            error = validate(source, fields)
            if error is None:
                return func(*args, **kwargs)

            logger.debug("Refusing to run %s: %s", func.__qualname__, error)
            return _handle_invalid_sync(error)

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            """Wrapper for asynchronous methods."""
            source = args[0] if args else None
            error = await validate_async(source, fields)
            if error is None:
                return await func(*args, **kwargs)

            logger.debug("Refusing to run %s: %s", func.__qualname__, error)
            return await _handle_invalid(error)

        async def _handle_invalid(error: FieldCheckError):
            """Executes the user-supplied ``on_invalid`` handler or raises by default."""

            if on_invalid is _sentinel:
                raise error

            if not callable(on_invalid):
                return on_invalid

            result = on_invalid(error) if pass_error else on_invalid()
            if inspect.isawaitable(result):
                result = await result
            return result

        def _handle_invalid_sync(error: FieldCheckError):
            if not inspect.iscoroutinefunction(on_invalid):
                if on_invalid is _sentinel:
                    raise error
                if not callable(on_invalid):
                    return on_invalid
                return on_invalid(error) if pass_error else on_invalid()

            # Async handler on a sync method: only possible without a running loop.
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                return anyio.run(_handle_invalid, error)

            raise ConfigurationError(
                f"Cannot await async on_invalid handler for sync method '{func.__qualname__}' "
                f"from a running event loop. Use a sync handler or make the method async."
            ) from error

        if inspect.iscoroutinefunction(func):
            wrapper = async_wrapper
        else:
            wrapper = sync_wrapper

        # Attach the mask for introspection if needed
        wrapper.__fieldcheck_mask__ = fields
        return wrapper

    # This is the logic that enables the dual syntax (@validate_fields vs @validate_fields("..."))
    if len(fields) == 1 and callable(fields[0]) and on_invalid is _sentinel:
        func_to_decorate = fields[0]
        fields = ()
        return decorator(func_to_decorate)
    return decorator


__all__ = ["validate_fields"]
