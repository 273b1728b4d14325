# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Mixin giving domain classes ``validate()`` on top of ``validation_map()``."""

from __future__ import annotations

from typing import Mapping, Optional

from ..exceptions import FieldCheckError
from .async_dispatcher import validate_async
from .base import CheckFunc
from .dispatcher import validate


class ValidatableMixin:
    """Adds field-masked validation to any class defining ``validation_map()``.

    .. code-block:: python

        class Product(ValidatableMixin):
            def __init__(self, name, price):
                self.name, self.price = name, price

            def validation_map(self):
                return {"name": self._check_name, "price": self._check_price}

        error = Product("", 0).validate("price")
    """

    def validation_map(self) -> Optional[Mapping[str, CheckFunc]]:
        raise NotImplementedError

    def validate(self, *fields: str) -> Optional[FieldCheckError]:
        return validate(self, fields)

    async def validate_async(self, *fields: str) -> Optional[FieldCheckError]:
        return await validate_async(self, fields)

    def ensure_valid(self, *fields: str) -> None:
        error = self.validate(*fields)
        if error is not None:
            raise error

    def is_valid(self, *fields: str) -> bool:
        return self.validate(*fields) is None


__all__ = ["ValidatableMixin"]
