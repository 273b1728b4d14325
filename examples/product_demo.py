# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Product Demo: masked field validation with aggregated errors.

Run with:
    python examples/product_demo.py
"""

import asyncio
import logging

from fieldcheck import ValidatableMixin, ValidationErrors, validate, validate_fields

# Basic logging setup
logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')


class Product(ValidatableMixin):
    def __init__(self, name: str, unit_price: int):
        self.name = name
        self.unit_price = unit_price

    def _check_name(self):
        if not self.name:
            raise ValueError("name must not be empty")

    def _check_price(self):
        if self.unit_price <= 0:
            raise ValueError("price must be positive")

    def validation_map(self):
        return {"name": self._check_name, "price": self._check_price}

    @validate_fields("price", on_invalid=lambda error: f"[not for sale] {error.fields}")
    def quote(self, quantity: int):
        return quantity * self.unit_price

    @validate_fields
    async def publish(self):
        await asyncio.sleep(0.01)
        return f"published {self.name}"


def main():
    broken = Product("", 0)

    print("All fields:")
    print(validate(broken))

    print("Only 'price':")
    print(broken.validate("price"))

    print("Unknown field 'id':")
    print(validate(broken, ["id"]))

    print("Quote:", broken.quote(3))
    print("Quote:", Product("widget", 5).quote(3))

    try:
        asyncio.run(broken.publish())
    except ValidationErrors as error:
        print(f"Publish refused for fields {error.fields}")

    print(asyncio.run(Product("widget", 5).publish()))


if __name__ == "__main__":
    main()
