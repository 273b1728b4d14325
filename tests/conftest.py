"""Pytest fixtures for the fieldcheck test-suite.

The ``Product`` family below mirrors how a domain type plugs into the
dispatcher: it exposes ``validation_map()`` returning bound check methods.
"""
from __future__ import annotations

from typing import Dict, Optional

import pytest

from fieldcheck import CheckFunc


class ProductWithNoneMap:  # pylint: disable=too-few-public-methods
    """Collaborator whose validation map is ``None``."""

    def validation_map(self) -> Optional[Dict[str, CheckFunc]]:
        return None


class ProductWithEmptyMap:  # pylint: disable=too-few-public-methods
    """Collaborator whose validation map has no entries."""

    def validation_map(self) -> Dict[str, CheckFunc]:
        return {}


class Product:
    """Minimal domain object with a name and a unit price."""

    def __init__(self, name: str, unit_price: int):
        self.name = name
        self.unit_price = unit_price

    def check_name(self) -> None:
        if not self.name:
            raise ValueError("name must not be empty")

    def check_price(self) -> None:
        if self.unit_price <= 0:
            raise ValueError("price must be positive")

    def validation_map(self) -> Dict[str, CheckFunc]:
        return {
            "name": self.check_name,
            "price": self.check_price,
        }


@pytest.fixture()
def invalid_product() -> Product:  # noqa: D401
    """A product failing every check."""
    return Product("", 0)


@pytest.fixture()
def valid_product() -> Product:  # noqa: D401
    """A product passing every check."""
    return Product("my product", 123)


@pytest.fixture(params=[ProductWithNoneMap, ProductWithEmptyMap], ids=["none-map", "empty-map"])
def unusable_source(request):  # noqa: D401
    """A collaborator whose validation map cannot be used."""
    return request.param()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture(autouse=True)
def _default_env(monkeypatch):  # noqa: D401
    """Start every test from the library defaults regardless of the host env."""
    monkeypatch.delenv("FIELDCHECK_MAX_CONCURRENCY", raising=False)
    monkeypatch.delenv("FIELDCHECK_TELEMETRY", raising=False)
    yield


@pytest.fixture()
def anyio_backend():  # noqa: D401
    """Force *anyio* tests to use the standard asyncio backend only."""
    return "asyncio"
