"""Tests for validation metrics and spans."""

from __future__ import annotations

from contextlib import contextmanager

import pytest

from fieldcheck import NilSourceError, validate, validate_async
from fieldcheck.exceptions import InvalidFieldError, UnknownFieldError, ValidationErrors
from fieldcheck.telemetry import outcome_of


class _Recorder:
    def __init__(self):
        self.points = []

    def add(self, amount, attributes=None):
        self.points.append((amount, dict(attributes or {})))

    def record(self, amount, attributes=None):
        self.points.append((amount, dict(attributes or {})))


class _Span:
    def __init__(self):
        self.attributes = {}

    def set_attribute(self, key, value):
        self.attributes[key] = value


@pytest.fixture()
def instruments(monkeypatch):
    recorders = {
        "validation_total": _Recorder(),
        "field_failure_total": _Recorder(),
        "validation_latency_ms": _Recorder(),
    }
    for name, recorder in recorders.items():
        monkeypatch.setattr(f"fieldcheck.telemetry.metrics.{name}", recorder)
    return recorders


@pytest.fixture()
def spans(monkeypatch):
    opened = []

    @contextmanager
    def fake_span(source_name, mode):
        span = _Span()
        opened.append((source_name, mode, span))
        yield span

    monkeypatch.setattr("fieldcheck.validation.dispatcher.start_validation_span", fake_span)
    monkeypatch.setattr("fieldcheck.validation.async_dispatcher.start_validation_span", fake_span)
    return opened


def test_outcome_of():
    assert outcome_of(None) == "valid"
    assert outcome_of(NilSourceError()) == "misconfigured"
    assert outcome_of(ValidationErrors([UnknownFieldError("x")])) == "invalid"


def test_invalid_pass_records_counters(instruments, invalid_product):
    validate(invalid_product, ["id", "price"])

    assert instruments["validation_total"].points == [(1, {"mode": "sync", "outcome": "invalid"})]
    assert instruments["field_failure_total"].points == [
        (1, {"reason": "unknown"}),
        (1, {"reason": "invalid"}),
    ]
    assert len(instruments["validation_latency_ms"].points) == 1


def test_misconfigured_pass_records_outcome(instruments):
    validate(None)

    assert instruments["validation_total"].points == [(1, {"mode": "sync", "outcome": "misconfigured"})]
    assert instruments["field_failure_total"].points == []


@pytest.mark.anyio
async def test_async_pass_records_mode(instruments, valid_product):
    await validate_async(valid_product)

    assert instruments["validation_total"].points == [(1, {"mode": "async", "outcome": "valid"})]


def test_telemetry_can_be_disabled(monkeypatch, instruments, invalid_product):
    monkeypatch.setenv("FIELDCHECK_TELEMETRY", "off")

    error = validate(invalid_product)

    assert error.fields == ("name", "price")
    assert all(not recorder.points for recorder in instruments.values())


def test_span_carries_counts(spans, invalid_product):
    validate(invalid_product, ["price", "id", "name"])

    (source_name, mode, span), = spans
    assert source_name == "Product"
    assert mode == "sync"
    assert span.attributes == {"fieldcheck.field_count": 3, "fieldcheck.failure_count": 3}


def test_broken_instrument_does_not_change_outcome(monkeypatch, invalid_product):
    class _Exploding:
        def add(self, *_a, **_kw):
            raise RuntimeError("exporter down")

        def record(self, *_a, **_kw):
            raise RuntimeError("exporter down")

    monkeypatch.setattr("fieldcheck.telemetry.metrics.validation_latency_ms", _Exploding())

    error = validate(invalid_product, ["price"])

    assert isinstance(error[0], InvalidFieldError)
