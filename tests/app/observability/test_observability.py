"""Testes de correlation_id e métricas via logs."""

from __future__ import annotations

import logging

import pytest

from app.observability import (
    generate_correlation_id,
    get_correlation_id,
    record_subscription_gate,
    record_webhook_outcome,
    reset_correlation_id,
    set_correlation_id,
)


def test_correlation_id_set_and_reset() -> None:
    token = set_correlation_id("corr-1")
    try:
        assert get_correlation_id() == "corr-1"
    finally:
        reset_correlation_id(token)

    assert get_correlation_id() == ""


def test_correlation_id_generated_when_missing() -> None:
    token = set_correlation_id(None)
    try:
        assert len(get_correlation_id()) == 32
    finally:
        reset_correlation_id(token)
    assert generate_correlation_id() != generate_correlation_id()


def test_metrics_are_structured_logs(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="app.observability.metrics")

    record_subscription_gate(allowed=False, reason="subscription_overdue", status_code=403)
    record_webhook_outcome("PAYMENT_RECEIVED", "applied", metadata={"subscription_id": "s-1"})

    gate, webhook = caplog.records[-2:]
    assert gate.getMessage() == "metric_subscription_gate"
    assert gate.metric_type == "subscription_gate"  # type: ignore[attr-defined]
    assert gate.status_code == 403  # type: ignore[attr-defined]
    assert webhook.outcome == "applied"  # type: ignore[attr-defined]
    assert webhook.subscription_id == "s-1"  # type: ignore[attr-defined]
