"""Testes do parsing do webhook Asaas."""

from __future__ import annotations

import json

import pytest

from api.connectors.asaas.webhook import (
    InvalidEventError,
    InvalidJsonError,
    WebhookAuthError,
    parse_webhook_request,
)

HEADERS = {"asaas-access-token": "secret"}


def _body(payload: object) -> bytes:
    return json.dumps(payload).encode("utf-8")


def test_parses_payment_event() -> None:
    raw = _body({
        "id": "evt_1",
        "event": "PAYMENT_RECEIVED",
        "dateCreated": "2026-03-01 10:00:00",
        "payment": {"id": "pay_1", "subscription": "sub_1", "value": 49.9},
    })

    event = parse_webhook_request(raw, HEADERS, "secret", require_token=True)

    assert event.event == "PAYMENT_RECEIVED"
    assert event.date_created == "2026-03-01 10:00:00"
    assert event.gateway_subscription_id == "sub_1"
    assert event.dedupe_key == "evt_1"


def test_subscription_event_fields() -> None:
    raw = _body({
        "event": "SUBSCRIPTION_UPDATED",
        "subscription": {"id": "sub_2", "status": "INACTIVE"},
    })

    event = parse_webhook_request(raw, HEADERS, "secret", require_token=True)

    assert event.gateway_subscription_id == "sub_2"
    assert event.gateway_status == "INACTIVE"
    assert event.dedupe_key == "SUBSCRIPTION_UPDATED:sub_2"


def test_auth_is_checked_before_parsing() -> None:
    with pytest.raises(WebhookAuthError):
        parse_webhook_request(b"not json", {}, "secret", require_token=True)


@pytest.mark.parametrize("raw", [b"{broken", b"[1, 2]"])
def test_invalid_json(raw: bytes) -> None:
    with pytest.raises(InvalidJsonError):
        parse_webhook_request(raw, HEADERS, "secret", require_token=True)


def test_missing_event_field() -> None:
    with pytest.raises(InvalidEventError):
        parse_webhook_request(_body({"id": "evt_1"}), HEADERS, "secret", require_token=True)
