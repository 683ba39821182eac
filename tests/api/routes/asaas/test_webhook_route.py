"""Testes da rota de webhook Asaas."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from api.routes.asaas import webhook
from app.use_cases.asaas import WebhookOutcome, WebhookProcessingResult


def _build_request(body: bytes, headers: dict[str, str] | None = None) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/webhook/asaas",
        "raw_path": b"/webhook/asaas",
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _configure(
    monkeypatch: pytest.MonkeyPatch,
    *,
    token: str = "secret",
    production: bool = False,
    use_case: MagicMock | None = None,
) -> MagicMock:
    monkeypatch.setattr(webhook, "get_asaas_settings", lambda: SimpleNamespace(webhook_token=token))
    monkeypatch.setattr(
        webhook, "get_base_settings", lambda: SimpleNamespace(is_production=production)
    )
    if use_case is None:
        use_case = MagicMock()
        use_case.execute = AsyncMock(
            return_value=WebhookProcessingResult(
                "PAYMENT_RECEIVED", WebhookOutcome.APPLIED, subscription_id="s-1", status="active"
            )
        )
    monkeypatch.setattr(webhook, "get_process_gateway_webhook", lambda: use_case)
    return use_case


BODY = json.dumps({
    "id": "evt_1",
    "event": "PAYMENT_RECEIVED",
    "payment": {"id": "pay_1", "subscription": "sub_1"},
}).encode("utf-8")


@pytest.mark.asyncio
async def test_accepted_event_returns_200(monkeypatch: pytest.MonkeyPatch) -> None:
    use_case = _configure(monkeypatch)

    response = await webhook.receive_webhook(
        _build_request(BODY, {"asaas-access-token": "secret"})
    )

    assert response.status_code == 200
    assert json.loads(response.body) == {
        "success": True,
        "event": "PAYMENT_RECEIVED",
        "outcome": "applied",
        "subscription_id": "s-1",
        "status": "active",
    }
    event = use_case.execute.await_args.args[0]
    assert event.gateway_subscription_id == "sub_1"


@pytest.mark.asyncio
async def test_invalid_token_returns_401(monkeypatch: pytest.MonkeyPatch) -> None:
    use_case = _configure(monkeypatch)

    response = await webhook.receive_webhook(_build_request(BODY, {"asaas-access-token": "x"}))

    assert response.status_code == 401
    use_case.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_configured_token_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    _configure(monkeypatch, token="", production=True)

    response = await webhook.receive_webhook(_build_request(BODY))

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_token_check_skipped_outside_production(monkeypatch: pytest.MonkeyPatch) -> None:
    _configure(monkeypatch, token="", production=False)

    response = await webhook.receive_webhook(_build_request(BODY))

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_invalid_json_returns_400(monkeypatch: pytest.MonkeyPatch) -> None:
    _configure(monkeypatch)

    response = await webhook.receive_webhook(
        _build_request(b"{oops", {"asaas-access-token": "secret"})
    )

    assert response.status_code == 400
    assert json.loads(response.body)["message"] == "invalid_json"


@pytest.mark.asyncio
async def test_processing_failure_returns_500(monkeypatch: pytest.MonkeyPatch) -> None:
    use_case = MagicMock()
    use_case.execute = AsyncMock(side_effect=RuntimeError("redis down"))
    _configure(monkeypatch, use_case=use_case)

    response = await webhook.receive_webhook(
        _build_request(BODY, {"asaas-access-token": "secret"})
    )

    assert response.status_code == 500
    assert json.loads(response.body)["message"] == "internal server error"


@pytest.mark.asyncio
async def test_duplicate_event_returns_200(monkeypatch: pytest.MonkeyPatch) -> None:
    use_case = MagicMock()
    use_case.execute = AsyncMock(
        return_value=WebhookProcessingResult("PAYMENT_RECEIVED", WebhookOutcome.DUPLICATE)
    )
    _configure(monkeypatch, use_case=use_case)

    response = await webhook.receive_webhook(
        _build_request(BODY, {"asaas-access-token": "secret"})
    )

    assert response.status_code == 200
    assert json.loads(response.body)["outcome"] == "duplicate"
