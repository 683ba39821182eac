"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from api.routes.health import router as health_router
from api.routes.health.router import health_check, readiness_check


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


def _use_backends(monkeypatch: pytest.MonkeyPatch, *, dedupe: str, store: str) -> None:
    monkeypatch.setattr(
        health_router, "get_dedupe_settings", lambda: SimpleNamespace(backend=dedupe)
    )
    monkeypatch.setattr(
        health_router,
        "get_subscription_store_settings",
        lambda: SimpleNamespace(backend=store),
    )


@pytest.mark.asyncio
async def test_health_check() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "ponte-marketplace"


@pytest.mark.asyncio
async def test_readiness_skips_memory_backends(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_backends(monkeypatch, dedupe="memory", store="memory")
    request = _build_request_with_state(SimpleNamespace(redis_client=None, firestore_client=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["redis"]["status"] == "skipped"
    assert payload["checks"]["firestore"]["status"] == "skipped"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_clients(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _use_backends(monkeypatch, dedupe="redis", store="firestore")
    request = _build_request_with_state(SimpleNamespace(redis_client=None, firestore_client=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["redis"]["error"] == "not_configured"
    assert payload["checks"]["firestore"]["status"] == "failed"


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_dependencies_are_ok(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _use_backends(monkeypatch, dedupe="redis", store="firestore")
    redis_client = MagicMock()
    redis_client.ping = AsyncMock(return_value=True)
    firestore_client = MagicMock()
    firestore_client.collection.return_value.document.return_value.get.return_value = (
        SimpleNamespace(exists=False)
    )
    request = _build_request_with_state(
        SimpleNamespace(redis_client=redis_client, firestore_client=firestore_client)
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["checks"]["redis"]["status"] == "ok"
    assert payload["checks"]["firestore"]["status"] == "degraded"


@pytest.mark.asyncio
async def test_readiness_redis_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_backends(monkeypatch, dedupe="redis", store="memory")
    redis_client = MagicMock()
    redis_client.ping = AsyncMock(side_effect=ConnectionError("refused"))
    request = _build_request_with_state(
        SimpleNamespace(redis_client=redis_client, firestore_client=None)
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["redis"]["error"] == "ConnectionError"
