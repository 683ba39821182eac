"""Parse do webhook do Asaas (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import ValidationError

from app.domain.gateway_event import GatewayWebhookEvent

from .verify import verify_access_token

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


class InvalidEventError(WebhookRequestError):
    """Payload sem os campos mínimos de evento."""


# Alias por clareza semântica no contexto Asaas
AsaasWebhookEvent = GatewayWebhookEvent


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    expected_token: str | None,
    *,
    require_token: bool,
) -> AsaasWebhookEvent:
    """Autentica e parseia o webhook.

    Raises:
        WebhookAuthError: Token inválido
        InvalidJsonError: JSON inválido ou não-objeto
        InvalidEventError: Campo `event` ausente
    """
    verify_access_token(headers, expected_token, require_token=require_token)

    try:
        payload = json.loads(raw_body or b"{}")
    except json.JSONDecodeError as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    try:
        return AsaasWebhookEvent.model_validate(payload)
    except ValidationError as exc:
        raise InvalidEventError("invalid_event") from exc
