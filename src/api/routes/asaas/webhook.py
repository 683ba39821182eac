"""Endpoint de recebimento de eventos do gateway Asaas.

Eventos aceitos são processados inline e respondidos com 200; o gateway
reenvia eventos respondidos com 5xx, e o dedupe absorve reenvios.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from api.connectors.asaas.webhook import (
    InvalidEventError,
    InvalidJsonError,
    WebhookAuthError,
    parse_webhook_request,
)
from app.bootstrap import get_process_gateway_webhook
from app.constants import messages
from app.observability import (
    CORRELATION_ID_HEADER,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_asaas_settings, get_base_settings

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "status": status_code},
    )


async def receive_webhook(request: Request) -> Response:
    """Recebe evento do gateway (POST).

    Falha no processamento responde 500 (lock de dedupe liberado) para o
    gateway reenviar o evento; duplicados e ignorados respondem 200.
    """
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        raw_body = await request.body()
        require_token = get_base_settings().is_production

        try:
            event = parse_webhook_request(
                raw_body,
                request.headers,
                get_asaas_settings().webhook_token,
                require_token=require_token,
            )
        except WebhookAuthError as exc:
            logger.warning("asaas_webhook_unauthorized", extra={"reason": str(exc)})
            return _error_response(401, "unauthorized")
        except (InvalidJsonError, InvalidEventError) as exc:
            logger.warning(
                "asaas_webhook_invalid_payload",
                extra={"error_type": type(exc).__name__},
            )
            return _error_response(400, str(exc))

        try:
            result = await get_process_gateway_webhook().execute(event)
        except Exception as exc:
            logger.exception(
                "asaas_webhook_processing_failed",
                extra={"event": event.event, "error_type": type(exc).__name__},
            )
            return _error_response(500, messages.INTERNAL_SERVER_ERROR)

        content: dict[str, Any] = {"success": True, **result.to_response()}
        return JSONResponse(status_code=200, content=content)
    finally:
        reset_correlation_id(token)
