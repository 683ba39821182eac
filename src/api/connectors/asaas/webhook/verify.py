"""Autenticação do webhook do Asaas.

O gateway envia o token configurado no painel no header
`asaas-access-token`; a comparação é em tempo constante.
"""

from __future__ import annotations

import hmac
from typing import TYPE_CHECKING

from config.settings.asaas import ASAAS_WEBHOOK_TOKEN_HEADER

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookAuthError(ValueError):
    """Token do webhook ausente ou inválido."""


def verify_access_token(
    headers: Mapping[str, str],
    expected_token: str | None,
    *,
    require_token: bool,
) -> bool:
    """Valida o token do webhook.

    Args:
        headers: Headers recebidos (case-insensitive, ex: starlette Headers)
        expected_token: Token configurado (AS_WEBHOOK_TOKEN)
        require_token: Se True, ausência de token configurado é erro

    Raises:
        WebhookAuthError: Token não configurado (quando exigido), ausente ou divergente

    Returns:
        True se verificado; False se a verificação foi pulada
    """
    if not expected_token:
        if require_token:
            raise WebhookAuthError("webhook_token_not_configured")
        return False

    received = headers.get(ASAAS_WEBHOOK_TOKEN_HEADER) or ""
    if not received:
        raise WebhookAuthError("missing_access_token")

    if not hmac.compare_digest(received.encode(), expected_token.encode()):
        raise WebhookAuthError("invalid_access_token")

    return True
