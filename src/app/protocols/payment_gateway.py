"""Protocolo do gateway de pagamentos.

Evita dependência direta da camada api (connectors).
"""

from __future__ import annotations

from typing import Any, Protocol


class PaymentGatewayProtocol(Protocol):
    """Contrato mínimo do gateway usado pelos casos de uso.

    Falhas devem ser lançadas como exceções com `status_code` e mensagem
    legível (convertidas por app.domain.results.format_error).
    """

    async def create_subscription(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Cria assinatura recorrente e retorna o recurso criado."""
        ...
