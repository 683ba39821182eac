"""Evento de webhook do gateway de pagamentos.

Apenas os campos usados pelo ciclo de vida da assinatura são
modelados; o restante do payload é ignorado.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_DDMMYYYY = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")


def parse_gateway_date(value: Any) -> datetime | None:
    """Converte data do gateway (YYYY-MM-DD, ISO ou DD/MM/YYYY) em UTC.

    Returns:
        datetime aware em UTC, ou None se vazio/inválido
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    match = _DDMMYYYY.match(text)
    if match:
        day, month, year = match.groups()
        text = f"{year}-{month}-{day}"
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


class GatewayWebhookEvent(BaseModel):
    """Evento recebido do gateway (cobrança ou assinatura)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = Field(None, description="ID do evento (evt_...).")
    event: str = Field(..., min_length=1)
    date_created: str | None = Field(None, alias="dateCreated")
    payment: dict[str, Any] | None = None
    subscription: dict[str, Any] | None = None

    @property
    def gateway_subscription_id(self) -> str | None:
        """ID da assinatura no gateway (via cobrança ou via assinatura)."""
        if self.payment and self.payment.get("subscription"):
            return str(self.payment["subscription"])
        if self.subscription and self.subscription.get("id"):
            return str(self.subscription["id"])
        return None

    @property
    def gateway_status(self) -> str | None:
        """Status da assinatura informado pelo gateway (eventos SUBSCRIPTION_*)."""
        if self.subscription and self.subscription.get("status"):
            return str(self.subscription["status"])
        return None

    @property
    def dedupe_key(self) -> str:
        """Chave de idempotência: id do evento, ou evento + recurso."""
        if self.id:
            return self.id
        resource = (self.payment or {}).get("id") or (self.subscription or {}).get("id") or ""
        return f"{self.event}:{resource}"


__all__ = ["GatewayWebhookEvent", "parse_gateway_date"]
