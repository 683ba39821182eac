"""Pedido de criação de assinatura para um comprador de um vendedor."""

from __future__ import annotations

from datetime import date, datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionRequest(BaseModel):
    """Dados da assinatura recorrente a criar no gateway."""

    model_config = ConfigDict(extra="ignore")

    customer_id: str = Field(..., min_length=1, description="Cliente (comprador) no gateway.")
    value: float = Field(..., description="Valor de cada cobrança (R$).")
    next_due_date: date | datetime | str = Field(
        ..., description="Primeiro vencimento (date, ISO ou DD/MM/YYYY)."
    )
    cycle: str = Field(default="MONTHLY", description="Ciclo de cobrança.")
    billing_type: str = Field(default="BOLETO", description="Forma de pagamento.")
    plan_name: str = Field(default="", description="Descrição exibida na cobrança.")
    end_date: date | datetime | str | None = None
    max_payments: int | None = Field(None, ge=1)
    external_reference: str | None = None
    discount: dict[str, float] | None = None
    interest: dict[str, float] | None = None
    fine: dict[str, float] | None = None


__all__ = ["SubscriptionRequest"]
