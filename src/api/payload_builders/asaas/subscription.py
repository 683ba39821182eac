"""Builder do payload de criação de assinatura no Asaas.

Referência: POST /v3/subscriptions
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING, Any

from app.domain.gateway_event import parse_gateway_date

if TYPE_CHECKING:
    from app.domain.split import SplitResult
    from app.domain.subscription_request import SubscriptionRequest

VALID_CYCLES: tuple[str, ...] = (
    "WEEKLY",
    "BIWEEKLY",
    "MONTHLY",
    "BIMONTHLY",
    "QUARTERLY",
    "SEMIANNUALLY",
    "YEARLY",
)

DEFAULT_BILLING_TYPE = "BOLETO"
PAYLOAD_SOURCE = "ponte-marketplace"


def normalize_cycle(cycle: str | None) -> str | None:
    """Ciclo em caixa alta se reconhecido pelo gateway; senão None."""
    upper = (cycle or "").strip().upper()
    return upper if upper in VALID_CYCLES else None


def format_gateway_date(value: date | datetime | str) -> str:
    """Formata data como YYYY-MM-DD.

    Aceita date, datetime (convertido para UTC quando aware), string
    ISO 8601 e DD/MM/YYYY.

    Raises:
        ValueError: Data inválida
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    parsed = parse_gateway_date(value)
    if parsed is None:
        raise ValueError("Data inválida")
    return parsed.date().isoformat()


def build_subscription_payload(
    request: SubscriptionRequest,
    split: SplitResult,
    *,
    seller_id: str | None = None,
) -> dict[str, Any]:
    """Monta o payload de assinatura com o split do vendedor.

    Args:
        request: Dados da assinatura
        split: Resultado bem-sucedido do cálculo de split
        seller_id: Vendedor dono da assinatura (metadata)

    Raises:
        ValueError: Ciclo ou datas inválidos, ou split sem sucesso
    """
    if not split.success:
        raise ValueError("Split sem sucesso não pode compor payload")

    cycle = normalize_cycle(request.cycle)
    if cycle is None:
        raise ValueError(f"Ciclo inválido: {request.cycle}")

    payload: dict[str, Any] = {
        "customer": request.customer_id,
        "billingType": request.billing_type or DEFAULT_BILLING_TYPE,
        "value": request.value,
        "cycle": cycle,
        "description": request.plan_name or f"Assinatura {cycle.lower()}",
        "nextDueDate": format_gateway_date(request.next_due_date),
        "split": split.to_payload(),
    }

    if request.end_date:
        payload["endDate"] = format_gateway_date(request.end_date)
    if request.max_payments:
        payload["maxPayments"] = request.max_payments
    if request.external_reference:
        payload["externalReference"] = request.external_reference
    for key in ("discount", "interest", "fine"):
        value = getattr(request, key)
        if value:
            payload[key] = value

    metadata: dict[str, Any] = {"source": PAYLOAD_SOURCE}
    if seller_id:
        metadata["seller_id"] = seller_id
    payload["metadata"] = metadata

    return payload
