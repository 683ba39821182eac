"""
Mapeamento de eventos do gateway (Asaas) para status de assinatura.

Eventos de cobrança e de assinatura chegam pelo webhook; cada um
define o status alvo da assinatura do vendedor, ou nenhum quando o
evento só atualiza datas/valores.
"""

from enum import StrEnum

from fsm.states.subscription import SubscriptionStatus


class GatewayEvent(StrEnum):
    """Eventos de webhook tratados pelo ciclo de vida."""

    PAYMENT_CREATED = "PAYMENT_CREATED"
    PAYMENT_CONFIRMED = "PAYMENT_CONFIRMED"
    PAYMENT_RECEIVED = "PAYMENT_RECEIVED"
    PAYMENT_OVERDUE = "PAYMENT_OVERDUE"
    PAYMENT_REFUNDED = "PAYMENT_REFUNDED"
    PAYMENT_DELETED = "PAYMENT_DELETED"

    SUBSCRIPTION_CREATED = "SUBSCRIPTION_CREATED"
    SUBSCRIPTION_UPDATED = "SUBSCRIPTION_UPDATED"
    SUBSCRIPTION_RENEWED = "SUBSCRIPTION_RENEWED"
    SUBSCRIPTION_INACTIVATED = "SUBSCRIPTION_INACTIVATED"
    SUBSCRIPTION_DELETED = "SUBSCRIPTION_DELETED"


# Eventos com status alvo fixo
EVENT_TARGET_STATUS: dict[GatewayEvent, SubscriptionStatus] = {
    GatewayEvent.PAYMENT_CONFIRMED: SubscriptionStatus.ACTIVE,
    GatewayEvent.PAYMENT_RECEIVED: SubscriptionStatus.ACTIVE,
    GatewayEvent.PAYMENT_OVERDUE: SubscriptionStatus.OVERDUE,
    GatewayEvent.PAYMENT_REFUNDED: SubscriptionStatus.CANCELED,
    GatewayEvent.PAYMENT_DELETED: SubscriptionStatus.CANCELED,
    GatewayEvent.SUBSCRIPTION_INACTIVATED: SubscriptionStatus.INACTIVE,
    GatewayEvent.SUBSCRIPTION_DELETED: SubscriptionStatus.INACTIVE,
}

# Eventos que nunca alteram status
STATUS_NEUTRAL_EVENTS: frozenset[GatewayEvent] = frozenset({
    GatewayEvent.PAYMENT_CREATED,
    GatewayEvent.SUBSCRIPTION_CREATED,
    GatewayEvent.SUBSCRIPTION_RENEWED,
})


def parse_event(value: object) -> GatewayEvent | None:
    """Converte string do payload em GatewayEvent (None se não tratado)."""
    if not isinstance(value, str):
        return None
    try:
        return GatewayEvent(value.strip().upper())
    except ValueError:
        return None


def resolve_target_status(
    event: GatewayEvent,
    gateway_status: str | None = None,
) -> SubscriptionStatus | None:
    """
    Resolve o status alvo para um evento do gateway.

    SUBSCRIPTION_UPDATED usa o status informado pelo gateway:
    ACTIVE vira active; qualquer outro valor vira inactive.

    Args:
        event: Evento recebido
        gateway_status: Status da assinatura no gateway (só UPDATED)

    Returns:
        Status alvo ou None se o evento não altera status
    """
    if event in STATUS_NEUTRAL_EVENTS:
        return None
    if event == GatewayEvent.SUBSCRIPTION_UPDATED:
        if (gateway_status or "").strip().upper() == "ACTIVE":
            return SubscriptionStatus.ACTIVE
        return SubscriptionStatus.INACTIVE
    return EVENT_TARGET_STATUS.get(event)
