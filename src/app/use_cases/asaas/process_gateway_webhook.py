"""Use case: processar evento de webhook do gateway.

Fluxo:
1. Eventos não tratados são ignorados (sem dedupe).
2. Dedupe pelo id do evento: lock atômico (SET NX) de processamento; quem
   não adquire o lock recebe DUPLICATE. Concluído fica marcado por 24h.
3. Resolve a assinatura do vendedor pelo id da assinatura no gateway.
4. Aplica a transição de status via SubscriptionLifecycle; transições
   inválidas são ignoradas e logadas.
5. Atualiza datas/valores conforme o evento e persiste.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from app.domain.gateway_event import parse_gateway_date
from app.observability.metrics import record_webhook_outcome
from fsm import GatewayEvent, SubscriptionLifecycle, SubscriptionStatus, parse_event

if TYPE_CHECKING:
    from app.domain.gateway_event import GatewayWebhookEvent
    from app.domain.seller_subscription import SellerSubscription
    from app.protocols import AsyncDedupeProtocol, SellerSubscriptionStoreProtocol

logger = logging.getLogger(__name__)

DEFAULT_DEDUPE_TTL_SECONDS = 86400

# Eventos que atualizam próximo vencimento e ciclo
_SCHEDULE_EVENTS = frozenset({
    GatewayEvent.SUBSCRIPTION_RENEWED,
    GatewayEvent.SUBSCRIPTION_UPDATED,
})
# Status que encerram a assinatura (registram end_date)
_ENDING_STATUSES = frozenset({SubscriptionStatus.INACTIVE, SubscriptionStatus.CANCELED})


class WebhookOutcome(StrEnum):
    APPLIED = "applied"
    IGNORED = "ignored"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class WebhookProcessingResult:
    """Resultado do processamento de um evento."""

    event: str
    outcome: WebhookOutcome
    subscription_id: str | None = None
    status: str | None = None

    def to_response(self) -> dict[str, str | None]:
        return {
            "event": self.event,
            "outcome": self.outcome.value,
            "subscription_id": self.subscription_id,
            "status": self.status,
        }


class ProcessGatewayWebhookUseCase:
    """Aplica eventos do gateway às assinaturas de vendedores."""

    def __init__(
        self,
        *,
        store: SellerSubscriptionStoreProtocol,
        dedupe: AsyncDedupeProtocol,
        dedupe_ttl_seconds: int = DEFAULT_DEDUPE_TTL_SECONDS,
    ) -> None:
        self._store = store
        self._dedupe = dedupe
        self._dedupe_ttl_seconds = dedupe_ttl_seconds

    async def execute(self, event: GatewayWebhookEvent) -> WebhookProcessingResult:
        """Processa um evento; falhas de store/dedupe são propagadas."""
        gateway_event = parse_event(event.event)
        if gateway_event is None:
            return self._finish(WebhookProcessingResult(event.event, WebhookOutcome.IGNORED))

        key = event.dedupe_key
        if await self._dedupe.is_duplicate(key):
            return self._finish(WebhookProcessingResult(event.event, WebhookOutcome.DUPLICATE))

        if not await self._dedupe.mark_processing(key):
            return self._finish(WebhookProcessingResult(event.event, WebhookOutcome.DUPLICATE))

        try:
            result = await self._apply(event, gateway_event)
        except Exception:
            await self._dedupe.unmark_processing(key)
            raise
        await self._dedupe.mark_processed(key, ttl=self._dedupe_ttl_seconds)
        return self._finish(result)

    async def _apply(
        self,
        event: GatewayWebhookEvent,
        gateway_event: GatewayEvent,
    ) -> WebhookProcessingResult:
        external_id = event.gateway_subscription_id
        if not external_id:
            return WebhookProcessingResult(event.event, WebhookOutcome.IGNORED)

        subscription = await self._store.get_by_external_id(external_id)
        if subscription is None:
            return WebhookProcessingResult(event.event, WebhookOutcome.NOT_FOUND)

        lifecycle = SubscriptionLifecycle(subscription.status, subscription.id or "")
        transition = lifecycle.apply_event(
            gateway_event,
            gateway_status=event.gateway_status,
            metadata={"event_id": event.id},
        )
        if transition is not None and not transition.success:
            logger.warning(
                "subscription_transition_rejected",
                extra={
                    "event": event.event,
                    "subscription_id": subscription.id,
                    "reason": transition.error_reason,
                },
            )
            return WebhookProcessingResult(
                event.event,
                WebhookOutcome.IGNORED,
                subscription_id=subscription.id,
                status=subscription.status.value,
            )

        if transition is not None and transition.transition is not None:
            subscription.status = lifecycle.current_status
            logger.info("subscription_status_changed", extra=transition.transition.to_log_dict())

        self._apply_fields(subscription, event, gateway_event)
        saved = await self._store.save(subscription)
        return WebhookProcessingResult(
            event.event,
            WebhookOutcome.APPLIED,
            subscription_id=saved.id,
            status=saved.status.value,
        )

    @staticmethod
    def _apply_fields(
        subscription: SellerSubscription,
        event: GatewayWebhookEvent,
        gateway_event: GatewayEvent,
    ) -> None:
        data = event.subscription or {}

        if gateway_event in _SCHEDULE_EVENTS:
            next_due = parse_gateway_date(data.get("nextDueDate"))
            if next_due is not None:
                subscription.next_due_date = next_due
            if data.get("cycle"):
                subscription.cycle = str(data["cycle"])

        if gateway_event == GatewayEvent.SUBSCRIPTION_UPDATED:
            if data.get("value") is not None:
                subscription.value = float(data["value"])
            if data.get("billingType"):
                subscription.billing_type = str(data["billingType"])

        if (
            gateway_event.name.startswith("SUBSCRIPTION_")
            and subscription.status in _ENDING_STATUSES
            and subscription.end_date is None
        ):
            subscription.end_date = datetime.now(UTC)

    @staticmethod
    def _finish(result: WebhookProcessingResult) -> WebhookProcessingResult:
        record_webhook_outcome(
            result.event,
            result.outcome.value,
            metadata={"subscription_id": result.subscription_id},
        )
        return result
