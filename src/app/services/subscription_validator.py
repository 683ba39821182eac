"""Gate de assinatura do vendedor.

Decide, a partir da assinatura mais recente do vendedor com status
active, overdue ou pending, se ele pode usar funcionalidades restritas.

Precedência das regras:
1. status overdue, ou vencimento no passado com status != active
2. status pending (cadastro incompleto)
3. status inactive/canceled
Status active libera mesmo com next_due_date no passado.

Falhas do store nunca escapam: viram resultado UNEXPECTED.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.constants import messages
from app.domain.results import ErrorKind, OperationError, format_error
from app.domain.seller_subscription import SubscriptionValidationResult, ensure_utc
from app.observability.metrics import record_latency, record_subscription_gate
from fsm.states import QUALIFYING_STATUSES, SubscriptionStatus

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.seller_subscription import SellerSubscription
    from app.protocols.subscription_store import SellerSubscriptionStoreProtocol

logger = logging.getLogger(__name__)

_INACTIVE_STATUSES = frozenset({SubscriptionStatus.INACTIVE, SubscriptionStatus.CANCELED})


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _fail(kind: ErrorKind, message: str) -> SubscriptionValidationResult:
    return SubscriptionValidationResult.fail(OperationError.of(kind, message))


class SubscriptionValidator:
    """Valida a assinatura vigente de um vendedor.

    Args:
        store: Store de assinaturas (uma leitura por validação)
        clock: Relógio injetável; deve retornar datetime aware em UTC
    """

    def __init__(
        self,
        store: SellerSubscriptionStoreProtocol,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._clock = clock or _utcnow

    async def validate_seller_subscription(
        self,
        seller_id: str | int | None,
    ) -> SubscriptionValidationResult:
        """Valida se o vendedor tem assinatura que libera o serviço."""
        if not seller_id:
            return _fail(ErrorKind.MISSING_SELLER_ID, messages.MISSING_SELLER_ID)

        try:
            subscription = await self._find_current(str(seller_id))
            if subscription is None:
                return _fail(ErrorKind.NO_ACTIVE_SUBSCRIPTION, messages.NO_ACTIVE_SUBSCRIPTION)
            return self._evaluate(subscription)
        except Exception as exc:
            logger.error(
                "subscription_validation_failed",
                extra={"error_type": type(exc).__name__},
            )
            return SubscriptionValidationResult.fail(format_error(exc))

    async def check_subscription_middleware(
        self,
        seller_id: str | int | None,
    ) -> SubscriptionValidationResult | None:
        """Gate para rotas: None libera; caso contrário a falha, inalterada."""
        result = await self.validate_seller_subscription(seller_id)
        if result.success:
            record_subscription_gate(allowed=True)
            return None

        error = result.error
        record_subscription_gate(
            allowed=False,
            reason=error.kind.value if error else None,
            status_code=error.status_code if error else None,
        )
        return result

    async def _find_current(self, seller_id: str) -> SellerSubscription | None:
        started = time.perf_counter()
        subscription = await self._store.find_latest_for_seller(seller_id, QUALIFYING_STATUSES)
        record_latency(
            "subscription_validator",
            "find_latest_for_seller",
            (time.perf_counter() - started) * 1000,
        )
        return subscription

    def _evaluate(self, subscription: SellerSubscription) -> SubscriptionValidationResult:
        now = ensure_utc(self._clock())
        due = ensure_utc(subscription.next_due_date)
        status = subscription.status

        # Sem vencimento conta como vencida
        past_due = due is None or (now is not None and due < now)
        if status == SubscriptionStatus.OVERDUE or (
            past_due and status != SubscriptionStatus.ACTIVE
        ):
            return _fail(ErrorKind.SUBSCRIPTION_OVERDUE, messages.SUBSCRIPTION_OVERDUE)

        if status == SubscriptionStatus.PENDING:
            return _fail(
                ErrorKind.SUBSCRIPTION_PENDING_DOCUMENTS,
                messages.SUBSCRIPTION_PENDING_DOCUMENTS,
            )

        if status in _INACTIVE_STATUSES:
            return _fail(ErrorKind.SUBSCRIPTION_INACTIVE, messages.SUBSCRIPTION_INACTIVE)

        return SubscriptionValidationResult.ok(subscription)
