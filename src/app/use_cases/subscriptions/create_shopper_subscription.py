"""Use case: criar assinatura de comprador com split para o vendedor.

Ordem:
1. Vendedor existe e tem carteira (validate_seller_for_split)
2. Gate de assinatura do vendedor (check_subscription_middleware)
3. Cálculo do split
4. Payload do gateway e criação da assinatura
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.domain.results import ErrorKind, OperationError, format_error

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.seller import Seller
    from app.domain.split import SplitResult
    from app.domain.subscription_request import SubscriptionRequest
    from app.protocols import PaymentGatewayProtocol
    from app.services import SplitCalculator, SubscriptionValidator

    PayloadBuilder = Callable[..., dict[str, Any]]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SubscriptionCreationResult:
    """Resultado da criação de assinatura."""

    success: bool
    gateway_subscription: dict[str, Any] = field(default_factory=dict)
    split: SplitResult | None = None
    error: OperationError | None = None

    @classmethod
    def fail(cls, error: OperationError) -> SubscriptionCreationResult:
        return cls(success=False, error=error)


class CreateShopperSubscriptionUseCase:
    """Cria assinatura recorrente no gateway com split obrigatório."""

    def __init__(
        self,
        *,
        validator: SubscriptionValidator,
        split_calculator: SplitCalculator,
        gateway: PaymentGatewayProtocol,
        payload_builder: PayloadBuilder,
    ) -> None:
        self._validator = validator
        self._split_calculator = split_calculator
        self._gateway = gateway
        self._payload_builder = payload_builder

    async def execute(
        self,
        *,
        seller: Seller | None,
        request: SubscriptionRequest,
    ) -> SubscriptionCreationResult:
        seller_check = self._split_calculator.validate_seller_for_split(seller)
        if not seller_check.success or seller is None:
            return SubscriptionCreationResult(success=False, error=seller_check.error)

        gate = await self._validator.check_subscription_middleware(seller.id)
        if gate is not None:
            return SubscriptionCreationResult(success=False, error=gate.error)

        split = self._split_calculator.calculate_split(request.value, seller.wallet_id)
        if not split.success:
            return SubscriptionCreationResult(success=False, error=split.error, split=split)

        try:
            payload = self._payload_builder(request, split, seller_id=seller.id)
        except ValueError as exc:
            return SubscriptionCreationResult.fail(
                OperationError.of(ErrorKind.INVALID_REQUEST, str(exc))
            )

        try:
            created = await self._gateway.create_subscription(payload)
        except Exception as exc:
            logger.warning(
                "gateway_subscription_create_failed",
                extra={"error_type": type(exc).__name__},
            )
            return SubscriptionCreationResult.fail(format_error(exc))

        logger.info(
            "gateway_subscription_created",
            extra={"split_mode": "percent" if split.allocations[0].is_percentual else "fixed"},
        )
        return SubscriptionCreationResult(
            success=True,
            gateway_subscription=created,
            split=split,
        )
