"""Use cases de assinaturas de compradores."""

from app.use_cases.subscriptions.create_shopper_subscription import (
    CreateShopperSubscriptionUseCase,
    SubscriptionCreationResult,
)

__all__ = [
    "CreateShopperSubscriptionUseCase",
    "SubscriptionCreationResult",
]
