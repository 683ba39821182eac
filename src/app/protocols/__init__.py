"""Protocolos e contratos do core da aplicação."""

from .dedupe import AsyncDedupeProtocol
from .payment_gateway import PaymentGatewayProtocol
from .seller_store import SellerStoreProtocol
from .split_policy import SplitPolicyProviderProtocol
from .subscription_store import SellerSubscriptionStoreProtocol

__all__ = [
    "AsyncDedupeProtocol",
    "PaymentGatewayProtocol",
    "SellerStoreProtocol",
    "SellerSubscriptionStoreProtocol",
    "SplitPolicyProviderProtocol",
]
