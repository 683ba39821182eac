"""Factories de stores e serviços baseadas em configuração de ambiente."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.asaas import create_asaas_client
from api.payload_builders.asaas import build_subscription_payload
from app.bootstrap.clients import create_async_redis_client, create_firestore_client
from app.infra.split_policy import EnvSplitPolicyProvider
from app.infra.stores import (
    FirestoreSellerStore,
    FirestoreSellerSubscriptionStore,
    MemoryDedupeStore,
    MemorySellerStore,
    MemorySellerSubscriptionStore,
    RedisDedupeStore,
)
from app.services import SplitCalculator, SubscriptionValidator
from app.use_cases.asaas import ProcessGatewayWebhookUseCase
from app.use_cases.subscriptions import CreateShopperSubscriptionUseCase
from config.settings import (
    get_base_settings,
    get_dedupe_settings,
    get_firestore_settings,
    get_subscription_store_settings,
)

if TYPE_CHECKING:
    from app.protocols import (
        AsyncDedupeProtocol,
        PaymentGatewayProtocol,
        SellerStoreProtocol,
        SellerSubscriptionStoreProtocol,
    )

logger = logging.getLogger(__name__)


def _warn_memory_backend(component: str) -> None:
    environment = get_base_settings().environment
    if environment not in ("development", "test"):
        logger.warning(
            "memory_store_in_non_dev",
            extra={"component": component, "environment": environment},
        )


def create_subscription_store() -> SellerSubscriptionStoreProtocol:
    """Cria store de assinaturas conforme SUBSCRIPTION_STORE_BACKEND."""
    backend = get_subscription_store_settings().backend

    if backend == "firestore":
        store = FirestoreSellerSubscriptionStore(
            create_firestore_client(),
            collection=get_firestore_settings().collection_seller_subscriptions,
        )
        logger.info("subscription_store_created", extra={"backend": "firestore"})
        return store

    _warn_memory_backend("subscription_store")
    logger.info("subscription_store_created", extra={"backend": "memory"})
    return MemorySellerSubscriptionStore()


def create_seller_store() -> SellerStoreProtocol:
    """Cria store de vendedores (mesmo backend das assinaturas)."""
    if get_subscription_store_settings().backend == "firestore":
        return FirestoreSellerStore(
            create_firestore_client(),
            collection=get_firestore_settings().collection_sellers,
        )
    _warn_memory_backend("seller_store")
    return MemorySellerStore()


def create_dedupe_store() -> AsyncDedupeProtocol:
    """Cria store de dedupe conforme DEDUPE_BACKEND."""
    backend = get_dedupe_settings().backend

    if backend == "redis":
        store = RedisDedupeStore(create_async_redis_client())
        logger.info("dedupe_store_created", extra={"backend": "redis"})
        return store

    _warn_memory_backend("dedupe_store")
    logger.info("dedupe_store_created", extra={"backend": "memory"})
    return MemoryDedupeStore()


def create_split_calculator() -> SplitCalculator:
    """SplitCalculator com política lida do ambiente a cada cálculo."""
    return SplitCalculator(EnvSplitPolicyProvider())


def create_subscription_validator(
    store: SellerSubscriptionStoreProtocol,
) -> SubscriptionValidator:
    return SubscriptionValidator(store)


def create_payment_gateway() -> PaymentGatewayProtocol:
    return create_asaas_client()


def create_process_gateway_webhook(
    store: SellerSubscriptionStoreProtocol,
    dedupe: AsyncDedupeProtocol,
) -> ProcessGatewayWebhookUseCase:
    return ProcessGatewayWebhookUseCase(
        store=store,
        dedupe=dedupe,
        dedupe_ttl_seconds=get_dedupe_settings().ttl_seconds,
    )


def create_shopper_subscription_use_case(
    validator: SubscriptionValidator,
    split_calculator: SplitCalculator,
    gateway: PaymentGatewayProtocol,
) -> CreateShopperSubscriptionUseCase:
    return CreateShopperSubscriptionUseCase(
        validator=validator,
        split_calculator=split_calculator,
        gateway=gateway,
        payload_builder=build_subscription_payload,
    )
