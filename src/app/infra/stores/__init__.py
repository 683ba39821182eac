"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - firestore_subscription_store: Assinaturas de vendedores (Firestore)
    - firestore_seller_store: Vendedores (Firestore)
    - redis_dedupe_store: Dedupe de eventos de webhook (Redis)
    - memory_stores: Stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.firestore_seller_store import FirestoreSellerStore
from app.infra.stores.firestore_subscription_store import FirestoreSellerSubscriptionStore
from app.infra.stores.memory_stores import (
    MemoryDedupeStore,
    MemorySellerStore,
    MemorySellerSubscriptionStore,
)
from app.infra.stores.redis_dedupe_store import RedisDedupeStore

__all__ = [
    # Firestore
    "FirestoreSellerStore",
    "FirestoreSellerSubscriptionStore",
    # Memory (dev/test)
    "MemoryDedupeStore",
    "MemorySellerStore",
    "MemorySellerSubscriptionStore",
    # Redis
    "RedisDedupeStore",
]
