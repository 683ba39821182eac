"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FirestoreUnavailableError,
    InfrastructureError,
    RedisConnectionError,
    SubscriptionStoreError,
)

__all__ = [
    "FirestoreUnavailableError",
    "InfrastructureError",
    "RedisConnectionError",
    "SubscriptionStoreError",
]
