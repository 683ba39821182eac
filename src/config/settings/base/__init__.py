"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.dedupe import (
    DedupeBackend,
    DedupeSettings,
    get_dedupe_settings,
)
from config.settings.base.subscription_store import (
    SubscriptionStoreBackend,
    SubscriptionStoreSettings,
    get_subscription_store_settings,
)

__all__ = [
    # Core
    "BaseSettings",
    # Dedupe
    "DedupeBackend",
    "DedupeSettings",
    # Types
    "Environment",
    # Subscription store
    "SubscriptionStoreBackend",
    "SubscriptionStoreSettings",
    "get_base_settings",
    "get_dedupe_settings",
    "get_subscription_store_settings",
]
