"""Agregador de settings do Ponte Marketplace.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Gateway de pagamentos
from config.settings.asaas import (
    ASAAS_SANDBOX_URL,
    ASAAS_WEBHOOK_TOKEN_HEADER,
    AsaasSettings,
    get_asaas_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    DedupeBackend,
    DedupeSettings,
    Environment,
    SubscriptionStoreBackend,
    SubscriptionStoreSettings,
    get_base_settings,
    get_dedupe_settings,
    get_subscription_store_settings,
)

# Infrastructure settings
from config.settings.infra import (
    FirestoreSettings,
    get_firestore_settings,
)

# Política de split (sem cache)
from config.settings.split import (
    SplitSettings,
    load_split_settings,
)

__all__ = [
    # Constants
    "ASAAS_SANDBOX_URL",
    "ASAAS_WEBHOOK_TOKEN_HEADER",
    # Gateway
    "AsaasSettings",
    # Base
    "BaseSettings",
    "DedupeBackend",
    "DedupeSettings",
    "Environment",
    # Infrastructure
    "FirestoreSettings",
    # Split
    "SplitSettings",
    "SubscriptionStoreBackend",
    "SubscriptionStoreSettings",
    "get_asaas_settings",
    "get_base_settings",
    "get_dedupe_settings",
    "get_firestore_settings",
    "get_subscription_store_settings",
    "load_split_settings",
]
