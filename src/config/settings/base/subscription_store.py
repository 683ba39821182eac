"""Settings do store de assinaturas de vendedores."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

SubscriptionStoreBackend = Literal["memory", "firestore"]


@dataclass(frozen=True)
class SubscriptionStoreSettings:
    """Configurações de persistência de assinaturas.

    Attributes:
        backend: Backend do store (memory|firestore)
    """

    backend: SubscriptionStoreBackend = "memory"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações do store de assinaturas.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "firestore"):
            errors.append(f"SUBSCRIPTION_STORE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append(
                "SUBSCRIPTION_STORE_BACKEND=memory proibido em staging/production"
            )

        return errors


def _load_subscription_store_from_env() -> SubscriptionStoreSettings:
    """Carrega SubscriptionStoreSettings de variáveis de ambiente."""
    backend_str = os.getenv("SUBSCRIPTION_STORE_BACKEND", "memory").lower()
    backend: SubscriptionStoreBackend = (
        backend_str if backend_str in ("memory", "firestore") else "memory"
    )
    return SubscriptionStoreSettings(backend=backend)


@lru_cache(maxsize=1)
def get_subscription_store_settings() -> SubscriptionStoreSettings:
    """Retorna instância cacheada de SubscriptionStoreSettings."""
    return _load_subscription_store_from_env()
