"""Settings do Firestore.

Configurações para Google Cloud Firestore (vendedores e assinaturas).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class FirestoreSettings:
    """Configurações do Firestore.

    Attributes:
        project_id: ID do projeto GCP (usa GCP_PROJECT se não definido)
        collection_sellers: Collection de vendedores
        collection_seller_subscriptions: Collection de assinaturas de vendedores
    """

    project_id: str = ""
    collection_sellers: str = "sellers"
    collection_seller_subscriptions: str = "seller_subscriptions"

    def validate(self, gcp_project: str) -> list[str]:
        """Valida configurações do Firestore.

        Args:
            gcp_project: Projeto GCP padrão para fallback.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not (self.project_id or gcp_project):
            errors.append("FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado")

        if not self.collection_sellers:
            errors.append("FIRESTORE_COLLECTION_SELLERS não pode ser vazio")

        if not self.collection_seller_subscriptions:
            errors.append("FIRESTORE_COLLECTION_SELLER_SUBSCRIPTIONS não pode ser vazio")

        return errors


def _load_firestore_from_env() -> FirestoreSettings:
    """Carrega FirestoreSettings de variáveis de ambiente."""
    return FirestoreSettings(
        project_id=os.getenv("FIRESTORE_PROJECT_ID", ""),
        collection_sellers=os.getenv("FIRESTORE_COLLECTION_SELLERS", "sellers"),
        collection_seller_subscriptions=os.getenv(
            "FIRESTORE_COLLECTION_SELLER_SUBSCRIPTIONS", "seller_subscriptions"
        ),
    )


@lru_cache(maxsize=1)
def get_firestore_settings() -> FirestoreSettings:
    """Retorna instância cacheada de FirestoreSettings."""
    return _load_firestore_from_env()
