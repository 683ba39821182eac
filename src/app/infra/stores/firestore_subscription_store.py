"""Firestore SellerSubscription Store.

Consulta da assinatura vigente exige índice composto
(seller_id ASC, status ASC, created_at DESC) na collection.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from google.cloud.firestore_v1.base_query import FieldFilter
from pydantic import ValidationError

from app.domain.seller_subscription import SellerSubscription
from utils.errors import SubscriptionStoreError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from google.cloud.firestore import Client as FirestoreClient

    from fsm.states import SubscriptionStatus

logger = logging.getLogger(__name__)

SELLER_SUBSCRIPTIONS_COLLECTION = "seller_subscriptions"


def _to_subscription(doc_id: str, data: dict[str, Any] | None) -> SellerSubscription:
    """Converte documento; registro incompleto (ex.: sem next_due_date) vira erro de store."""
    try:
        return SellerSubscription.from_firestore_dict(doc_id, data or {})
    except ValidationError as exc:
        logger.error(
            "seller_subscription_document_invalid",
            extra={"doc_id": doc_id, "error_count": exc.error_count()},
        )
        raise SubscriptionStoreError(f"Documento de assinatura inválido: {doc_id}") from exc


class FirestoreSellerSubscriptionStore:
    """Store de assinaturas de vendedores usando Firestore.

    O client síncrono roda em thread (asyncio.to_thread).
    Falhas do driver viram SubscriptionStoreError.
    """

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection: str = SELLER_SUBSCRIPTIONS_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection

    async def find_latest_for_seller(
        self,
        seller_id: str,
        statuses: Iterable[SubscriptionStatus],
    ) -> SellerSubscription | None:
        status_values = [str(status) for status in statuses]
        return await asyncio.to_thread(self._find_latest_sync, seller_id, status_values)

    def _find_latest_sync(
        self,
        seller_id: str,
        status_values: list[str],
    ) -> SellerSubscription | None:
        try:
            query = (
                self._db.collection(self._collection)
                .where(filter=FieldFilter("seller_id", "==", seller_id))
                .where(filter=FieldFilter("status", "in", status_values))
                .order_by("created_at", direction="DESCENDING")
                .limit(1)
            )
            docs = list(query.stream())
        except Exception as exc:
            logger.error(
                "seller_subscription_query_failed",
                extra={"error_type": type(exc).__name__},
            )
            raise SubscriptionStoreError(f"Erro ao consultar assinatura: {exc}") from exc

        if not docs:
            return None
        doc = docs[0]
        return _to_subscription(doc.id, doc.to_dict())

    async def get(self, subscription_id: str) -> SellerSubscription | None:
        return await asyncio.to_thread(self._get_sync, subscription_id)

    def _get_sync(self, subscription_id: str) -> SellerSubscription | None:
        try:
            doc = self._db.collection(self._collection).document(subscription_id).get()
        except Exception as exc:
            raise SubscriptionStoreError(f"Erro ao ler assinatura: {exc}") from exc
        if not doc.exists:
            return None
        return _to_subscription(doc.id, doc.to_dict())

    async def get_by_external_id(self, external_id: str) -> SellerSubscription | None:
        return await asyncio.to_thread(self._get_by_external_id_sync, external_id)

    def _get_by_external_id_sync(self, external_id: str) -> SellerSubscription | None:
        try:
            query = (
                self._db.collection(self._collection)
                .where(filter=FieldFilter("external_id", "==", external_id))
                .limit(1)
            )
            docs = list(query.stream())
        except Exception as exc:
            raise SubscriptionStoreError(f"Erro ao consultar assinatura: {exc}") from exc
        if not docs:
            return None
        return _to_subscription(docs[0].id, docs[0].to_dict())

    async def save(self, subscription: SellerSubscription) -> SellerSubscription:
        return await asyncio.to_thread(self._save_sync, subscription)

    def _save_sync(self, subscription: SellerSubscription) -> SellerSubscription:
        stored = subscription.model_copy(deep=True)
        if stored.id is None:
            stored.id = uuid.uuid4().hex
        stored.updated_at = datetime.now(UTC)
        try:
            self._db.collection(self._collection).document(stored.id).set(
                stored.to_firestore_dict()
            )
        except Exception as exc:
            logger.error(
                "seller_subscription_save_failed",
                extra={"error_type": type(exc).__name__},
            )
            raise SubscriptionStoreError(f"Erro ao persistir assinatura: {exc}") from exc
        logger.debug("seller_subscription_saved", extra={"status": stored.status.value})
        return stored
