"""Firestore Seller Store."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.domain.seller import Seller
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

SELLERS_COLLECTION = "sellers"


class FirestoreSellerStore:
    """Store de vendedores usando Firestore."""

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection: str = SELLERS_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection

    async def get(self, seller_id: str) -> Seller | None:
        return await asyncio.to_thread(self._get_sync, seller_id)

    def _get_sync(self, seller_id: str) -> Seller | None:
        try:
            doc = self._db.collection(self._collection).document(seller_id).get()
        except Exception as exc:
            logger.error("seller_get_failed", extra={"error_type": type(exc).__name__})
            raise FirestoreUnavailableError(f"Erro ao ler vendedor: {exc}") from exc
        if not doc.exists:
            return None
        return Seller.from_firestore_dict(doc.id, doc.to_dict() or {})

    async def upsert(self, seller: Seller) -> None:
        await asyncio.to_thread(self._upsert_sync, seller)

    def _upsert_sync(self, seller: Seller) -> None:
        try:
            self._db.collection(self._collection).document(seller.id).set(
                seller.to_firestore_dict(), merge=True
            )
        except Exception as exc:
            logger.error("seller_upsert_failed", extra={"error_type": type(exc).__name__})
            raise FirestoreUnavailableError(f"Erro ao persistir vendedor: {exc}") from exc
