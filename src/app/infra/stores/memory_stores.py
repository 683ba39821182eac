"""Stores em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import itertools
import time
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.protocols.dedupe import AsyncDedupeProtocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.seller import Seller
    from app.domain.seller_subscription import SellerSubscription
    from fsm.states import SubscriptionStatus


class MemorySellerSubscriptionStore:
    """Store de assinaturas em memória (apenas dev/test)."""

    def __init__(self) -> None:
        # subscription_id -> (ordem de inserção, registro)
        self._records: dict[str, tuple[int, SellerSubscription]] = {}
        self._sequence = itertools.count()

    async def find_latest_for_seller(
        self,
        seller_id: str,
        statuses: Iterable[SubscriptionStatus],
    ) -> SellerSubscription | None:
        wanted = set(statuses)
        candidates = [
            (record.created_at, order, record)
            for order, record in self._records.values()
            if record.seller_id == seller_id and record.status in wanted
        ]
        if not candidates:
            return None
        _, _, latest = max(candidates, key=lambda item: (item[0], item[1]))
        return latest.model_copy(deep=True)

    async def get(self, subscription_id: str) -> SellerSubscription | None:
        entry = self._records.get(subscription_id)
        if entry is None:
            return None
        return entry[1].model_copy(deep=True)

    async def get_by_external_id(self, external_id: str) -> SellerSubscription | None:
        for _, record in self._records.values():
            if record.external_id == external_id:
                return record.model_copy(deep=True)
        return None

    async def save(self, subscription: SellerSubscription) -> SellerSubscription:
        stored = subscription.model_copy(deep=True)
        if stored.id is None:
            stored.id = uuid.uuid4().hex
        stored.updated_at = datetime.now(UTC)

        existing = self._records.get(stored.id)
        order = existing[0] if existing else next(self._sequence)
        self._records[stored.id] = (order, stored)
        return stored.model_copy(deep=True)


class MemorySellerStore:
    """Store de vendedores em memória (apenas dev/test)."""

    def __init__(self, sellers: Iterable[Seller] = ()) -> None:
        self._sellers: dict[str, Seller] = {seller.id: seller for seller in sellers}

    async def get(self, seller_id: str) -> Seller | None:
        seller = self._sellers.get(seller_id)
        return seller.model_copy() if seller else None

    async def upsert(self, seller: Seller) -> None:
        self._sellers[seller.id] = seller.model_copy()


class MemoryDedupeStore(AsyncDedupeProtocol):
    """Store de dedupe em memória (apenas dev/test)."""

    def __init__(self) -> None:
        self._processed: dict[str, float] = {}  # key -> expires_at
        self._processing: dict[str, float] = {}

    @staticmethod
    def _cleanup_expired(entries: dict[str, float]) -> None:
        now = time.time()
        for key in [k for k, expires_at in entries.items() if expires_at < now]:
            del entries[key]

    async def is_duplicate(self, key: str) -> bool:
        self._cleanup_expired(self._processed)
        self._cleanup_expired(self._processing)
        return key in self._processed or key in self._processing

    async def mark_processing(self, key: str, ttl: int = 30) -> bool:
        self._cleanup_expired(self._processed)
        self._cleanup_expired(self._processing)
        if key in self._processing or key in self._processed:
            return False
        self._processing[key] = time.time() + ttl
        return True

    async def mark_processed(self, key: str, ttl: int = 86400) -> None:
        self._processed[key] = time.time() + ttl
        self._processing.pop(key, None)

    async def unmark_processing(self, key: str) -> None:
        self._processing.pop(key, None)
