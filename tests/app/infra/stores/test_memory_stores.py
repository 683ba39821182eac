"""Testes dos stores em memória."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from app.domain.seller import Seller
from app.domain.seller_subscription import SellerSubscription
from app.infra.stores import MemoryDedupeStore, MemorySellerStore, MemorySellerSubscriptionStore
from fsm import QUALIFYING_STATUSES, SubscriptionStatus

BASE = datetime(2026, 2, 1, tzinfo=UTC)


def _subscription(status: str, created_at: datetime, **kwargs: object) -> SellerSubscription:
    kwargs.setdefault("next_due_date", created_at + timedelta(days=30))
    return SellerSubscription(seller_id="seller-1", status=status, created_at=created_at, **kwargs)


class TestMemorySellerSubscriptionStore:
    @pytest.mark.asyncio
    async def test_save_assigns_id_and_updated_at(self) -> None:
        store = MemorySellerSubscriptionStore()

        saved = await store.save(_subscription("active", BASE))

        assert saved.id
        assert saved.updated_at >= saved.created_at
        assert await store.get(saved.id) == saved

    @pytest.mark.asyncio
    async def test_find_latest_filters_status_and_orders_by_created_at(self) -> None:
        store = MemorySellerSubscriptionStore()
        await store.save(_subscription("active", BASE))
        newest_pending = await store.save(_subscription("pending", BASE + timedelta(days=2)))
        await store.save(_subscription("canceled", BASE + timedelta(days=5)))

        latest = await store.find_latest_for_seller("seller-1", QUALIFYING_STATUSES)

        assert latest is not None
        assert latest.id == newest_pending.id

    @pytest.mark.asyncio
    async def test_ties_resolve_to_last_inserted(self) -> None:
        store = MemorySellerSubscriptionStore()
        await store.save(_subscription("active", BASE))
        second = await store.save(_subscription("overdue", BASE))

        latest = await store.find_latest_for_seller("seller-1", QUALIFYING_STATUSES)

        assert latest is not None
        assert latest.id == second.id

    @pytest.mark.asyncio
    async def test_returns_copies(self) -> None:
        store = MemorySellerSubscriptionStore()
        saved = await store.save(_subscription("active", BASE))

        fetched = await store.get(saved.id or "")
        assert fetched is not None
        fetched.status = SubscriptionStatus.CANCELED

        again = await store.get(saved.id or "")
        assert again is not None
        assert again.status == SubscriptionStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_get_by_external_id(self) -> None:
        store = MemorySellerSubscriptionStore()
        saved = await store.save(_subscription("active", BASE, external_id="sub_abc"))

        found = await store.get_by_external_id("sub_abc")

        assert found is not None
        assert found.id == saved.id
        assert await store.get_by_external_id("sub_missing") is None


class TestMemorySellerStore:
    @pytest.mark.asyncio
    async def test_get_and_upsert(self) -> None:
        store = MemorySellerStore([Seller(id="s-1", wallet_id="wal_1")])

        await store.upsert(Seller(id="s-2", store_name="Loja 2"))

        first = await store.get("s-1")
        assert first is not None
        assert first.wallet_id == "wal_1"
        second = await store.get("s-2")
        assert second is not None
        assert second.store_name == "Loja 2"
        assert await store.get("s-3") is None


class TestMemoryDedupeStore:
    @pytest.mark.asyncio
    async def test_processing_then_processed(self) -> None:
        store = MemoryDedupeStore()

        assert await store.is_duplicate("evt_1") is False
        await store.mark_processing("evt_1")
        assert await store.is_duplicate("evt_1") is True
        await store.mark_processed("evt_1")
        assert await store.is_duplicate("evt_1") is True

    @pytest.mark.asyncio
    async def test_unmark_processing_allows_retry(self) -> None:
        store = MemoryDedupeStore()

        await store.mark_processing("evt_1")
        await store.unmark_processing("evt_1")

        assert await store.is_duplicate("evt_1") is False
        assert await store.mark_processing("evt_1") is True

    @pytest.mark.asyncio
    async def test_mark_processing_is_exclusive(self) -> None:
        store = MemoryDedupeStore()

        assert await store.mark_processing("evt_1") is True
        assert await store.mark_processing("evt_1") is False
        await store.mark_processed("evt_1")
        assert await store.mark_processing("evt_1") is False

    @pytest.mark.asyncio
    async def test_expired_entries_are_not_duplicates(self) -> None:
        store = MemoryDedupeStore()

        await store.mark_processed("evt_1", ttl=-1)

        assert await store.is_duplicate("evt_1") is False
