"""Protocolo de persistência de assinaturas de vendedores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.seller_subscription import SellerSubscription
    from fsm.states import SubscriptionStatus


class SellerSubscriptionStoreProtocol(Protocol):
    """Contrato para store de SellerSubscription.

    Falhas de driver são propagadas como SubscriptionStoreError.
    """

    async def find_latest_for_seller(
        self,
        seller_id: str,
        statuses: Iterable[SubscriptionStatus],
    ) -> SellerSubscription | None:
        """Registro mais recente (created_at desc) do vendedor com status em `statuses`."""
        ...

    async def get(self, subscription_id: str) -> SellerSubscription | None:
        """Busca por ID interno."""
        ...

    async def get_by_external_id(self, external_id: str) -> SellerSubscription | None:
        """Busca pelo ID da assinatura no gateway."""
        ...

    async def save(self, subscription: SellerSubscription) -> SellerSubscription:
        """Cria ou atualiza; atribui id e atualiza updated_at."""
        ...
