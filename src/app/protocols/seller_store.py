"""Protocolo de leitura de vendedores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.seller import Seller


class SellerStoreProtocol(Protocol):
    """Contrato para store de Seller."""

    async def get(self, seller_id: str) -> Seller | None:
        """Busca vendedor por ID (None se inexistente)."""
        ...

    async def upsert(self, seller: Seller) -> None:
        """Cria ou atualiza vendedor."""
        ...
