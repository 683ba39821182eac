"""Vendedor (lojista) integrado à plataforma."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Seller(BaseModel):
    """Lojista com subconta no gateway.

    wallet_id é a carteira da subconta que recebe o split.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1, description="ID interno do vendedor.")
    store_id: str | None = Field(None, description="ID da loja na plataforma de e-commerce.")
    store_name: str = Field(default="", description="Nome da loja.")
    customer_id: str | None = Field(None, description="Cliente do vendedor no gateway.")
    subaccount_id: str | None = Field(None, description="Subconta do vendedor no gateway.")
    wallet_id: str | None = Field(None, description="Carteira da subconta (destino do split).")

    def to_firestore_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude={"id"}, exclude_none=True)

    @classmethod
    def from_firestore_dict(cls, doc_id: str, data: dict[str, Any]) -> Seller:
        return cls(id=doc_id, **{k: v for k, v in data.items() if k != "id"})


__all__ = ["Seller"]
