"""Protocolo de deduplicação de eventos de webhook.

Interface leve (ABC) dependida pela camada de aplicação.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AsyncDedupeProtocol(ABC):
    """Contrato assíncrono para stores de deduplicação.

    Fluxo esperado:
    1. is_duplicate(key) -> True interrompe o processamento
    2. mark_processing(key) trava a chave por um TTL curto; False indica que
       outro worker já detém o lock e o evento deve ser tratado como duplicado
    3. mark_processed(key, ttl) ao concluir, ou unmark_processing(key) em falha

    Keys devem ser ids opacos (ex.: id do evento do gateway), nunca PII.
    """

    @abstractmethod
    async def is_duplicate(self, key: str) -> bool:
        """True se a chave já foi processada ou está em processamento."""

    @abstractmethod
    async def mark_processing(self, key: str, ttl: int = 30) -> bool:
        """Adquire o lock de processamento (atômico). True se adquirido."""

    @abstractmethod
    async def mark_processed(self, key: str, ttl: int = 86400) -> None:
        """Marca a chave como processada e libera o lock."""

    @abstractmethod
    async def unmark_processing(self, key: str) -> None:
        """Remove o lock de processamento (falha no pipeline)."""
