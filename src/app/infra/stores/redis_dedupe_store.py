"""Redis Dedupe Store — deduplicação de eventos de webhook.

Contrato de Keys:
    Keys são ids opacos de evento do gateway (ex.: "evt_..."). Nunca PII.

Duas chaves por evento:
    dedupe:{key}             evento concluído (TTL longo)
    dedupe:processing:{key}  lock enquanto o evento é processado (TTL curto)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.dedupe import AsyncDedupeProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

DEDUPE_PREFIX = "dedupe:"


def _mask_key(key: str) -> str:
    return key[:8] + "..." if len(key) > 8 else key


class RedisDedupeStore(AsyncDedupeProtocol):
    """Store de dedupe usando redis.asyncio (Upstash compatível).

    Args:
        redis_client: Cliente Redis assíncrono
    """

    def __init__(self, redis_client: AsyncRedis) -> None:
        self._redis = redis_client

    def _key(self, key: str) -> str:
        return f"{DEDUPE_PREFIX}{key}"

    def _processing_key(self, key: str) -> str:
        return f"{DEDUPE_PREFIX}processing:{key}"

    async def is_duplicate(self, key: str) -> bool:
        try:
            # Verificação conjunta reduz janela de race entre check e mark
            pipeline = self._redis.pipeline()
            pipeline.exists(self._key(key))
            pipeline.exists(self._processing_key(key))
            exists_processed, exists_processing = await pipeline.execute()
        except Exception as exc:
            raise RedisConnectionError("Falha ao consultar dedupe no Redis") from exc

        is_duplicate = bool(exists_processed or exists_processing)
        if is_duplicate:
            logger.debug("dedupe_duplicate_detected", extra={"key": _mask_key(key)})
        return is_duplicate

    async def mark_processing(self, key: str, ttl: int = 30) -> bool:
        try:
            acquired = await self._redis.set(self._processing_key(key), "1", nx=True, ex=ttl)
        except Exception as exc:
            raise RedisConnectionError("Falha ao marcar processamento no Redis") from exc
        if not acquired:
            logger.debug("dedupe_lock_not_acquired", extra={"key": _mask_key(key)})
        return bool(acquired)

    async def mark_processed(self, key: str, ttl: int = 86400) -> None:
        try:
            pipeline = self._redis.pipeline()
            pipeline.setex(self._key(key), ttl, "1")
            pipeline.delete(self._processing_key(key))
            await pipeline.execute()
        except Exception as exc:
            raise RedisConnectionError("Falha ao concluir dedupe no Redis") from exc
        logger.debug("dedupe_marked", extra={"key": _mask_key(key), "ttl": ttl})

    async def unmark_processing(self, key: str) -> None:
        try:
            await self._redis.delete(self._processing_key(key))
        except Exception as exc:
            raise RedisConnectionError("Falha ao remover lock de dedupe no Redis") from exc
