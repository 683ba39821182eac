"""Exceções de infraestrutura para falhas de IO (stores e gateway)."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""

    status_code: int = 500


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""


class FirestoreUnavailableError(InfrastructureError):
    """Falha de indisponibilidade ao acessar Firestore."""

    status_code = 503


class SubscriptionStoreError(InfrastructureError):
    """Falha ao ler ou gravar assinaturas de vendedores."""
