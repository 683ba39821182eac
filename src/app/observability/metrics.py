"""Métricas registradas como logs estruturados.

Cada métrica é um log INFO com `metric_type` em `extra`, agregável
depois (BigQuery, Cloud Logging). Valores monetários e ids de carteira
nunca entram aqui.

Métricas:
- latency: tempo de operação por componente
- split_calculated: cálculo de split (modo e resultado)
- subscription_gate: decisão do gate de assinatura
- webhook_outcome: desfecho do processamento de evento do gateway
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "subscription_validator")
        operation: Nome da operação (ex: "find_latest_for_seller")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (default: contexto atual via filter)
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_split_calculated(
    mode: str,
    success: bool,
    error_kind: str | None = None,
) -> None:
    """Registra cálculo de split.

    Args:
        mode: "percent" ou "fixed" ("none" quando rejeitado antes da política)
        success: Se o cálculo produziu alocação
        error_kind: ErrorKind da rejeição, se houver
    """
    logger.info(
        "metric_split_calculated",
        extra={
            "metric_type": "split_calculated",
            "mode": mode,
            "success": success,
            "error_kind": error_kind,
        },
    )


def record_subscription_gate(
    allowed: bool,
    reason: str | None = None,
    status_code: int | None = None,
) -> None:
    """Registra decisão do gate de assinatura."""
    logger.info(
        "metric_subscription_gate",
        extra={
            "metric_type": "subscription_gate",
            "allowed": allowed,
            "reason": reason,
            "status_code": status_code,
        },
    )


def record_webhook_outcome(
    event: str,
    outcome: str,
    metadata: dict[str, str | int | None] | None = None,
) -> None:
    """Registra desfecho de evento de webhook do gateway.

    Args:
        event: Tipo do evento (ex: "PAYMENT_CONFIRMED")
        outcome: applied, ignored, duplicate ou not_found
        metadata: Campos adicionais (sem PII)
    """
    extra: dict[str, object] = {
        "metric_type": "webhook_outcome",
        "event": event,
        "outcome": outcome,
    }
    if metadata:
        extra.update(metadata)

    logger.info("metric_webhook_outcome", extra=extra)
