"""Configuração centralizada de logging.

Um único StreamHandler com formatter JSON e filter de contexto é
instalado no root logger; handlers anteriores são descartados.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "ponte_marketplace"

# Quantidade de caracteres preservados no fim de identificadores mascarados
_MASK_VISIBLE_SUFFIX = 4


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço presente em todo log.
        correlation_id_getter: Função que retorna o correlation_id do
            contexto atual (ex: app.observability.get_correlation_id).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger do módulo (service/correlation_id via filter)."""
    return logging.getLogger(name)


def mask_identifier(value: object) -> str:
    """Mascara identificador sensível preservando apenas o sufixo.

    Exemplo:
        mask_identifier("wal_1234567890") -> "***7890"
    """
    if value is None:
        return ""
    text = str(value)
    if not text:
        return ""
    if len(text) <= _MASK_VISIBLE_SUFFIX:
        return "***"
    return f"***{text[-_MASK_VISIBLE_SUFFIX:]}"
