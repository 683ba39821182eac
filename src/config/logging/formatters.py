"""Formatter JSON com campos padronizados.

Exemplo de saída:
    {"timestamp": "2026-03-01 10:30:00,123", "level": "INFO",
     "logger": "app.services.split_calculator", "message": "split_calculated",
     "correlation_id": "abc-123", "service": "ponte_marketplace", "mode": "fixed"}
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem preservada na saída
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com os campos obrigatórios renomeados."""
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
