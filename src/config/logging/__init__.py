"""Logging estruturado (JSON) do Ponte Marketplace.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no bootstrap
    configure_logging(level="INFO", service_name="ponte_marketplace")

    # Nos módulos
    logger = get_logger(__name__)
    logger.info("split_calculated", extra={"mode": "fixed"})

Todo log carrega correlation_id e service. Identificadores sensíveis
(wallet, tokens) passam por mask_identifier antes de irem para `extra`.
"""

from config.logging.config import configure_logging, get_logger, mask_identifier
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "mask_identifier",
]
