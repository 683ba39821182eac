"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_subscription_validator

    initialize_app()
    validator = get_subscription_validator()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_asaas_settings,
    get_base_settings,
    get_dedupe_settings,
    get_firestore_settings,
    get_subscription_store_settings,
    load_split_settings,
)

SERVICE_NAME = "ponte_marketplace"

DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no startup."""
    configure_logging(
        level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Logging em DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de validação de todas as settings."""
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"asaas: {error}" for error in get_asaas_settings().validate())
    errors.extend(f"split: {error}" for error in load_split_settings().validate())

    store_settings = get_subscription_store_settings()
    errors.extend(f"subscription_store: {error}" for error in store_settings.validate(base))
    errors.extend(f"dedupe: {error}" for error in get_dedupe_settings().validate(base))

    if store_settings.backend == "firestore":
        firestore_errors = get_firestore_settings().validate(base.gcp_project)
        errors.extend(f"firestore: {error}" for error in firestore_errors)

    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    environment = get_base_settings().environment
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_subscription_store():
    """Store de assinaturas de vendedores (singleton)."""
    from app.bootstrap.dependencies import create_subscription_store

    return create_subscription_store()


@lru_cache(maxsize=1)
def get_seller_store():
    """Store de vendedores (singleton)."""
    from app.bootstrap.dependencies import create_seller_store

    return create_seller_store()


@lru_cache(maxsize=1)
def get_dedupe_store():
    """Store de dedupe de webhooks (singleton)."""
    from app.bootstrap.dependencies import create_dedupe_store

    return create_dedupe_store()


@lru_cache(maxsize=1)
def get_split_calculator():
    from app.bootstrap.dependencies import create_split_calculator

    return create_split_calculator()


@lru_cache(maxsize=1)
def get_subscription_validator():
    from app.bootstrap.dependencies import create_subscription_validator

    return create_subscription_validator(get_subscription_store())


@lru_cache(maxsize=1)
def get_process_gateway_webhook():
    from app.bootstrap.dependencies import create_process_gateway_webhook

    return create_process_gateway_webhook(get_subscription_store(), get_dedupe_store())


@lru_cache(maxsize=1)
def get_create_shopper_subscription():
    from app.bootstrap.dependencies import (
        create_payment_gateway,
        create_shopper_subscription_use_case,
    )

    return create_shopper_subscription_use_case(
        get_subscription_validator(),
        get_split_calculator(),
        create_payment_gateway(),
    )
