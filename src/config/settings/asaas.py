"""Settings do gateway de pagamentos (Asaas).

Configurações da API REST v3 e do webhook de eventos de cobrança.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

ASAAS_SANDBOX_URL: str = "https://api-sandbox.asaas.com/v3"
ASAAS_WEBHOOK_TOKEN_HEADER: str = "asaas-access-token"


@dataclass(frozen=True)
class AsaasSettings:
    """Configurações do gateway Asaas.

    Attributes:
        api_base_url: URL base da API (sandbox ou produção)
        access_token: Token da conta principal (header access_token)
        webhook_token: Token esperado no header asaas-access-token
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em erros transitórios
    """

    api_base_url: str = ASAAS_SANDBOX_URL
    access_token: str = ""
    webhook_token: str = ""

    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    def endpoint(self, path: str) -> str:
        """Monta URL completa para um recurso da API.

        Args:
            path: Caminho relativo (ex: "subscriptions")

        Returns:
            URL no formato {api_base_url}/{path}
        """
        return f"{self.api_base_url.rstrip('/')}/{path.lstrip('/')}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do gateway.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url:
            errors.append("AS_URL não configurado")

        if not self.access_token:
            errors.append("AS_TOKEN não configurado")

        if not self.webhook_token:
            errors.append("AS_WEBHOOK_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("AS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("AS_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> AsaasSettings:
    """Carrega AsaasSettings a partir de variáveis de ambiente."""
    return AsaasSettings(
        api_base_url=os.getenv("AS_URL", ASAAS_SANDBOX_URL),
        access_token=os.getenv("AS_TOKEN", ""),
        webhook_token=os.getenv("AS_WEBHOOK_TOKEN", ""),
        request_timeout_seconds=float(os.getenv("AS_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("AS_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_asaas_settings() -> AsaasSettings:
    """Retorna instância cacheada de AsaasSettings."""
    return _load_from_env()
