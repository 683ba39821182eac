"""Cliente da API REST v3 do Asaas.

Autenticação pelo header `access_token`. Respostas de erro viram
AsaasApiError com as descrições retornadas pelo gateway; logs nunca
carregam token nem payload.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.asaas.errors import DEFAULT_ERROR_MESSAGE, AsaasApiError, build_api_error
from api.connectors.asaas.http_base import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    import httpx

    from config.settings import AsaasSettings

logger = logging.getLogger(__name__)

USER_AGENT = "ponte-marketplace"


class AsaasClient(HttpClient):
    """Cliente do gateway Asaas (implementa PaymentGatewayProtocol)."""

    def __init__(self, settings: AsaasSettings, config: HttpClientConfig | None = None) -> None:
        super().__init__(
            config
            or HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                max_retries=settings.max_retries,
            )
        )
        self._settings = settings

    def _headers(self) -> dict[str, str]:
        if not self._settings.access_token:
            raise ValueError("AS_TOKEN é obrigatório para chamadas ao Asaas")
        return {
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            "access_token": self._settings.access_token,
        }

    async def create_subscription(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Cria assinatura recorrente (POST /subscriptions)."""
        return await self._call("POST", "subscriptions", payload)

    async def get_subscription(self, subscription_id: str) -> dict[str, Any]:
        """Consulta assinatura (GET /subscriptions/{id})."""
        return await self._call("GET", f"subscriptions/{subscription_id}")

    async def _call(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = self._settings.endpoint(path)
        try:
            response = await self.request(method, url, json=payload, headers=self._headers())
        except HttpError as exc:
            logger.warning(
                "asaas_request_failed",
                extra={"method": method, "path": path, "status_code": exc.status_code},
            )
            raise AsaasApiError(
                DEFAULT_ERROR_MESSAGE,
                status_code=exc.status_code or 502,
                is_retryable=exc.is_retryable,
            ) from exc
        return self._process_response(response, method, path)

    @staticmethod
    def _process_response(response: httpx.Response, method: str, path: str) -> dict[str, Any]:
        try:
            data = response.json()
        except json.JSONDecodeError:
            data = None

        if response.status_code >= 400:
            error = build_api_error(response.status_code, data)
            logger.warning(
                "asaas_api_error",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "error_count": len(error.errors),
                },
            )
            raise error

        if not isinstance(data, dict):
            raise AsaasApiError("invalid gateway response", status_code=502)

        logger.debug(
            "asaas_request_ok",
            extra={"method": method, "path": path, "status_code": response.status_code},
        )
        return data


def create_asaas_client(settings: AsaasSettings | None = None) -> AsaasClient:
    """Factory com settings do ambiente quando não informadas."""
    from config.settings import get_asaas_settings

    return AsaasClient(settings or get_asaas_settings())
