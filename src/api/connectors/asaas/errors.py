"""Erros e parsing de respostas de erro da API Asaas.

Formato de erro do gateway:
    {"errors": [{"code": "invalid_value", "description": "..."}]}
"""

from __future__ import annotations

from typing import Any

DEFAULT_ERROR_MESSAGE = "payment gateway request failed"


class AsaasApiError(Exception):
    """Falha retornada pelo gateway (ou na comunicação com ele).

    Attributes:
        status_code: Status HTTP (ecoado na resposta ao cliente)
        errors: Descrições retornadas pelo gateway
        is_retryable: Se o erro é transitório
    """

    def __init__(
        self,
        message: str,
        status_code: int = 502,
        errors: list[str] | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []
        self.is_retryable = is_retryable


def parse_error_descriptions(response_data: Any) -> list[str]:
    """Extrai `errors[].description` do corpo de erro."""
    if not isinstance(response_data, dict):
        return []
    errors = response_data.get("errors")
    if not isinstance(errors, list):
        return []
    descriptions: list[str] = []
    for item in errors:
        if isinstance(item, dict) and item.get("description"):
            descriptions.append(str(item["description"]))
    return descriptions


def build_api_error(status_code: int, response_data: Any) -> AsaasApiError:
    """Monta AsaasApiError a partir da resposta do gateway.

    A mensagem junta as descrições com ", ".
    """
    descriptions = parse_error_descriptions(response_data)
    message = ", ".join(descriptions) if descriptions else DEFAULT_ERROR_MESSAGE
    return AsaasApiError(
        message,
        status_code=status_code,
        errors=descriptions,
        is_retryable=status_code == 429 or status_code >= 500,
    )
