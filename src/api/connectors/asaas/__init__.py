"""Conector Asaas - adapter de borda para o gateway de pagamentos.

Único ponto de IO com o gateway:
- HTTP client da API v3 (assinaturas)
- Erros da API
- Webhook (token, parsing)
"""

from .client import AsaasClient, create_asaas_client
from .errors import AsaasApiError, build_api_error, parse_error_descriptions

__all__ = [
    "AsaasApiError",
    "AsaasClient",
    "build_api_error",
    "create_asaas_client",
    "parse_error_descriptions",
]
