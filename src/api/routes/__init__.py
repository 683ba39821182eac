"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (webhook do gateway, vendedores, health)
- Validação inicial de request (headers, corpo)
- Delegação para connectors/services/use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/asaas/: webhook do gateway de pagamentos
- routes/sellers/: assinatura vigente e prévia de split por vendedor
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
