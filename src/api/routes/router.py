"""Router principal da API.

Agrega todos os routers em um único APIRouter.
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.asaas.router import router as asaas_router
from api.routes.health.router import router as health_router
from api.routes.sellers.router import router as sellers_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers."""
    router = APIRouter()

    router.include_router(health_router, tags=["health"])
    router.include_router(sellers_router, prefix="/sellers", tags=["sellers"])
    router.include_router(asaas_router, prefix="/webhook/asaas", tags=["asaas"])

    return router
