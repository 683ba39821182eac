"""Gate de assinatura e respostas de erro das rotas de vendedores."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse

from app.bootstrap import get_subscription_validator
from app.constants import messages

if TYPE_CHECKING:
    from app.domain.results import OperationError

logger = logging.getLogger(__name__)


def error_response(error: OperationError | None) -> JSONResponse:
    """Converte OperationError em JSONResponse (500 genérico se ausente)."""
    if error is None:
        return internal_error_response()
    return JSONResponse(status_code=error.status_code, content=error.to_response())


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": messages.INTERNAL_SERVER_ERROR, "status": 500},
    )


async def require_active_subscription(seller_id: str) -> JSONResponse | None:
    """Gate de rota: None libera; caso contrário a resposta de negação.

    Falhas inesperadas do validador viram 500 "internal server error".
    """
    try:
        denial = await get_subscription_validator().check_subscription_middleware(seller_id)
    except Exception as exc:
        logger.exception(
            "subscription_gate_failed",
            extra={"error_type": type(exc).__name__},
        )
        return internal_error_response()

    if denial is None:
        return None
    return error_response(denial.error)
