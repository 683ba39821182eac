"""Resultados de operação e taxonomia de erros de negócio.

Rejeições de regra de negócio nunca são lançadas: viram OperationError
dentro de um resultado, e a camada HTTP as converte em resposta.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from app.constants import messages


class ErrorKind(StrEnum):
    """Categorias de erro de negócio."""

    MISSING_WALLET = "missing_wallet"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_PERCENT_CONFIG = "invalid_percent_config"
    AMOUNT_BELOW_FEE = "amount_below_fee"
    MISSING_SELLER_ID = "missing_seller_id"
    NO_ACTIVE_SUBSCRIPTION = "no_active_subscription"
    SUBSCRIPTION_OVERDUE = "subscription_overdue"
    SUBSCRIPTION_PENDING_DOCUMENTS = "subscription_pending_documents"
    SUBSCRIPTION_INACTIVE = "subscription_inactive"
    SELLER_NOT_FOUND = "seller_not_found"
    INVALID_REQUEST = "invalid_request"
    UNEXPECTED = "unexpected"


# Status HTTP padrão por categoria (UNEXPECTED depende da exceção)
KIND_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.MISSING_WALLET: 400,
    ErrorKind.INVALID_AMOUNT: 400,
    ErrorKind.INVALID_PERCENT_CONFIG: 400,
    ErrorKind.AMOUNT_BELOW_FEE: 400,
    ErrorKind.MISSING_SELLER_ID: 400,
    ErrorKind.NO_ACTIVE_SUBSCRIPTION: 403,
    ErrorKind.SUBSCRIPTION_OVERDUE: 403,
    ErrorKind.SUBSCRIPTION_PENDING_DOCUMENTS: 403,
    ErrorKind.SUBSCRIPTION_INACTIVE: 403,
    ErrorKind.SELLER_NOT_FOUND: 404,
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.UNEXPECTED: 500,
}


@dataclass(frozen=True, slots=True)
class OperationError:
    """Erro de negócio pronto para virar resposta HTTP.

    Attributes:
        message: Texto para o cliente (ecoado verbatim)
        status_code: Status HTTP
        kind: Categoria do erro
        details: Dados extras (ex: erros do gateway), nunca PII
    """

    message: str
    status_code: int
    kind: ErrorKind
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def of(cls, kind: ErrorKind, message: str) -> OperationError:
        return cls(message=message, status_code=KIND_STATUS_CODES[kind], kind=kind)

    def to_response(self) -> dict[str, Any]:
        """Corpo JSON padrão de erro."""
        return {"success": False, "message": self.message, "status": self.status_code}


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Resultado de uma checagem sem payload."""

    success: bool
    error: OperationError | None = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("Resultado de sucesso não pode conter error")
        if not self.success and self.error is None:
            raise ValueError("Resultado de falha deve conter error")

    @classmethod
    def ok(cls) -> OperationResult:
        return cls(success=True)

    @classmethod
    def fail(cls, error: OperationError) -> OperationResult:
        return cls(success=False, error=error)


def format_error(
    exc: BaseException,
    default_message: str = messages.INTERNAL_SERVER_ERROR,
) -> OperationError:
    """Converte exceção inesperada em OperationError.

    Status vem de `exc.status_code` quando for inteiro; senão 500.
    Mensagem vem de str(exc), ou default_message se vazia.
    """
    status_code = getattr(exc, "status_code", None)
    if not isinstance(status_code, int) or isinstance(status_code, bool):
        status_code = KIND_STATUS_CODES[ErrorKind.UNEXPECTED]

    details: dict[str, Any] = {"exception": type(exc).__name__}
    gateway_errors = getattr(exc, "errors", None)
    if gateway_errors:
        details["errors"] = list(gateway_errors)

    return OperationError(
        message=str(exc) or default_message,
        status_code=status_code,
        kind=ErrorKind.UNEXPECTED,
        details=details,
    )
